"""
Test doubles for the service: deterministic ids and misbehaving stores.
"""

import threading
from typing import Iterable, Optional

from shortlink_app.services.exceptions import StoreError
from shortlink_app.services.short_id_strategies import ShortIdStrategy
from shortlink_app.storage.models import ShortLinkRecord
from shortlink_app.storage.strategies import InMemoryShortLinkStore, ShortLinkStore, SQLAlchemyShortLinkStore


class SequenceIdStrategy(ShortIdStrategy):
    """Hands out the given ids in order"""

    def __init__(self, ids: Iterable[str]):
        self.ids = iter(ids)
        self.calls = 0

    def generate(self) -> str:
        self.calls += 1
        return next(self.ids)


class FailingStore(ShortLinkStore):
    """Every operation fails like a dropped database connection"""

    message = "connection refused"

    def __init__(self):
        self.calls = 0

    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        self.calls += 1
        raise StoreError(self.message)

    def find_by_id(self, short_id: str) -> Optional[ShortLinkRecord]:
        self.calls += 1
        raise StoreError(self.message)

    def insert(self, short_id: str, url: str) -> ShortLinkRecord:
        self.calls += 1
        raise StoreError(self.message)


class RacingStore(InMemoryShortLinkStore):
    """
    Simulates a concurrent request winning the race for ``url``.
    
    The first find_by_url misses, then the rival's row appears before our insert.
    """

    def __init__(self, url: str, rival_id: str):
        super().__init__()
        self.url = url
        self.rival_id = rival_id
        self._raced = False

    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        if url == self.url and not self._raced:
            self._raced = True
            super().insert(self.rival_id, url)
            return None
        return super().find_by_url(url)


class LookupBarrierStore(SQLAlchemyShortLinkStore):
    """
    SQL store where each thread's first find_by_url waits for all the others.
    
    Every caller misses the lookup before anyone inserts, so all of them
    go through the insert and only one can win.
    """

    def __init__(self, engine, parties: int):
        super().__init__(engine)
        self.barrier = threading.Barrier(parties, timeout=10)
        self._seen = threading.local()

    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        record = super().find_by_url(url)
        if not getattr(self._seen, "done", False):
            self._seen.done = True
            self.barrier.wait()
        return record
