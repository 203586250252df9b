"""
ShortLink store strategies using Strategy Pattern.

Allows switching between persistence backends:
- SQLAlchemy: any database SQLAlchemy supports (SQLite, PostgreSQL, ...), pooled
- Memory: process local, for development and tests
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from shortlink_app.models.short_link import ShortLink, url_digest
from shortlink_app.services.exceptions import StoreConflictError, StoreError
from shortlink_app.storage.models import ShortLinkRecord

logger = logging.getLogger(__name__)


class ShortLinkStore(ABC):
    """
    Abstract base class for ShortLink stores.
    
    Implementations must be safe to share between concurrent callers and
    must enforce uniqueness of both ``id`` and ``url`` on insert.
    
    All failures are raised as StoreError. A missing row is None, not an error.
    """
    
    @abstractmethod
    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        """
        Look up a ShortLink by exact url match.
        
        Args:
            url: Url as submitted
            
        Returns:
            The record, or None if the url was never shortened
        """
        pass
    
    @abstractmethod
    def find_by_id(self, short_id: str) -> Optional[ShortLinkRecord]:
        """
        Look up a ShortLink by its short id.
        
        Args:
            short_id: Any string, no format check is done
            
        Returns:
            The record, or None if no such id exists
        """
        pass
    
    @abstractmethod
    def insert(self, short_id: str, url: str) -> ShortLinkRecord:
        """
        Insert a new ShortLink.
        
        Raises:
            StoreConflictError: if the id or the url already exists
            StoreError: on any other failure
        """
        pass


class SQLAlchemyShortLinkStore(ShortLinkStore):
    """
    Store backed by a SQLAlchemy engine.
    
    The engine's connection pool is the only shared resource. Every call
    opens and closes its own session, so one instance serves all requests.
    """
    
    def __init__(self, engine: Engine):
        """
        Args:
            engine: Pooled SQLAlchemy engine (see database.connection.build_engine)
        """
        self.engine = engine
        self._session_factory = sessionmaker(
            bind=engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )
    
    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        # Indexed digest narrows the lookup, the url comparison rules out hash collisions
        return self._find_one(ShortLink.url_hash == url_digest(url), ShortLink.url == url)
    
    def find_by_id(self, short_id: str) -> Optional[ShortLinkRecord]:
        return self._find_one(ShortLink.id == short_id)
    
    def insert(self, short_id: str, url: str) -> ShortLinkRecord:
        try:
            with self._session_factory.begin() as session:
                session.add(ShortLink.for_url(short_id, url))
        except IntegrityError as e:
            raise StoreConflictError(str(e.orig)) from e
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        
        return ShortLinkRecord(id=short_id, url=url)
    
    def _find_one(self, *conditions) -> Optional[ShortLinkRecord]:
        try:
            with self._session_factory() as session:
                row = session.execute(select(ShortLink).where(*conditions)).scalar_one_or_none()
                return ShortLinkRecord.model_validate(row) if row is not None else None
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e


class InMemoryShortLinkStore(ShortLinkStore):
    """
    Process-local store (two dicts behind one lock).
    
    Good for:
    - Development without a database
    - Testing
    
    Data is lost on restart and not shared between worker processes.
    """
    
    def __init__(self):
        self._by_id: Dict[str, str] = {}
        self._by_url: Dict[str, str] = {}
        self._lock = threading.Lock()
    
    def find_by_url(self, url: str) -> Optional[ShortLinkRecord]:
        with self._lock:
            short_id = self._by_url.get(url)
        return ShortLinkRecord(id=short_id, url=url) if short_id is not None else None
    
    def find_by_id(self, short_id: str) -> Optional[ShortLinkRecord]:
        with self._lock:
            url = self._by_id.get(short_id)
        return ShortLinkRecord(id=short_id, url=url) if url is not None else None
    
    def insert(self, short_id: str, url: str) -> ShortLinkRecord:
        with self._lock:
            if short_id in self._by_id:
                raise StoreConflictError(f"duplicate key value violates unique constraint: id={short_id}")
            if url in self._by_url:
                raise StoreConflictError(f"duplicate key value violates unique constraint: url={url}")
            self._by_id[short_id] = url
            self._by_url[url] = short_id
        return ShortLinkRecord(id=short_id, url=url)
    
    def __len__(self) -> int:
        with self._lock:
            return len(self._by_id)
