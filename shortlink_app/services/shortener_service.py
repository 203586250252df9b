from typing import Optional

from shortlink_app.services.exceptions import StoreConflictError
from shortlink_app.services.short_id_strategies import ShortIdStrategy
from shortlink_app.services.url_validation import validate_url
from shortlink_app.storage.strategies import ShortLinkStore


class ShortenerService:
    """
    Maps urls to short ids and back.
    
    The store and id strategy are injected, the service itself holds no
    mutable state, so a single instance is shared by every request.
    Store errors are raised to the caller untouched (never logged or
    swallowed here), the HTTP layer turns them into responses.
    """
    
    def __init__(
        self,
        store: ShortLinkStore,
        id_strategy: ShortIdStrategy,
        id_generation_retries: int = 0,
        reuse_existing_on_conflict: bool = True,
    ):
        """
        Initialize the service.
        
        Args:
            store: Persistent ShortLink store
            id_strategy: Generator for candidate short ids
            id_generation_retries: Extra insert attempts with a fresh id after
                a uniqueness conflict. 0 surfaces the first conflict.
            reuse_existing_on_conflict: After a conflict, re-read by url and
                return the id of whoever inserted the same url first.
        """
        self.store = store
        self.id_strategy = id_strategy
        self.id_generation_retries = id_generation_retries
        self.reuse_existing_on_conflict = reuse_existing_on_conflict

    def shorten(self, raw_url: str) -> str:
        """
        Return the short id for ``raw_url``, creating one if needed.
        
        Process:
        1. Validate the url (no store access if invalid)
        2. Return the existing id if the url was shortened before
        3. Otherwise generate a random id and insert it
        
        Raises:
            InvalidUrlError: url has no scheme or host
            StoreError: persistence failure on lookup or insert
        """
        validate_url(raw_url)
        
        existing = self.store.find_by_url(raw_url)
        if existing is not None:
            return existing.id
        
        for attempt in range(self.id_generation_retries + 1):
            short_id = self.id_strategy.generate()
            try:
                self.store.insert(short_id, raw_url)
            except StoreConflictError:
                if self.reuse_existing_on_conflict:
                    winner = self.store.find_by_url(raw_url)
                    if winner is not None:
                        return winner.id
                if attempt == self.id_generation_retries:
                    raise
                continue
            return short_id

    def resolve(self, short_id: str) -> Optional[str]:
        """
        Look up the url for ``short_id``.
        
        Returns None when the id was never issued.
        
        Raises:
            StoreError: persistence failure on lookup
        """
        link = self.store.find_by_id(short_id)
        return link.url if link is not None else None
