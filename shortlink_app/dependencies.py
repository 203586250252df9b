"""
FastAPI dependencies for dependency injection.

The store and id strategy are process-wide singletons. Routes only depend
on ShortenerService, tests override get_store to inject their own store.
"""

from functools import lru_cache

from fastapi import Depends

from shortlink_app.config import settings
from shortlink_app.services.short_id_strategies import RandomShortIdStrategy, ShortIdStrategy
from shortlink_app.services.shortener_service import ShortenerService
from shortlink_app.storage.factory import StoreFactory, StoreBackend
from shortlink_app.storage.strategies import ShortLinkStore


@lru_cache()
def get_store() -> ShortLinkStore:
    """
    Get store instance (singleton).
    
    Factory picks the backend from settings.store_backend.
    """
    backend = StoreBackend(settings.store_backend)
    return StoreFactory.create(backend)


@lru_cache()
def get_id_strategy() -> ShortIdStrategy:
    """Get short id generator (singleton)."""
    return RandomShortIdStrategy(length=settings.short_id_length)


def get_shortener_service(
    store: ShortLinkStore = Depends(get_store),
    id_strategy: ShortIdStrategy = Depends(get_id_strategy),
) -> ShortenerService:
    """Get ShortenerService with its store and id strategy injected."""
    return ShortenerService(
        store=store,
        id_strategy=id_strategy,
        id_generation_retries=settings.id_generation_retries,
        reuse_existing_on_conflict=settings.reuse_existing_on_conflict,
    )
