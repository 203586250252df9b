"""
Store module for ShortLink persistence.

This module implements the Strategy Pattern for pluggable persistence.
The service only sees the find_by_url / find_by_id / insert capability set.
"""

from .models import ShortLinkRecord
from .strategies import ShortLinkStore, SQLAlchemyShortLinkStore, InMemoryShortLinkStore
from .factory import StoreFactory, StoreBackend

__all__ = [
    "ShortLinkRecord",
    "ShortLinkStore",
    "SQLAlchemyShortLinkStore",
    "InMemoryShortLinkStore",
    "StoreFactory",
    "StoreBackend",
]
