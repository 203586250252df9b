"""
Factory for creating ShortLink store instances.
Simple, clean factory with singleton caching.
"""

import logging
from enum import Enum

from .strategies import ShortLinkStore, SQLAlchemyShortLinkStore, InMemoryShortLinkStore

logger = logging.getLogger(__name__)


class StoreBackend(Enum):
    """Available store backends"""
    SQLALCHEMY = "sqlalchemy"
    MEMORY = "memory"


class StoreFactory:
    """
    Simple factory for creating store instances.
    
    Uses Singleton Pattern - creates instance once, reuses it.
    The SQLAlchemy backend uses the process-wide engine from database.connection.
    """
    
    _instance: ShortLinkStore = None  # Single cached instance
    _backend: StoreBackend = None  # Backend the cached instance was built for
    
    @classmethod
    def create(cls, backend: StoreBackend) -> ShortLinkStore:
        """
        Create or return cached store instance.
        
        Args:
            backend: Type of store backend (from enum)
            
        Returns:
            Singleton store instance
            
        Raises:
            ValueError: if a store for a different backend already exists
        """
        if cls._instance is not None:
            if backend != cls._backend:
                raise ValueError(
                    f"Store already initialized with {cls._backend.value}, cannot switch to {backend}"
                )
            return cls._instance
        
        if backend == StoreBackend.SQLALCHEMY:
            from shortlink_app.database.connection import engine
            
            cls._instance = SQLAlchemyShortLinkStore(engine)
            logger.info("SQLAlchemy store initialized (%s)", engine.url.get_backend_name())
            
        elif backend == StoreBackend.MEMORY:
            cls._instance = InMemoryShortLinkStore()
            logger.info("In-memory store initialized")
            
        else:
            raise ValueError(f"Unknown store backend: {backend}")
        
        cls._backend = backend
        return cls._instance
    
    @classmethod
    def clear_instance(cls):
        """Clear cached instance (for testing)"""
        cls._instance = None
        cls._backend = None
