"""
Database engine and declarative base.

One pooled engine per process. Sessions are opened per store call,
so the engine is the only shared resource.
"""

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import DeclarativeBase

from shortlink_app.config import settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(database_url: str) -> Engine:
    """
    Create an engine for ``database_url``.
    
    Pool sizing from settings only applies to server databases. SQLite
    keeps SQLAlchemy's default pool and allows cross-thread use, since
    FastAPI runs sync endpoints in a threadpool.
    """
    url = make_url(database_url)
    engine_kwargs = {"echo": settings.db_echo}
    
    if url.get_backend_name() == "sqlite":
        engine_kwargs["connect_args"] = {"check_same_thread": False}
    else:
        engine_kwargs.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
        )
    
    engine = create_engine(url, **engine_kwargs)
    logger.info("Engine created for %s", url.get_backend_name())
    return engine


engine = build_engine(settings.database_url)


def init_db(bind: Engine = engine) -> None:
    """Create the ``urls`` table if it does not exist yet."""
    # Import models so they're registered with Base
    from shortlink_app.models import ShortLink  # noqa: F401
    
    Base.metadata.create_all(bind=bind)
