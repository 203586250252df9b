"""
Test configuration and fixtures for the shortener.
This centralizes all test setup, making individual tests clean.
"""

import os
import tempfile

# Point the app's own engine at a throwaway database before anything imports settings
os.environ.setdefault(
    "DATABASE_URL", f"sqlite:///{os.path.join(tempfile.gettempdir(), 'shortlink_test_app.db')}"
)

import pytest
from fastapi.testclient import TestClient

from main import app
from shortlink_app.database.connection import Base, build_engine
from shortlink_app.dependencies import get_store
from shortlink_app.services.short_id_strategies import RandomShortIdStrategy
from shortlink_app.services.shortener_service import ShortenerService
from shortlink_app.storage.strategies import InMemoryShortLinkStore, SQLAlchemyShortLinkStore


@pytest.fixture(scope="function")
def sql_engine(tmp_path):
    """
    Fresh SQLite database file per test.
    Tables are created up front and the engine disposed afterwards.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'shortlink.db'}")
    Base.metadata.create_all(bind=engine)
    
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture(scope="function")
def sql_store(sql_engine):
    """SQLAlchemy-backed store on the per-test database"""
    return SQLAlchemyShortLinkStore(sql_engine)


@pytest.fixture(scope="function")
def memory_store():
    """In-memory store, empty for each test"""
    return InMemoryShortLinkStore()


@pytest.fixture(scope="function")
def service(sql_store):
    """Service wired exactly like production: SQL store + random 6 char ids"""
    return ShortenerService(store=sql_store, id_strategy=RandomShortIdStrategy(length=6))


@pytest.fixture(scope="function")
def client(sql_store):
    """
    Create a test client with the store dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_store] = lambda: sql_store
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()
