"""
Test configuration and fixtures for the link API.
This centralizes all test setup, making individual tests clean.
"""

import os

# Point settings at a throwaway database before the app is imported
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["STORAGE_BACKEND"] = "sqlalchemy"
os.environ["SHORT_CODE_STRATEGY"] = "random"

import pytest
from fastapi.testclient import TestClient

from main import app
from shortlink_app.database.connection import Base, SessionLocal, engine, get_db
from shortlink_app.dependencies import get_link_store
from shortlink_app.services.short_code_strategies import RandomShortCodeStrategy
from shortlink_app.storage.factory import LinkStoreFactory
from shortlink_app.storage.strategies import InMemoryLinkStore, SQLAlchemyLinkStore

TEST_API_KEY = "test-api-key"
TEST_OWNER = "owner@example.com"


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def sql_store(db_session):
    """SQLAlchemy link store on the test session"""
    return SQLAlchemyLinkStore(db_session, RandomShortCodeStrategy(length=6, max_retries=5))


@pytest.fixture(scope="function")
def api_key(sql_store):
    """A provisioned API key in the test database"""
    return sql_store.add_api_key(TEST_API_KEY, TEST_OWNER)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database dependency overridden.
    This is the main fixture that tests will use.
    """
    def override_get_db():
        yield db_session
    
    app.dependency_overrides[get_db] = override_get_db
    
    with TestClient(app) as test_client:
        yield test_client
    
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def memory_store():
    """In-memory link store with the test API key registered"""
    store = InMemoryLinkStore(RandomShortCodeStrategy(length=6, max_retries=5))
    store.add_api_key(TEST_API_KEY, TEST_OWNER)
    yield store
    LinkStoreFactory.clear_instance()


@pytest.fixture(scope="function")
def client_with_store():
    """
    Build a test client whose link store is the given object.
    Used to hand the app an in-memory store or a failing stub.
    """
    clients = []
    
    def _make(store):
        app.dependency_overrides[get_link_store] = lambda: store
        test_client = TestClient(app)
        clients.append(test_client)
        return test_client
    
    yield _make
    
    for test_client in clients:
        test_client.close()
    app.dependency_overrides.clear()
