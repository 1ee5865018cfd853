"""
Pytest configuration and fixtures for Brainmate tests.
"""

import os

# Settings are read at import time
os.environ.setdefault("API_BEARER_TOKEN", "test-bearer-token")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import asyncio
import pytest
from typing import Generator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

from brainmate.core.database import Base, get_db
from brainmate.core.config import settings
from brainmate.core.errors import StorageError
from brainmate.services.kv_store import (
    KeyValueStore,
    SQLAlchemyKeyValueStore,
    InMemoryKeyValueStore,
)


# Use in-memory SQLite database for tests
TEST_DATABASE_URL = "sqlite:///:memory:"


class YieldingStore(InMemoryKeyValueStore):
    """In-memory store that yields to the event loop after every read.

    Lets concurrent read-modify-write sequences interleave the way they can
    against a remote store.
    """

    async def get(self, key):
        value = await super().get(key)
        await asyncio.sleep(0)
        return value


class FailingStore(KeyValueStore):
    """Store whose every call fails."""

    def __init__(self, fail_on: str = "both"):
        self.fail_on = fail_on
        self.data = {}

    async def get(self, key):
        if self.fail_on in ("get", "both"):
            raise StorageError(f"get {key!r} failed: connection refused")
        return self.data.get(key)

    async def set(self, key, value):
        if self.fail_on in ("set", "both"):
            raise StorageError(f"set {key!r} failed: connection refused")
        self.data[key] = value


@pytest.fixture(scope="function")
def db_engine():
    """Create a test database engine."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(db_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=db_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def store(db_session) -> SQLAlchemyKeyValueStore:
    """Key/value store over the test database."""
    return SQLAlchemyKeyValueStore(db_session)


@pytest.fixture(scope="function")
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture(scope="function")
def yielding_store() -> YieldingStore:
    return YieldingStore()


@pytest.fixture(scope="function")
def test_app(db_session):
    """Create a FastAPI test app without lifespan events or rate limiting."""
    from fastapi import FastAPI
    from brainmate.core.errors import register_error_handlers
    from brainmate.main import include_routers

    test_app = FastAPI(title="Brainmate - Test", version="1.0.0")
    register_error_handlers(test_app)
    include_routers(test_app)

    # Override database dependency
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    test_app.dependency_overrides[get_db] = override_get_db

    return test_app


@pytest.fixture(scope="function")
def client(test_app) -> TestClient:
    """Create a test client without entering context manager."""
    return TestClient(test_app, raise_server_exceptions=False)


@pytest.fixture(scope="function")
def auth_headers() -> dict:
    """Authentication headers carrying the static bearer credential."""
    return {"Authorization": f"Bearer {settings.API_BEARER_TOKEN}"}


@pytest.fixture(scope="function")
def authenticated_client(client, auth_headers) -> TestClient:
    """Create an authenticated test client."""
    client.headers.update(auth_headers)
    return client


@pytest.fixture(scope="function")
def failing_client(test_app, auth_headers) -> TestClient:
    """Authenticated client whose store fails on every call."""
    from brainmate.api.deps import get_store

    test_app.dependency_overrides[get_store] = lambda: FailingStore()
    client = TestClient(test_app, raise_server_exceptions=False)
    client.headers.update(auth_headers)
    return client


@pytest.fixture
def sample_article() -> dict:
    """Article as the client sends it when saving."""
    return {
        "id": "article-1714521600000-0",
        "title": "느린 사고가 만드는 깊이 있는 디자인",
        "platform": "Brunch",
        "platformIcon": "📚",
        "topics": ["디자인 철학", "인지심리"],
        "readTime": 8,
        "thumbnail": "https://images.unsplash.com/photo-1546098073-4d874a1c59f8",
        "author": "익명",
        "excerpt": "이 글은 깊이 있는 사고와 의도적인 읽기에 대한 탐구입니다...",
        "content": "# 느린 사고의 가치",
    }
