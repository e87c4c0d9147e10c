"""Pytest configuration and fixtures."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from user_api.main import app
from user_api.services import get_user_store
from user_api.services.user_store import InMemoryUserStore


@pytest.fixture
def store() -> InMemoryUserStore:
    """Create a store holding the two seed users."""
    return InMemoryUserStore()


@pytest.fixture
def empty_store() -> InMemoryUserStore:
    """Create a store without seed users."""
    return InMemoryUserStore(seed=False)


@pytest.fixture
def client(store: InMemoryUserStore) -> Iterator[TestClient]:
    """Create a FastAPI test client backed by a fresh seeded store."""
    app.dependency_overrides[get_user_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def valid_payload() -> dict:
    """A user payload that passes validation."""
    return {"name": "Alice Brown", "email": "alice@example.com", "department": "HR"}
