"""
pytest configuration and fixtures for the user API test suite
Runs entirely in-process: the store dependency is replaced per test.
"""

import os
import sys
from pathlib import Path
from unittest.mock import AsyncMock

import pytest

os.environ.setdefault("STORE_BACKEND", "memory")
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from fastapi.testclient import TestClient

from app import app
from services.base_service import ServiceResult, RESOURCE_NOT_FOUND
from services.users_service import UserStore, InMemoryUserStore, get_user_store


def user_record(user_id=1, name="Test User", email="test@example.com"):
    return {"id": user_id, "name": name, "email": email}


@pytest.fixture
def mock_store():
    """Stub store; tests program return values and assert on calls"""
    store = AsyncMock(spec=UserStore)
    store.get_all.return_value = ServiceResult.ok([])
    store.get_by_id.return_value = ServiceResult.failure("User not found", RESOURCE_NOT_FOUND)
    store.ping.return_value = True
    return store


@pytest.fixture
def memory_store():
    return InMemoryUserStore()


@pytest.fixture
def client(mock_store):
    app.dependency_overrides[get_user_store] = lambda: mock_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(memory_store):
    app.dependency_overrides[get_user_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()
