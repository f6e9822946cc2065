"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from litekv_client.store import KVStore
from tests.mocks.mock_service import TEST_APP_ID, FakeLiteKVService
from tests.mocks.mock_settings import make_settings


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def service() -> FakeLiteKVService:
    """Return an empty scripted LiteKV service."""
    return FakeLiteKVService()


@pytest.fixture
def store(service: FakeLiteKVService) -> KVStore:
    """Return a non-caching store talking to the fake service."""
    return KVStore(TEST_APP_ID, http_client=service.client())


@pytest.fixture
def cached_store(service: FakeLiteKVService) -> KVStore:
    """Return a caching store talking to the fake service."""
    return KVStore(TEST_APP_ID, should_cache=True, http_client=service.client())
