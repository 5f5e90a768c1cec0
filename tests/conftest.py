"""Shared test fixtures for the docdelta test suite."""

from __future__ import annotations

import pytest

from docdelta.config import DocDeltaConfig
from docdelta.persistence import (
    AsyncInMemorySectionChangesPersistence,
    InMemorySectionChangesPersistence,
)


@pytest.fixture
def config() -> DocDeltaConfig:
    """Default configuration."""
    return DocDeltaConfig()


@pytest.fixture
def store() -> InMemorySectionChangesPersistence:
    """Synchronous in-memory change store."""
    return InMemorySectionChangesPersistence()


@pytest.fixture
def async_store() -> AsyncInMemorySectionChangesPersistence:
    """Asynchronous in-memory change store."""
    return AsyncInMemorySectionChangesPersistence()
