"""Shared fixtures for store tests."""

import pytest

from pocketbook.store.backend import MemoryStore


@pytest.fixture
def store() -> MemoryStore:
    """Empty in-memory store."""
    return MemoryStore()
