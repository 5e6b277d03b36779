"""
Pytest Configuration and Fixtures

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from kvstore.store.store import KeyValueStore
from kvstore.sync.shared import SharedStore


# ============================================================================
# KeyValueStore Fixtures
# ============================================================================

@pytest.fixture
def store() -> KeyValueStore:
    """Create a fresh, empty KeyValueStore."""
    return KeyValueStore()


@pytest.fixture
def populated_store() -> KeyValueStore:
    """Create a store holding three entries."""
    s = KeyValueStore()
    s.set("name", "Alice")
    s.set("city", "Seattle")
    s.set("country", "USA")
    return s


# ============================================================================
# SharedStore Fixtures
# ============================================================================

@pytest.fixture
def shared_store() -> SharedStore:
    """Create a SharedStore holding a single entry k -> v."""
    shared = SharedStore()
    shared.set("k", "v")
    return shared


# ============================================================================
# Pytest Configuration
# ============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "concurrency: marks tests that start threads"
    )
