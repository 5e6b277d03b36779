"""
Tests for borrow scopes

A borrow opened with store.borrow() must block set() and delete() until
it is closed.

Run with: python -m pytest tests/test_borrow.py -v
"""

import pytest
from kvstore.store.store import BorrowError, KeyValueStore


class TestBorrowScope:
    """Test the borrow() context manager."""

    def test_borrow_yields_value(self, populated_store: KeyValueStore):
        with populated_store.borrow("name") as name:
            assert name == "Alice"

    def test_borrow_missing_key_yields_none(self, store: KeyValueStore):
        with store.borrow("missing") as value:
            assert value is None

    def test_borrow_count(self, populated_store: KeyValueStore):
        """Test active_borrows follows open scopes."""
        assert populated_store.active_borrows == 0
        with populated_store.borrow("name"):
            assert populated_store.active_borrows == 1
            with populated_store.borrow("city"):
                assert populated_store.active_borrows == 2
            assert populated_store.active_borrows == 1
        assert populated_store.active_borrows == 0

    def test_reads_allowed_during_borrow(self, populated_store: KeyValueStore):
        """Test reads are not blocked by a borrow."""
        with populated_store.borrow("name") as name:
            assert populated_store.get("city") == "Seattle"
            assert populated_store.size() == 3
            assert not populated_store.is_empty()
            assert name == "Alice"


class TestBorrowExclusivity:
    """Test mutation is rejected while a borrow is alive."""

    def test_set_rejected(self, populated_store: KeyValueStore):
        with populated_store.borrow("name") as name:
            with pytest.raises(BorrowError):
                populated_store.set("name", "Bob")
            assert name == "Alice"
        assert populated_store.get("name") == "Alice"

    def test_set_of_other_key_rejected(self, populated_store: KeyValueStore):
        """Test any mutation is blocked, not only of the borrowed key."""
        with populated_store.borrow("name"):
            with pytest.raises(BorrowError):
                populated_store.set("new", "value")
        assert "new" not in populated_store
        assert populated_store.size() == 3

    def test_delete_rejected(self, populated_store: KeyValueStore):
        with populated_store.borrow("city"):
            with pytest.raises(BorrowError):
                populated_store.delete("city")
        assert populated_store.get("city") == "Seattle"

    def test_delete_missing_key_rejected(self, populated_store: KeyValueStore):
        with populated_store.borrow("name"):
            with pytest.raises(BorrowError):
                populated_store.delete("missing")

    def test_borrow_error_is_runtime_error(self):
        assert issubclass(BorrowError, RuntimeError)

    def test_mutation_allowed_after_borrow(self, populated_store: KeyValueStore):
        """Test closing every borrow re-enables mutation."""
        with populated_store.borrow("language") as first:
            with populated_store.borrow("language") as second:
                assert first is None and second is None
        populated_store.set("language", "Python")
        assert populated_store.get("language") == "Python"

    def test_borrow_released_on_exception(self, populated_store: KeyValueStore):
        """Test an exception inside the scope still closes the borrow."""
        with pytest.raises(KeyError):
            with populated_store.borrow("name"):
                raise KeyError("boom")

        assert populated_store.active_borrows == 0
        assert populated_store.delete("name") == "Alice"

    def test_nested_borrow_still_blocks(self, populated_store: KeyValueStore):
        """Test mutation stays blocked until the outermost scope closes."""
        with populated_store.borrow("name"):
            with populated_store.borrow("city"):
                pass
            with pytest.raises(BorrowError):
                populated_store.set("name", "Bob")
