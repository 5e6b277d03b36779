"""
Key-Value Store Module

This module implements the core key-value storage and the ownership
contract of each operation:

- set(): the store takes the key and value; the caller keeps no handle
  into store state
- get(): returns the stored value for reading only
- delete(): removes the entry and hands its value back to the caller
- borrow(): scoped read access; the store refuses mutation until the
  scope ends
"""

import logging
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


class BorrowError(RuntimeError):
    """Raised when the store is mutated while a borrow is still alive."""


class KeyValueStore:
    """
    In-memory mapping of string keys to string values.

    This class provides O(1) average-case time complexity for:
    - get: Retrieve a value by key
    - set: Insert or update a key-value pair
    - delete: Remove a key-value pair and return its value

    Borrowing:
        borrow() opens a read scope over one value. While any scope is
        open, set() and delete() raise BorrowError and leave the store
        untouched. Several scopes may be open at once.

    Internal Storage:
        A plain dict, key -> value. Values are str, so the object handed
        out by get() can never be changed behind the store's back.

    Attributes:
        active_borrows: Number of borrow scopes currently open
    """

    def __init__(self):
        """Create an empty store."""
        self._entries: Dict[str, str] = {}
        self._borrows = 0

    @classmethod
    def create(cls) -> "KeyValueStore":
        """Return a new store with zero entries."""
        return cls()

    @property
    def active_borrows(self) -> int:
        """Number of borrow scopes currently open."""
        return self._borrows

    def get(self, key: str) -> Optional[str]:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up

        Returns:
            The stored value, or None if the key is not present

        Time Complexity: O(1) average

        A pure read: entry order and contents are left as they were.
        """
        return self._entries.get(key)

    def set(self, key: str, value: str) -> None:
        """
        Insert or update a key-value pair.

        If the key is already present its previous value is discarded and
        the size does not change; otherwise a new entry is created.

        Args:
            key: The key to store
            value: The value to associate with the key

        Raises:
            TypeError: If key or value is not a str
            BorrowError: If a borrow scope is open

        Time Complexity: O(1) average
        """
        if not isinstance(key, str):
            raise TypeError(f"key must be str, not {type(key).__name__}")
        if not isinstance(value, str):
            raise TypeError(f"value must be str, not {type(value).__name__}")
        self._check_mutable("set", key)

        # str subclasses may carry their own state; keep a plain copy
        key = str.__str__(key)
        value = str.__str__(value)

        if key in self._entries:
            logger.debug(f"Replacing value for key {key!r}")
        else:
            logger.debug(f"Creating entry for key {key!r}")
        self._entries[key] = value

    def delete(self, key: str) -> Optional[str]:
        """
        Remove a key-value pair and return its value.

        Args:
            key: The key to delete

        Returns:
            The value that was stored under key, or None if the key was
            not present (the store is then unchanged)

        Raises:
            BorrowError: If a borrow scope is open

        Time Complexity: O(1) average
        """
        self._check_mutable("delete", key)
        value = self._entries.pop(key, None)
        if value is not None:
            logger.debug(f"Removed entry for key {key!r}")
        return value

    @contextmanager
    def borrow(self, key: str) -> Iterator[Optional[str]]:
        """
        Open a read scope over the value stored under key.

        Usage:
            with store.borrow("name") as name:
                print(name)          # fine
                store.set("a", "b")  # raises BorrowError

        Yields:
            The stored value, or None if the key is not present
        """
        self._borrows += 1
        try:
            yield self._entries.get(key)
        finally:
            self._borrows -= 1

    def size(self) -> int:
        """Get the current number of entries in the store."""
        return len(self._entries)

    def is_empty(self) -> bool:
        """Check whether the store holds no entries."""
        return not self._entries

    def keys(self) -> List[str]:
        """
        Get a snapshot of the current keys.

        Returns:
            A new list; later changes to the store do not affect it
        """
        return list(self._entries)

    def _check_mutable(self, operation: str, key: str) -> None:
        if self._borrows:
            logger.debug(f"Rejected {operation} of {key!r}: {self._borrows} borrow(s) alive")
            raise BorrowError(
                f"cannot {operation} {key!r} while {self._borrows} borrow(s) are alive"
            )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._entries)})"
