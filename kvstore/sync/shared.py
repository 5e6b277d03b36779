"""
Shared Store Module

Layers a ReadWriteLock around a KeyValueStore so several threads can use
one store. The store itself stays single-threaded; every access from
here goes through the lock.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from .rwlock import ReadWriteLock
from ..store.store import KeyValueStore

logger = logging.getLogger(__name__)


class StoreView:
    """
    Read-only face of a KeyValueStore, handed out under the read lock.

    Only the pure reads are exposed; there is no set(), delete() or
    borrow(), so readers sharing the lock cannot change the store or its
    borrow count.
    """

    __slots__ = ("_store",)

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def size(self) -> int:
        return self._store.size()

    def is_empty(self) -> bool:
        return self._store.is_empty()

    def keys(self) -> List[str]:
        return self._store.keys()

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"


class SharedStore:
    """
    Thread-safe access to a KeyValueStore.

    read() gives a read-only StoreView for multi-step reads; write()
    gives the wrapped store itself under the exclusive lock. The
    single-call helpers take the matching lock for just that call.

    get() returns the stored str, which is immutable, so a reader may
    keep using it after the lock is released even if a writer later
    replaces or deletes the entry.

    Attributes:
        lock: The ReadWriteLock guarding the store
    """

    def __init__(self, store: Optional[KeyValueStore] = None):
        """
        Args:
            store: Store to take over (default: a new empty store). The
                caller should drop its own reference to it.
        """
        self._store = store if store is not None else KeyValueStore()
        self.lock = ReadWriteLock()

    @contextmanager
    def read(self) -> Iterator[StoreView]:
        """Yield a read-only view of the store while holding the read lock."""
        with self.lock.read_lock():
            yield StoreView(self._store)

    @contextmanager
    def write(self) -> Iterator[KeyValueStore]:
        """Yield the store while holding the write lock."""
        with self.lock.write_lock():
            yield self._store

    def get(self, key: str) -> Optional[str]:
        with self.read() as store:
            return store.get(key)

    def set(self, key: str, value: str) -> None:
        with self.write() as store:
            store.set(key, value)

    def delete(self, key: str) -> Optional[str]:
        with self.write() as store:
            value = store.delete(key)
        if value is None:
            logger.debug(f"Delete of missing key {key!r}")
        return value

    def size(self) -> int:
        with self.read() as store:
            return store.size()

    def is_empty(self) -> bool:
        with self.read() as store:
            return store.is_empty()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._store!r})"
