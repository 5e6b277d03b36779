"""Thread-safe wrappers layered around the single-threaded store."""

from .rwlock import ReadWriteLock
from .shared import SharedStore, StoreView

__all__ = ["ReadWriteLock", "SharedStore", "StoreView"]
