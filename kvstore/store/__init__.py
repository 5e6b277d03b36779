"""Store module for KV-Store."""

from .codec import StoreDecodeError, load, save
from .store import BorrowError, KeyValueStore

__all__ = ["BorrowError", "KeyValueStore", "StoreDecodeError", "load", "save"]
