"""
KV-Store: In-Process Key-Value Store

A small in-memory store mapping string keys to string values, with an
explicit contract for who owns the data each operation touches.
"""

from .store import BorrowError, KeyValueStore

__version__ = "1.0.0"

__all__ = ["BorrowError", "KeyValueStore"]
