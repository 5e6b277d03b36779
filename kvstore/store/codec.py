"""
Snapshot Codec Module

Serializes a KeyValueStore to bytes and back. Nothing here touches the
filesystem: save() hands the caller bytes it now owns, load() builds a
brand-new store from bytes.

Format (UTF-8 JSON):
    {"version": 1, "entries": {"<key>": "<value>", ...}}

Keys are written in sorted order so equal stores give equal bytes.
"""

import json
import logging

from .store import KeyValueStore
from ..config.settings import settings

logger = logging.getLogger(__name__)


class StoreDecodeError(ValueError):
    """Raised when bytes cannot be decoded into a store."""


def save(store: KeyValueStore) -> bytes:
    """
    Serialize every entry of a store.

    Args:
        store: The store to serialize (left unchanged)

    Returns:
        The encoded snapshot
    """
    entries = {key: store.get(key) for key in store.keys()}
    document = {"version": settings.SNAPSHOT_VERSION, "entries": entries}
    data = json.dumps(document, sort_keys=True)
    logger.debug(f"Saved snapshot with {len(entries)} entries")
    return data.encode(settings.SNAPSHOT_ENCODING)


def load(data: bytes) -> KeyValueStore:
    """
    Build a new store from a snapshot produced by save().

    Args:
        data: Encoded snapshot

    Returns:
        A new KeyValueStore holding the snapshot's entries

    Raises:
        StoreDecodeError: If the bytes are not a valid snapshot. No
            partially-filled store is ever returned.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise StoreDecodeError(f"expected bytes, not {type(data).__name__}")

    try:
        document = json.loads(bytes(data).decode(settings.SNAPSHOT_ENCODING))
    except UnicodeDecodeError as e:
        raise StoreDecodeError(f"snapshot is not valid {settings.SNAPSHOT_ENCODING}") from e
    except json.JSONDecodeError as e:
        raise StoreDecodeError(f"snapshot is not valid JSON: {e.msg}") from e

    if not isinstance(document, dict):
        raise StoreDecodeError("snapshot must be a JSON object")

    version = document.get("version")
    if version != settings.SNAPSHOT_VERSION:
        raise StoreDecodeError(f"unsupported snapshot version: {version!r}")

    entries = document.get("entries")
    if not isinstance(entries, dict):
        raise StoreDecodeError("snapshot 'entries' must be a JSON object")

    store = KeyValueStore()
    for key, value in entries.items():
        if not isinstance(value, str):
            raise StoreDecodeError(f"value for key {key!r} must be a string")
        store.set(key, value)

    logger.debug(f"Loaded snapshot with {store.size()} entries")
    return store
