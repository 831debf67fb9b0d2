"""
Helix - Durable storage.

KeyValueStore protocol, backends, and the snapshot repository on top.
"""

from helix.config import settings
from helix.store.adapter import KeyValueStore
from helix.store.backends import JsonFileStore, MemoryStore
from helix.store.snapshots import HISTORY_KEYS, SnapshotRepository


def get_default_store() -> KeyValueStore:
    """File store at settings.helix_store_path."""
    return JsonFileStore(settings.helix_store_path)


__all__ = [
    "HISTORY_KEYS",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "SnapshotRepository",
    "get_default_store",
]
