"""
Snapshot repository.

One key per lab holds that lab's saved snapshots as a JSON list, newest
first. Reads tolerate corrupt data (logged, treated as empty); a failed
write is logged and the in-memory result is still returned.
"""

from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from helix.domain.profiles import SavedSnapshot
from helix.store.adapter import KeyValueStore

logger = logging.getLogger(__name__)

_snapshot_list = TypeAdapter(list[SavedSnapshot])

# Fixed storage keys per lab
HISTORY_KEYS: dict[str, str] = {
    "synthesis": "synthesisHistory",
    "flavour": "flavourHistory",
    "cordial": "cordialHistory",
}


class SnapshotRepository:
    """Saved snapshots for one collection key."""

    def __init__(self, store: KeyValueStore, key: str):
        self.store = store
        self.key = key

    @classmethod
    def for_lab(cls, store: KeyValueStore, lab: str) -> "SnapshotRepository":
        return cls(store, HISTORY_KEYS[lab])

    def list(self) -> list[SavedSnapshot]:
        raw = self.store.get(self.key)
        if not raw:
            return []
        try:
            return _snapshot_list.validate_json(raw)
        except ValidationError as e:
            logger.error(f"Failed to load snapshots from '{self.key}': {e.error_count()} error(s)")
            return []

    def get(self, snapshot_id: str) -> SavedSnapshot | None:
        return next((s for s in self.list() if s.id == snapshot_id), None)

    def add(self, snapshot: SavedSnapshot) -> list[SavedSnapshot]:
        """Prepend a snapshot and persist. Returns the new list."""
        snapshots = [snapshot, *self.list()]
        self._write(snapshots)
        return snapshots

    def delete(self, snapshot_id: str) -> bool:
        """Remove a snapshot by id. Returns False if it did not exist."""
        snapshots = self.list()
        remaining = [s for s in snapshots if s.id != snapshot_id]
        if len(remaining) == len(snapshots):
            return False
        self._write(remaining)
        return True

    def _write(self, snapshots: list[SavedSnapshot]) -> bool:
        payload = json.dumps([s.model_dump(mode="json") for s in snapshots])
        ok = self.store.set(self.key, payload)
        if not ok:
            logger.warning(f"Snapshots for '{self.key}' were not persisted")
        return ok
