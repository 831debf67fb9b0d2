"""
Tests for key-value backends and the snapshot repository.
"""

import json
import typing

from helix.domain.profiles import CompositionItem, SavedSnapshot
from helix.store import HISTORY_KEYS, JsonFileStore, KeyValueStore, MemoryStore, SnapshotRepository


def _snapshot(name: str, **kwargs) -> SavedSnapshot:
    return SavedSnapshot(name=name, lab="flavour", profile={"target_acidity": 6.0}, **kwargs)


class FailingStore:
    """Store whose writes always fail."""

    def __init__(self, initial: str | None = None):
        self.value = initial

    def get(self, key: str) -> str | None:
        return self.value

    def set(self, key: str, value: str) -> bool:
        return False


class TestBackends:
    def test_backends_satisfy_protocol(self, tmp_path):
        assert isinstance(MemoryStore(), KeyValueStore)
        assert isinstance(JsonFileStore(tmp_path / "s.json"), KeyValueStore)

    def test_memory_store(self):
        store = MemoryStore()

        assert store.get("k") is None
        assert store.set("k", "v") is True
        assert store.get("k") == "v"

    def test_file_store_persists_across_instances(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        JsonFileStore(path).set("flavourHistory", "[]")

        assert JsonFileStore(path).get("flavourHistory") == "[]"
        assert json.loads(path.read_text()) == {"flavourHistory": "[]"}

    def test_file_store_keeps_other_keys(self, tmp_path):
        store = JsonFileStore(tmp_path / "store.json")
        store.set("a", "1")
        store.set("b", "2")

        assert (store.get("a"), store.get("b")) == ("1", "2")

    def test_file_store_corrupt_file_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{not json")

        assert JsonFileStore(path).get("a") is None

    def test_file_store_non_object_reads_empty(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("[1, 2]")

        assert JsonFileStore(path).get("a") is None

    def test_file_store_write_failure(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")

        assert JsonFileStore(blocker / "store.json").set("a", "1") is False


class TestSnapshotRepository:
    def test_annotations_resolve(self):
        hints = typing.get_type_hints(SnapshotRepository.add)

        assert hints["return"] == list[SavedSnapshot]

    def test_empty(self, memory_store):
        assert SnapshotRepository(memory_store, "flavourHistory").list() == []

    def test_add_prepends(self, memory_store):
        repo = SnapshotRepository(memory_store, "flavourHistory")
        first = _snapshot("first")
        second = _snapshot("second")

        repo.add(first)
        result = repo.add(second)

        assert [s.id for s in result] == [second.id, first.id]
        assert [s.id for s in repo.list()] == [second.id, first.id]

    def test_round_trip_preserves_fields(self, memory_store):
        repo = SnapshotRepository(memory_store, "flavourHistory")
        snapshot = _snapshot(
            "tonic",
            composition=[CompositionItem(entity_id="ING_LIME", weight=70)],
            generated_text="## Analysis",
        )

        repo.add(snapshot)

        assert repo.get(snapshot.id) == snapshot

    def test_get_unknown(self, memory_store):
        assert SnapshotRepository(memory_store, "flavourHistory").get("nope") is None

    def test_delete(self, memory_store):
        repo = SnapshotRepository(memory_store, "flavourHistory")
        snapshot = _snapshot("one")
        repo.add(snapshot)

        assert repo.delete(snapshot.id) is True
        assert repo.list() == []
        assert repo.delete(snapshot.id) is False

    def test_corrupt_payload_reads_empty(self):
        store = MemoryStore({"flavourHistory": "definitely not json"})

        assert SnapshotRepository(store, "flavourHistory").list() == []

    def test_invalid_entries_read_empty(self):
        store = MemoryStore({"flavourHistory": json.dumps([{"id": "x"}])})

        assert SnapshotRepository(store, "flavourHistory").list() == []

    def test_write_failure_still_returns_list(self):
        repo = SnapshotRepository(FailingStore(), "flavourHistory")
        snapshot = _snapshot("unsaved")

        assert [s.id for s in repo.add(snapshot)] == [snapshot.id]

    def test_for_lab_keys(self, memory_store):
        assert HISTORY_KEYS == {
            "synthesis": "synthesisHistory",
            "flavour": "flavourHistory",
            "cordial": "cordialHistory",
        }
        assert SnapshotRepository.for_lab(memory_store, "cordial").key == "cordialHistory"

    def test_file_backed_repository(self, tmp_path):
        store = JsonFileStore(tmp_path / "store.json")
        snapshot = _snapshot("persisted")
        SnapshotRepository(store, "flavourHistory").add(snapshot)

        reloaded = SnapshotRepository(JsonFileStore(tmp_path / "store.json"), "flavourHistory").list()

        assert [s.name for s in reloaded] == ["persisted"]
