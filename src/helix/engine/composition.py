"""
Helix - Composition state.

The weighted multiset of catalog entities a user is blending. Owned by a
single lab session; recomputation is the session's job.
"""

from collections.abc import Iterator

from helix.domain.profiles import CompositionItem

DEFAULT_WEIGHT = 50.0
MAX_WEIGHT = 100.0


class Composition:
    """Ordered composition with at most one item per entity."""

    def __init__(self, items: list[CompositionItem] | None = None):
        self._items: list[CompositionItem] = []
        for item in items or []:
            self.add(item.entity_id, item.weight)

    def __iter__(self) -> Iterator[CompositionItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: object) -> bool:
        return any(item.entity_id == entity_id for item in self._items)

    @property
    def items(self) -> list[CompositionItem]:
        return list(self._items)

    @property
    def total_weight(self) -> float:
        return sum(item.weight for item in self._items)

    def add(self, entity_id: str, weight: float = DEFAULT_WEIGHT) -> bool:
        """Add an entity. Returns False if it was already present."""
        if entity_id in self:
            return False
        self._items.append(CompositionItem(entity_id=entity_id, weight=_clamp(weight)))
        return True

    def remove(self, entity_id: str) -> bool:
        """Remove an entity. Returns False if it was not present."""
        before = len(self._items)
        self._items = [item for item in self._items if item.entity_id != entity_id]
        return len(self._items) != before

    def set_weight(self, entity_id: str, weight: float) -> bool:
        """Replace an item's weight (clamped to 0..100)."""
        for index, item in enumerate(self._items):
            if item.entity_id == entity_id:
                self._items[index] = item.model_copy(update={"weight": _clamp(weight)})
                return True
        return False

    def clear(self) -> None:
        self._items = []

    def replace(self, items: list[CompositionItem]) -> None:
        """Swap in a whole composition (e.g. from a snapshot)."""
        self.clear()
        for item in items:
            self.add(item.entity_id, item.weight)


def _clamp(weight: float) -> float:
    return min(max(float(weight), 0.0), MAX_WEIGHT)
