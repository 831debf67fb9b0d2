"""Id-indexed, read-only view over blendable catalog entities."""

from collections.abc import Iterable, Iterator, Mapping
from typing import Generic, TypeVar

from helix.engine.blend import Blendable

E = TypeVar("E", bound=Blendable)


class Catalog(Mapping[str, E], Generic[E]):
    """
    Ordered mapping of entity id -> entity.

    Later duplicates of an id replace earlier ones. Usable anywhere the
    engine accepts a catalog.
    """

    def __init__(self, entities: Iterable[E] = ()):
        self._by_id: dict[str, E] = {}
        for entity in entities:
            self._by_id[entity.id] = entity

    def __getitem__(self, entity_id: str) -> E:
        return self._by_id[entity_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_id)

    def __len__(self) -> int:
        return len(self._by_id)

    def entities(self) -> list[E]:
        return list(self._by_id.values())

    def categories(self) -> list[str]:
        """Distinct categories, sorted."""
        return sorted({getattr(entity, "category", "") for entity in self._by_id.values()} - {""})

    def resolve(self, entity_ids: Iterable[str]) -> list[E]:
        """Entities for the given ids, in order, skipping unknown ids."""
        return [self._by_id[i] for i in entity_ids if i in self._by_id]
