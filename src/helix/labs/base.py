"""
Helix - Lab sessions.

A lab owns one editable profile, the analysis text streamed for it and
the last user-facing error. Blend labs add a composition over a catalog
and (where a variant exists) keep derived profile fields in sync with it.

run_analysis() yields events in the same shape the streaming front end
consumes:
    {"type": "chunk", "content": str}
    {"type": "error", "error": str, "kind": str}
    {"type": "done", "response": str}
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator, Iterable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from helix.catalog.catalog import Catalog
from helix.domain.profiles import CompositionItem, SavedSnapshot, TargetProfile
from helix.engine.blend import Blendable, BlendVariant, composition_percentages, merge_profile, recompute_profile
from helix.engine.composition import DEFAULT_WEIGHT, Composition
from helix.llm.client import call_llm_chat_stream
from helix.llm.errors import GenerationError
from helix.llm.model_router import AnalysisMode
from helix.store.adapter import KeyValueStore
from helix.store.backends import MemoryStore
from helix.store.snapshots import SnapshotRepository

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=TargetProfile)
E = TypeVar("E", bound=Blendable)


class Lab(ABC, Generic[P]):
    """Base lab session: profile + streamed analysis."""

    name: ClassVar[str]
    profile_class: ClassVar[type[TargetProfile]]

    def __init__(self, profile: P | None = None, mode: AnalysisMode | str = "standard"):
        self.profile: P = profile if profile is not None else self.profile_class()
        self.analysis: str = ""
        self.error: str | None = None
        self.mode = mode

    @property
    def node_name(self) -> str:
        return self.name

    @abstractmethod
    def build_messages(self) -> list[dict[str, str]]:
        """Chat messages for the analysis call."""

    def update_profile(self, **fields: Any) -> None:
        """Set user-authored profile fields (validated)."""
        self.profile = type(self.profile).model_validate({**self.profile.model_dump(), **fields})

    async def run_analysis(self) -> AsyncGenerator[dict[str, Any], None]:
        """
        Stream an analysis of the current state.

        Clears the previous analysis and error first. On failure the
        error is set and the text received so far is kept.
        """
        self.analysis = ""
        self.error = None
        messages = self.build_messages()

        try:
            async for token in call_llm_chat_stream(messages=messages, mode=self.mode, node_name=self.node_name):
                self.analysis += token
                yield {"type": "chunk", "content": token}
        except GenerationError as e:
            logger.error(f"{self.name} analysis failed ({e.kind.value}): {e}")
            self.error = e.user_message
            yield {"type": "error", "error": self.error, "kind": e.kind.value}
            return

        yield {"type": "done", "response": self.analysis}

    async def analyze(self) -> str:
        """Run the analysis to completion and return the text."""
        async for _ in self.run_analysis():
            pass
        return self.analysis


class BlendLab(Lab[P], Generic[P, E]):
    """
    Lab whose profile is (partly) derived from a weighted composition.

    Every composition change recomputes the derived fields when the lab
    has a variant. The engine no-ops on empty or zero-weight input, so the
    profile keeps its current values through those states.
    """

    variant: ClassVar[BlendVariant | None] = None

    def __init__(
        self,
        catalog: Iterable[E] = (),
        profile: P | None = None,
        mode: AnalysisMode | str = "standard",
        store: KeyValueStore | None = None,
    ):
        super().__init__(profile, mode)
        self.catalog: Catalog[E] = catalog if isinstance(catalog, Catalog) else Catalog(catalog)
        self.composition = Composition()
        self.history = SnapshotRepository.for_lab(store if store is not None else MemoryStore(), self.name)

    # --- Composition ---

    def add_entity(self, entity_id: str, weight: float = DEFAULT_WEIGHT) -> bool:
        added = self.composition.add(entity_id, weight)
        if added:
            self.recompute()
        return added

    def remove_entity(self, entity_id: str) -> bool:
        removed = self.composition.remove(entity_id)
        if removed:
            self.recompute()
        return removed

    def set_weight(self, entity_id: str, weight: float) -> bool:
        changed = self.composition.set_weight(entity_id, weight)
        if changed:
            self.recompute()
        return changed

    def set_catalog(self, catalog: Iterable[E]) -> None:
        """Swap the catalog. Items referencing missing ids stay but stop contributing."""
        self.catalog = catalog if isinstance(catalog, Catalog) else Catalog(catalog)
        self.recompute()

    def recompute(self) -> dict[str, float]:
        """Re-derive profile fields from the composition. Returns what changed."""
        if self.variant is None:
            return {}
        updates = recompute_profile(self.composition.items, self.catalog, self.variant)
        merge_profile(self.profile, updates)
        return updates

    @property
    def composition_entities(self) -> list[E]:
        """Resolved entities in composition order (dangling ids skipped)."""
        return self.catalog.resolve(item.entity_id for item in self.composition)

    @property
    def percentages(self) -> Mapping[str, float]:
        return composition_percentages(self.composition.items)

    # --- Snapshots ---

    def snapshots(self) -> list[SavedSnapshot]:
        return self.history.list()

    def save_snapshot(self, name: str) -> SavedSnapshot:
        name = name.strip()
        if not name:
            raise ValueError("Snapshot name must not be blank")
        snapshot = SavedSnapshot(
            name=name,
            lab=self.name,
            profile=self.profile.model_dump(),
            composition=self.composition.items,
            generated_text=self.analysis,
        )
        self.history.add(snapshot)
        logger.info(f"Saved {self.name} snapshot '{name}' ({snapshot.id})")
        return snapshot

    def load_snapshot(self, snapshot_id: str) -> SavedSnapshot | None:
        """Restore profile, composition and text. None if the id is unknown."""
        snapshot = self.history.get(snapshot_id)
        if snapshot is None:
            return None
        self.profile = self.profile_class.model_validate(snapshot.profile)
        self.composition.replace(snapshot.composition)
        self.analysis = snapshot.generated_text
        self.error = None
        return snapshot

    def delete_snapshot(self, snapshot_id: str) -> bool:
        return self.history.delete(snapshot_id)
