"""
Helix - Blend Composition Engine.

Derives a target profile from a weighted composition of catalog entities.

Steps:
1. Resolve composition items to entities by id (dangling ids are dropped)
2. Guard: nothing resolved, or resolved weight sum == 0 -> no-op
3. Weighted arithmetic mean per target dimension
4. Bias rescaling for signed target dimensions (synthesis)

The engine never raises for empty compositions, zero weights or dangling
references. Live editing routinely passes through those states and the
profile must keep its current values when it happens.
"""

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from pydantic import BaseModel

from helix.domain.profiles import CompositionItem


@runtime_checkable
class Blendable(Protocol):
    """Anything with an id and a fixed-shape DNA vector."""

    id: str

    def dna_vector(self) -> Mapping[str, float]:
        ...


@dataclass(frozen=True)
class BiasScale:
    """
    Affine rescale from a source range to a signed target range.

    target = value - midpoint(source range). Both ranges have the same width,
    so the source minimum lands on the target minimum and the midpoint on 0.
    """

    source_key: str
    source_min: float = 0.0
    source_max: float = 10.0

    @property
    def midpoint(self) -> float:
        return (self.source_min + self.source_max) / 2

    @property
    def target_min(self) -> float:
        return self.source_min - self.midpoint

    @property
    def target_max(self) -> float:
        return self.source_max - self.midpoint

    def rescale(self, value: float) -> float:
        return value - self.midpoint


@dataclass(frozen=True)
class BlendVariant:
    """
    Fixed mapping from source DNA keys to target profile fields.

    dimensions: target field -> source DNA key (plain weighted average)
    biases: target field -> BiasScale (weighted average, then rescaled)
    """

    name: str
    dimensions: Mapping[str, str]
    biases: Mapping[str, BiasScale] = field(default_factory=dict)

    @property
    def target_fields(self) -> tuple[str, ...]:
        return (*self.dimensions, *self.biases)


def index_catalog(catalog: Mapping[str, Blendable] | Iterable[Blendable]) -> Mapping[str, Blendable]:
    """Return an id -> entity mapping for a catalog given as list or mapping."""
    if isinstance(catalog, Mapping):
        return catalog
    return {entity.id: entity for entity in catalog}


def resolve_composition(
    composition: Sequence[CompositionItem],
    catalog: Mapping[str, Blendable] | Iterable[Blendable],
) -> list[tuple[Blendable, float]]:
    """Join items to entities, silently dropping dangling references."""
    by_id = index_catalog(catalog)
    resolved = []
    for item in composition:
        entity = by_id.get(item.entity_id)
        if entity is not None:
            resolved.append((entity, item.weight))
    return resolved


def recompute_profile(
    composition: Sequence[CompositionItem],
    catalog: Mapping[str, Blendable] | Iterable[Blendable],
    variant: BlendVariant,
) -> dict[str, float]:
    """
    Compute the derived profile fields for a composition.

    Returns an empty dict when there is nothing to average (no resolved
    items or a zero weight sum); callers merge the result, so an empty dict
    leaves the current profile untouched.

    Example:
        updates = recompute_profile(lab.composition, catalog, FLAVOUR)
        merge_profile(lab.profile, updates)
    """
    resolved = resolve_composition(composition, catalog)
    if not resolved:
        return {}

    total_weight = sum(weight for _, weight in resolved)
    if total_weight == 0:
        return {}

    vectors = [(entity.dna_vector(), weight) for entity, weight in resolved if weight > 0]

    def weighted_average(key: str) -> float:
        mean = sum(dna[key] * weight for dna, weight in vectors) / total_weight
        # A mean never leaves the span of its inputs; float rounding can nudge it out
        values = [dna[key] for dna, _ in vectors]
        return _clamp(mean, min(values), max(values))

    updates = {target: weighted_average(source) for target, source in variant.dimensions.items()}
    for target, scale in variant.biases.items():
        rescaled = scale.rescale(weighted_average(scale.source_key))
        updates[target] = _clamp(rescaled, scale.target_min, scale.target_max)

    return updates


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def merge_profile(profile: BaseModel, updates: Mapping[str, float]) -> BaseModel:
    """Overwrite derived fields in place. Fields not in updates are kept."""
    for name, value in updates.items():
        setattr(profile, name, value)
    return profile


def composition_percentages(composition: Sequence[CompositionItem]) -> dict[str, float]:
    """
    Share of each item in the total weight, in percent.

    Uses every item (resolved or not), matching what the user sees in the
    composition list. A zero total yields 0 for every item.
    """
    total_weight = sum(item.weight for item in composition)
    if total_weight <= 0:
        return {item.entity_id: 0.0 for item in composition}
    return {item.entity_id: item.weight / total_weight * 100 for item in composition}
