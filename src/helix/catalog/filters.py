"""
Filter predicates over in-memory catalogs.

Plain functions: the CLI and any front end compose them; no state here.
"ALL" (or None) for a category means any category.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import TypeVar

from pydantic import BaseModel

R = TypeVar("R", bound=BaseModel)

ALL = "All"

# Fields searched per record type, mirroring what each browser shows
SEARCH_FIELDS: dict[str, tuple[str, ...]] = {
    "Component": ("name", "abstract"),
    "Ingredient": ("name", "archetype"),
    "RawMaterial": ("ingredient", "primary_function", "notes"),
    "AnimalProduct": ("ingredient", "primary_function", "notes"),
    "Crop": ("crop_name", "variety"),
    "Technique": ("name", "description"),
}


def matches_search(record: BaseModel, term: str, fields: Sequence[str] | None = None) -> bool:
    """Case-insensitive substring match on any of the fields. Blank term matches."""
    term = term.strip().lower()
    if not term:
        return True
    fields = fields or SEARCH_FIELDS.get(type(record).__name__, ("name",))
    for name in fields:
        value = getattr(record, name, None)
        if isinstance(value, str) and term in value.lower():
            return True
    return False


def matches_category(record: BaseModel, category: str | None, field: str = "category") -> bool:
    if category is None or category == ALL:
        return True
    return getattr(record, field, None) == category


def within_ranges(dna: Mapping[str, float], ranges: Mapping[str, tuple[float, float]]) -> bool:
    """True if every constrained dimension lies within its inclusive [min, max]."""
    for key, (low, high) in ranges.items():
        value = dna.get(key)
        if value is None or not low <= value <= high:
            return False
    return True


def filter_records(
    records: Iterable[R],
    *,
    search: str = "",
    category: str | None = None,
    category_field: str = "category",
    dna_ranges: Mapping[str, tuple[float, float]] | None = None,
) -> list[R]:
    """
    Apply search, category and (for blendable records) DNA range filters.

    Example:
        sour = filter_records(ingredients, category="fruit", dna_ranges={"acids": (6, 10)})
    """
    results = []
    for record in records:
        if not matches_category(record, category, category_field):
            continue
        if not matches_search(record, search):
            continue
        if dna_ranges:
            dna_vector = getattr(record, "dna_vector", None)
            if dna_vector is None or not within_ranges(dna_vector(), dna_ranges):
                continue
        results.append(record)
    return results


def category_options(records: Iterable[BaseModel], field: str = "category") -> list[str]:
    """["All", *sorted distinct values] for a category selector."""
    values = {getattr(record, field, None) for record in records}
    return [ALL, *sorted(v for v in values if v)]
