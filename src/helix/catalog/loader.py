"""
Helix - Catalog loading.

Loads JSON arrays of catalog records from the bundled data directory, a
local path or an http(s) URL. Loading never raises: a failed fetch or a
malformed payload is logged and yields an empty list, and individual
records that fail validation are skipped.
"""

import json
import logging
from pathlib import Path
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from helix.config import settings
from helix.domain.entities import AnimalProduct, Component, Crop, Ingredient, RawMaterial, Technique

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

FETCH_TIMEOUT_SECONDS = 15.0

# Bundled data names, relative to settings.helix_data_dir
DATA_FILES = {
    "components": "components.json",
    "ingredients": "ingredients.json",
    "techniques": "techniques.json",
    "raw_materials": "raw_materials.json",
    "animal_products": "animal_products.json",
    "crops": "crops.json",
}

# Bundled data name -> (record model, field used as its category)
CATALOG_MODELS: dict[str, tuple[type[BaseModel], str]] = {
    "components": (Component, "category"),
    "ingredients": (Ingredient, "type"),
    "techniques": (Technique, "category"),
    "raw_materials": (RawMaterial, "category"),
    "animal_products": (AnimalProduct, "category"),
    "crops": (Crop, "primary_category"),
}


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def resolve_source(source: str | Path) -> str | Path:
    """Map a bundled data name to its file; pass paths and URLs through."""
    if isinstance(source, Path):
        return source
    if _is_url(source):
        return source
    if source in DATA_FILES:
        return Path(settings.helix_data_dir) / DATA_FILES[source]
    return Path(source)


def _read_payload(source: str | Path) -> Any:
    """Fetch and decode JSON. Raises on transport or decode failure."""
    if isinstance(source, str) and _is_url(source):
        response = httpx.get(source, timeout=FETCH_TIMEOUT_SECONDS, follow_redirects=True)
        response.raise_for_status()
        return response.json()
    return json.loads(Path(source).read_text(encoding="utf-8"))


def parse_records(payload: Any, model: type[T], *, source: str = "<payload>") -> list[T]:
    """Validate a decoded JSON array into models, skipping invalid records."""
    if not isinstance(payload, list):
        logger.warning(f"Catalog {source} is not a JSON array ({type(payload).__name__}); ignoring")
        return []

    records: list[T] = []
    for index, raw in enumerate(payload):
        try:
            records.append(model.model_validate(raw))
        except ValidationError as e:
            logger.warning(f"Skipping invalid {model.__name__} #{index} in {source}: {e.error_count()} error(s)")
    return records


def load_records(source: str | Path, model: type[T]) -> list[T]:
    """
    Load a catalog.

    Args:
        source: bundled data name ("ingredients"), file path, or URL
        model: record model to validate each entry against

    Returns:
        Validated records; empty if the source could not be loaded
    """
    resolved = resolve_source(source)
    try:
        payload = _read_payload(resolved)
    except (httpx.HTTPError, OSError, ValueError) as e:
        # json.JSONDecodeError is a ValueError
        logger.error(f"Failed to load catalog from {resolved}: {e}")
        return []

    records = parse_records(payload, model, source=str(resolved))
    logger.debug(f"Loaded {len(records)} {model.__name__} record(s) from {resolved}")
    return records
