"""
Helix - Catalogs.

Loading (bundled JSON, file or URL), id-indexed views, filters and
structured generation of new entries.
"""

from helix.catalog.catalog import Catalog
from helix.catalog.filters import ALL, category_options, filter_records, matches_search, within_ranges
from helix.catalog.loader import CATALOG_MODELS, DATA_FILES, load_records, parse_records

__all__ = [
    "ALL",
    "CATALOG_MODELS",
    "Catalog",
    "DATA_FILES",
    "category_options",
    "filter_records",
    "load_records",
    "matches_search",
    "parse_records",
    "within_ranges",
]
