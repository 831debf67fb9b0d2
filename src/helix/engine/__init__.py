"""
Helix - Blend Composition Engine.
"""

from helix.engine.blend import (
    BiasScale,
    Blendable,
    BlendVariant,
    composition_percentages,
    merge_profile,
    recompute_profile,
)
from helix.engine.composition import Composition
from helix.engine.variants import FLAVOUR, SYNTHESIS, VARIANTS

__all__ = [
    "BiasScale",
    "Blendable",
    "BlendVariant",
    "Composition",
    "FLAVOUR",
    "SYNTHESIS",
    "VARIANTS",
    "composition_percentages",
    "merge_profile",
    "recompute_profile",
]
