"""
Helix - Domain models.

Catalog records (read-only), lab profiles (editable) and saved snapshots.
"""

from helix.domain.entities import (
    AnimalProduct,
    Component,
    Crop,
    Descriptor,
    Ingredient,
    IngredientDNA,
    RawMaterial,
    Technique,
    TechniqueParameter,
)
from helix.domain.profiles import (
    CompositionItem,
    CordialSpecificationProfile,
    FlavourBlendProfile,
    SavedSnapshot,
    SynthesisProfile,
    TargetProfile,
)

__all__ = [
    "AnimalProduct",
    "Component",
    "CompositionItem",
    "CordialSpecificationProfile",
    "Crop",
    "Descriptor",
    "FlavourBlendProfile",
    "Ingredient",
    "IngredientDNA",
    "RawMaterial",
    "SavedSnapshot",
    "SynthesisProfile",
    "TargetProfile",
    "Technique",
    "TechniqueParameter",
]
