"""
Helix - Catalog entity models.

Catalog records are loaded from static JSON (or produced by structured
generation) and are read-only from the blend engine's point of view.

Blendable entities expose `dna_vector()`: the fixed-shape mapping of
dimension name -> value that the engine averages over.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class Descriptor(str, Enum):
    """Closed set of research component descriptors."""

    FOUNDATIONAL = "foundational"
    INCREMENTAL = "incremental"
    DISRUPTIVE = "disruptive"
    THEORETICAL = "theoretical"
    APPLIED = "applied"
    DATA_DRIVEN = "data-driven"
    QUALITATIVE = "qualitative"
    EMERGING = "emerging"
    ESTABLISHED = "established"
    INTERDISCIPLINARY = "interdisciplinary"


class CatalogRecord(BaseModel):
    """Base for every catalog record. Unknown JSON fields are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


# Score on 0-10
Score = Annotated[float, Field(ge=0, le=10)]


class Component(CatalogRecord):
    """A research component (model, paradigm, technology, concept)."""

    id: str
    name: str
    category: str
    impact: Score
    novelty: Score
    feasibility: Score
    complexity: Score
    descriptors: list[Descriptor] = Field(default_factory=list)
    # 0 = Abstract, 10 = Concrete
    abstract_concrete_bias: float = Field(alias="abstractConcreteBias", ge=0, le=10)
    # 0 = Theoretical, 10 = Applied
    theoretical_applied_bias: float = Field(alias="theoreticalAppliedBias", ge=0, le=10)
    abstract: str = ""
    source_url: str = Field(default="", alias="sourceURL")

    def dna_vector(self) -> dict[str, float]:
        return {
            "impact": self.impact,
            "novelty": self.novelty,
            "feasibility": self.feasibility,
            "complexity": self.complexity,
            "abstract_concrete_bias": self.abstract_concrete_bias,
            "theoretical_applied_bias": self.theoretical_applied_bias,
        }


class IngredientDNA(CatalogRecord):
    """Flavour DNA, every dimension on 0-10."""

    acids: Score
    sugars: Score
    bitterness: Score
    aromatics: Score
    aldehydes: Score
    esters: Score
    umami: Score
    texture: Score
    water_content: Score


class Ingredient(CatalogRecord):
    """A flavour ingredient with its sensory DNA."""

    id: str
    name: str
    type: str
    subcategory: str = ""
    archetype: str = ""
    dna: IngredientDNA
    notes: str = ""
    origin: str = ""
    seasonality: str = ""
    state: str = ""
    key_compounds: list[str] = Field(default_factory=list)
    potential_contaminants: list[str] = Field(default_factory=list)
    preservatives: list[str] = Field(default_factory=list)
    culinary_applications: list[str] = Field(default_factory=list)

    @property
    def category(self) -> str:
        return self.type

    def dna_vector(self) -> dict[str, float]:
        return self.dna.model_dump()


class TechniqueParameter(CatalogRecord):
    """A tunable parameter of a gastronomy technique."""

    name: str
    unit: str = ""
    type: Literal["number", "text", "select"] = "text"
    options: list[str] | None = None
    default_value: str | float = Field(alias="defaultValue")
    value: str | float | None = None


class Technique(CatalogRecord):
    """A culinary/lab technique and its parameters."""

    id: str
    name: str
    category: str
    description: str = ""
    parameters: list[TechniqueParameter] = Field(default_factory=list)


class RawMaterial(CatalogRecord):
    """Raw material reference entry."""

    id: str
    category: str
    ingredient: str
    form: str = ""
    source_type: str = Field(default="", alias="sourceType")
    primary_function: str = Field(default="", alias="primaryFunction")
    secondary_function: str = Field(default="", alias="secondaryFunction")
    storage: str = ""
    allergen: str = ""
    notes: str = ""


class AnimalProduct(RawMaterial):
    """Animal product reference entry (same shape as raw materials)."""


class Crop(CatalogRecord):
    """Crop library entry. Crops carry no id in the bundled data."""

    primary_category: str = Field(alias="primaryCategory")
    sub_category: str = Field(default="", alias="subCategory")
    crop_name: str = Field(alias="cropName")
    variety: str = ""
    edible_part: str = Field(default="", alias="ediblePart")
    growth_system: str = Field(default="", alias="growthSystem")
