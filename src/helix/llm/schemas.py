"""
Structured output shapes for profile generation.

These are the response_models handed to Instructor. A reply that does not
fit (missing field, wrong type, value out of range) fails validation and
surfaces as a SCHEMA GenerationError.
"""

from pydantic import BaseModel, Field

from helix.domain.entities import Descriptor, IngredientDNA


class GeneratedComponent(BaseModel):
    """Research DNA profile for a named research component."""

    name: str
    category: str = Field(description="Primary category, e.g. 'AI Model', 'Bio-Technology', 'Philosophical Concept'.")
    impact: float = Field(ge=0, le=10)
    novelty: float = Field(ge=0, le=10)
    feasibility: float = Field(ge=0, le=10)
    complexity: float = Field(ge=0, le=10)
    descriptors: list[Descriptor] = Field(max_length=4)
    abstract_concrete_bias: float = Field(ge=0, le=10, description="0 = Abstract, 10 = Concrete")
    theoretical_applied_bias: float = Field(ge=0, le=10, description="0 = Theoretical, 10 = Applied")
    abstract: str = Field(description="One-sentence abstract.")
    source_url: str = Field(description="Primary paper or reference URL, empty if unknown.")


class GeneratedIngredient(BaseModel):
    """Flavour DNA profile for a named ingredient."""

    name: str
    type: str = Field(description="fruit, herb, spice, vegetable, alcohol, sugar, fat, ...")
    subcategory: str = Field(description="citrus, root, spirit, ...")
    archetype: str = Field(description="Sensory archetype, e.g. Citrus Zest, Tropical Musk.")
    dna: IngredientDNA
    notes: str
    origin: str
    seasonality: str
    state: str = Field(description="fresh, dried, processed, ...")
    culinary_applications: list[str]


class CordialProfileValues(BaseModel):
    """The numeric part of a cordial specification."""

    sharpness: float = Field(ge=0, le=100)
    juiciness: float = Field(ge=0, le=100)
    dryness: float = Field(ge=0, le=30)
    sweet_body: float = Field(ge=0, le=100)
    texture: float = Field(ge=0, le=100)
    flavour_pop: float = Field(ge=0, le=20)
    fresh_cut: float = Field(ge=0, le=15)
    aroma_bias: float = Field(ge=-50, le=50, description="-50 Herbal .. +50 Fruity")
    target_pH: float = Field(ge=2.0, le=4.5, description="Typically between 2.6 and 3.4")


class CordialProfileSuggestion(BaseModel):
    """Cordial profile translated from an objective, with the reasoning."""

    profile: CordialProfileValues
    rationale: str = Field(description="Brief markdown explanation of the chosen values.")
