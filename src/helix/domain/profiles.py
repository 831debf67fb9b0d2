"""
Helix - Target profiles and saved snapshots.

Profiles are the editable state of a lab. Derived fields are overwritten
by the blend engine; everything else (objective, constraints, volume, pH)
is user-authored and never touched by recomputation.
"""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, Field


class TargetProfile(BaseModel):
    """Base for lab profiles."""


class SynthesisProfile(TargetProfile):
    """Target Research DNA for a synthesis of research components."""

    # Core metrics (0-10)
    target_impact: float = Field(default=5, ge=0, le=10)
    target_novelty: float = Field(default=5, ge=0, le=10)
    target_feasibility: float = Field(default=5, ge=0, le=10)
    target_complexity: float = Field(default=5, ge=0, le=10)

    # Biases (-5 Abstract/Theoretical .. +5 Concrete/Applied)
    target_abstract_concrete_bias: float = Field(default=0, ge=-5, le=5)
    target_theoretical_applied_bias: float = Field(default=0, ge=-5, le=5)

    # Synthesis parameters (0-10)
    synergy: float = Field(default=3, ge=0, le=10)
    risk: float = Field(default=2, ge=0, le=10)

    research_objective: str = "Develop a novel, interdisciplinary approach to..."


class FlavourBlendProfile(TargetProfile):
    """Target sensory profile for a flavour blend (all 0-10)."""

    target_acidity: float = Field(default=5, ge=0, le=10)
    target_sweetness: float = Field(default=5, ge=0, le=10)
    target_bitterness: float = Field(default=2, ge=0, le=10)
    target_umami: float = Field(default=1, ge=0, le=10)
    target_aromatic_intensity: float = Field(default=5, ge=0, le=10)
    target_texture: float = Field(default=5, ge=0, le=10)
    balance: float = Field(default=5, ge=0, le=10)
    complexity: float = Field(default=3, ge=0, le=10)
    objective: str = "Create a refreshing and complex non-alcoholic beverage."


class CordialSpecificationProfile(TargetProfile):
    """Technical specification for a cordial."""

    base_identity: str = "Green Apple Cordial"
    objective: str = "Create a crisp, refreshing, and thirst-quenching green apple cordial."
    volume_ml: float = Field(default=1000, gt=0)

    sharpness: float = Field(default=80, ge=0, le=100)  # malic acid feel
    juiciness: float = Field(default=20, ge=0, le=100)  # citric acid feel
    dryness: float = Field(default=5, ge=0, le=30)  # tartaric acid feel
    sweet_body: float = Field(default=60, ge=0, le=100)
    texture: float = Field(default=10, ge=0, le=100)
    flavour_pop: float = Field(default=10, ge=0, le=20)  # salt perception
    fresh_cut: float = Field(default=8, ge=0, le=15)  # aldehydes/esters
    aroma_bias: float = Field(default=30, ge=-50, le=50)  # -50 herbal .. +50 fruity
    target_pH: float = Field(default=3.0, ge=0, le=14)

    constraints: list[str] = Field(default_factory=lambda: ["clear liquid", "non-alcoholic"])
    explain_for_training: bool = True


class CompositionItem(BaseModel):
    """One weighted entry of a blend."""

    entity_id: str
    weight: float = Field(default=50, ge=0)


def _now() -> datetime:
    return datetime.now(timezone.utc)


class SavedSnapshot(BaseModel):
    """
    A user-saved, named copy of a profile, composition and generated text.

    Never mutated in place; re-saving creates a new snapshot with a new id.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    name: str
    lab: str
    profile: dict[str, Any]
    composition: list[CompositionItem] = Field(default_factory=list)
    generated_text: str = ""
    saved_at: datetime = Field(default_factory=_now)
