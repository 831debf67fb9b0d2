"""Flavour lab: weighted ingredients -> sensory profile -> perception analysis."""

from helix.domain.entities import Ingredient
from helix.domain.profiles import FlavourBlendProfile
from helix.engine.variants import FLAVOUR
from helix.labs.base import BlendLab
from helix.prompts.templates import format_flavour_prompt


class FlavourLab(BlendLab[FlavourBlendProfile, Ingredient]):
    name = "flavour"
    profile_class = FlavourBlendProfile
    variant = FLAVOUR

    def build_messages(self) -> list[dict[str, str]]:
        prompt = format_flavour_prompt(self.profile, self.composition_entities, self.percentages)
        return [{"role": "user", "content": prompt}]
