"""
Cordial lab.

Ingredients are composed for context only: the cordial specification is
authored directly or synthesized from the objective, never averaged.
"""

import logging

from helix.catalog.generate import generate_cordial_profile
from helix.domain.entities import Ingredient
from helix.domain.profiles import CordialSpecificationProfile, SavedSnapshot
from helix.labs.base import BlendLab
from helix.llm.errors import GenerationError
from helix.prompts.templates import format_cordial_prompt

logger = logging.getLogger(__name__)

SYNTHESIZE_FAILED_MESSAGE = (
    "Failed to synthesize profile from objective. "
    "The model may have returned an unexpected format. Please try again."
)


class CordialLab(BlendLab[CordialSpecificationProfile, Ingredient]):
    name = "cordial"
    profile_class = CordialSpecificationProfile

    rationale: str = ""

    def build_messages(self) -> list[dict[str, str]]:
        return [{"role": "user", "content": format_cordial_prompt(self.profile, self.composition_entities)}]

    def set_constraints(self, text: str) -> list[str]:
        """Comma-separated constraints; blanks dropped."""
        constraints = [part.strip() for part in text.split(",") if part.strip()]
        self.profile.constraints = constraints
        return constraints

    async def synthesize_profile(self) -> bool:
        """
        Fill the numeric specification from the objective.

        Returns False (with error set, profile untouched) on failure.
        """
        self.rationale = ""
        self.error = None
        try:
            suggestion = await generate_cordial_profile(self.profile.objective, self.composition_entities)
        except GenerationError as e:
            logger.error(f"Cordial profile synthesis failed ({e.kind.value}): {e}")
            self.error = SYNTHESIZE_FAILED_MESSAGE
            return False

        self.update_profile(**suggestion.profile.model_dump())
        self.rationale = suggestion.rationale
        return True

    def load_snapshot(self, snapshot_id: str) -> SavedSnapshot | None:
        snapshot = super().load_snapshot(snapshot_id)
        if snapshot is not None:
            self.rationale = ""
        return snapshot
