"""Synthesis lab: research components -> Research DNA -> analysis."""

from helix.domain.entities import Component
from helix.domain.profiles import SynthesisProfile
from helix.engine.variants import SYNTHESIS
from helix.labs.base import BlendLab
from helix.prompts.templates import SYNTHESIS_ACK, SYNTHESIS_SYSTEM_PROMPT, format_synthesis_prompt


class SynthesisLab(BlendLab[SynthesisProfile, Component]):
    name = "synthesis"
    profile_class = SynthesisProfile
    variant = SYNTHESIS

    def build_messages(self) -> list[dict[str, str]]:
        # The engine persona is primed as a separate turn before the request
        return [
            {"role": "user", "content": SYNTHESIS_SYSTEM_PROMPT},
            {"role": "assistant", "content": SYNTHESIS_ACK},
            {"role": "user", "content": format_synthesis_prompt(self.profile, self.composition_entities)},
        ]
