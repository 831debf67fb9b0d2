"""
Helix - Catalog entity generation.

Structured generation of new catalog entries from a name, and of a
cordial specification from an objective. All three go through call_llm,
so failures arrive as GenerationError.
"""

import logging
from collections.abc import Sequence
from uuid import uuid4

from helix.domain.entities import Component, Ingredient
from helix.llm.client import call_llm
from helix.llm.schemas import CordialProfileSuggestion, GeneratedComponent, GeneratedIngredient
from helix.prompts.templates import (
    format_component_request,
    format_cordial_profile_request,
    format_ingredient_request,
)

logger = logging.getLogger(__name__)

COMPONENT_SYSTEM_PROMPT = (
    "You are a research analyst. You profile research components (models, "
    "paradigms, technologies, concepts) on a fixed set of numeric dimensions."
)

INGREDIENT_SYSTEM_PROMPT = (
    "You are a sensory scientist. You profile ingredients on a fixed set of "
    "Flavour DNA dimensions, each rated 0-10."
)

CORDIAL_SYSTEM_PROMPT = (
    "You are a beverage formulation engineer. You translate qualitative "
    "objectives into technical cordial specifications."
)


def _mode(fast: bool) -> str:
    return "standard" if fast else "deep"


async def generate_component_profile(name: str, fast: bool = False) -> Component:
    """
    Generate a research component profile for a name.

    The returned component gets a fresh id; everything else comes from
    the model.
    """
    generated = await call_llm(
        response_model=GeneratedComponent,
        system_prompt=COMPONENT_SYSTEM_PROMPT,
        user_prompt=format_component_request(name),
        mode=_mode(fast),
        node_name="component_profile",
    )
    component = Component(id=f"COMP_{uuid4().hex[:12].upper()}", **generated.model_dump())
    logger.info(f"Generated component profile '{component.name}' ({component.id})")
    return component


async def generate_ingredient_profile(name: str, fast: bool = False) -> Ingredient:
    """Generate a Flavour DNA profile. The name is kept as requested."""
    generated = await call_llm(
        response_model=GeneratedIngredient,
        system_prompt=INGREDIENT_SYSTEM_PROMPT,
        user_prompt=format_ingredient_request(name),
        mode=_mode(fast),
        node_name="ingredient_profile",
    )
    data = generated.model_dump()
    data["name"] = name
    ingredient = Ingredient(id=str(uuid4()), **data)
    logger.info(f"Generated ingredient profile '{ingredient.name}' ({ingredient.id})")
    return ingredient


async def generate_cordial_profile(objective: str, ingredients: Sequence[Ingredient] = ()) -> CordialProfileSuggestion:
    """Translate a cordial objective (and optional core ingredients) into numbers."""
    return await call_llm(
        response_model=CordialProfileSuggestion,
        system_prompt=CORDIAL_SYSTEM_PROMPT,
        user_prompt=format_cordial_profile_request(objective, ingredients),
        mode="deep",
        node_name="cordial_profile",
    )
