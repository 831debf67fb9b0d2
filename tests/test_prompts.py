"""
Tests for prompt templates.
"""

from conftest import make_ingredient
from helix.domain.entities import Technique
from helix.domain.profiles import CordialSpecificationProfile, FlavourBlendProfile, SynthesisProfile
from helix.prompts.templates import (
    fmt,
    format_composition,
    format_cordial_profile_request,
    format_cordial_prompt,
    format_flavour_prompt,
    format_gastronomy_prompt,
    format_synthesis_prompt,
)


class TestFormatting:
    def test_fmt(self):
        assert fmt(5.0) == "5"
        assert fmt(6.4999) == "6.5"
        assert fmt(-2.25) == "-2.2"

    def test_composition_with_percentages(self):
        ingredients = [make_ingredient("A", "Lime"), make_ingredient("B", "Honey")]

        text = format_composition(ingredients, {"A": 75.0, "B": 25.0})

        assert text == "- Lime (75.0%)\n- Honey (25.0%)"

    def test_empty_composition(self):
        assert format_composition([]) == "No ingredients provided."


class TestLabPrompts:
    def test_synthesis_prompt_shows_signed_biases(self):
        profile = SynthesisProfile(target_abstract_concrete_bias=-3.5, research_objective="Map protein folding")

        prompt = format_synthesis_prompt(profile)

        assert "Abstract/Concrete Bias: -3.5/5" in prompt
        assert '"Map protein folding"' in prompt

    def test_flavour_prompt_rounds_values(self):
        profile = FlavourBlendProfile(target_acidity=6.6666, objective="Zesty")

        prompt = format_flavour_prompt(profile, [make_ingredient("A", "Lime")], {"A": 100.0})

        assert "Acidity: 6.7/10" in prompt
        assert "- Lime (100.0%)" in prompt

    def test_cordial_prompt(self):
        profile = CordialSpecificationProfile(constraints=["clear liquid"], explain_for_training=False)

        prompt = format_cordial_prompt(profile, [])

        assert "Target pH:** 3.00" in prompt
        assert "clear liquid" in prompt
        assert "built from scratch" in prompt
        assert "R&D Explanation" not in prompt

    def test_cordial_prompt_with_ingredients_and_explanation(self):
        prompt = format_cordial_prompt(CordialSpecificationProfile(), [make_ingredient("A", "Green Apple")])

        assert "- Green Apple" in prompt
        assert "R&D Explanation" in prompt

    def test_cordial_profile_request(self):
        prompt = format_cordial_profile_request("Sharp apple", [make_ingredient("A", "Apple")])

        assert '"Sharp apple"' in prompt
        assert "Apple." in prompt

    def test_gastronomy_prompt_defaults(self):
        technique = Technique.model_validate({
            "id": "T",
            "name": "Smoking",
            "category": "Heat",
            "parameters": [{"name": "Wood", "type": "text", "defaultValue": "hickory"}],
        })

        prompt = format_gastronomy_prompt("Smoky", None, technique)

        assert "- Wood: hickory" in prompt
        assert "Ingredient:** Not specified" in prompt

    def test_gastronomy_prompt_without_selection(self):
        prompt = format_gastronomy_prompt("Anything", None, None)

        assert "Parameters:**\nN/A" in prompt
