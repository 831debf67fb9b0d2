"""
Gastronomy lab: one ingredient, one technique with tuned parameters, and
an objective -> experimental protocol.
"""

import logging
from pathlib import Path
from typing import Any

from helix.catalog.loader import load_records
from helix.domain.entities import Ingredient, Technique
from helix.domain.profiles import TargetProfile
from helix.labs.base import Lab
from helix.prompts.templates import format_gastronomy_prompt

logger = logging.getLogger(__name__)


class GastronomyBrief(TargetProfile):
    objective: str = "Create a novel texture for a fruit-based dessert."


class GastronomyLab(Lab[GastronomyBrief]):
    name = "gastronomy"
    profile_class = GastronomyBrief

    def __init__(
        self,
        ingredients: list[Ingredient] | None = None,
        techniques: list[Technique] | None = None,
        **kwargs: Any,
    ):
        super().__init__(**kwargs)
        self.ingredients: list[Ingredient] = ingredients or []
        self.techniques: list[Technique] = techniques or []
        self.ingredient: Ingredient | None = None
        self.technique: Technique | None = None
        self.data_error: str | None = None

    @property
    def objective(self) -> str:
        return self.profile.objective

    @objective.setter
    def objective(self, value: str) -> None:
        self.profile.objective = value

    def load_data(
        self,
        ingredient_source: str | Path = "ingredients",
        technique_source: str | Path = "techniques",
    ) -> bool:
        """
        Reload both catalogs and reset selections.

        Returns False (with data_error set) if either source produced nothing.
        """
        self.ingredients = load_records(ingredient_source, Ingredient)
        self.techniques = load_records(technique_source, Technique)
        self.ingredient = None
        self.technique = None

        missing = [str(s) for s, rows in ((ingredient_source, self.ingredients), (technique_source, self.techniques)) if not rows]
        self.data_error = f"No records loaded from: {', '.join(missing)}" if missing else None
        return self.data_error is None

    def select_ingredient(self, ingredient_id: str | None) -> Ingredient | None:
        self.ingredient = next((i for i in self.ingredients if i.id == ingredient_id), None)
        return self.ingredient

    def select_technique(self, technique_id: str | None) -> Technique | None:
        """Select a technique with every parameter set to its default."""
        technique = next((t for t in self.techniques if t.id == technique_id), None)
        if technique is None:
            self.technique = None
            return None
        parameters = [p.model_copy(update={"value": p.default_value}) for p in technique.parameters]
        self.technique = technique.model_copy(update={"parameters": parameters})
        return self.technique

    def set_parameter(self, name: str, value: str | float) -> bool:
        """
        Set a parameter on the selected technique.

        Number parameters are coerced to float. False if no parameter
        matches or the value does not fit.
        """
        if self.technique is None:
            return False
        parameter = next((p for p in self.technique.parameters if p.name == name), None)
        if parameter is None:
            return False
        if parameter.type == "number":
            try:
                value = float(value)
            except (TypeError, ValueError):
                return False
        elif parameter.type == "select" and parameter.options and value not in parameter.options:
            return False
        parameters = [p.model_copy(update={"value": value}) if p.name == name else p for p in self.technique.parameters]
        self.technique = self.technique.model_copy(update={"parameters": parameters})
        return True

    def build_messages(self) -> list[dict[str, str]]:
        prompt = format_gastronomy_prompt(self.objective, self.ingredient, self.technique)
        return [{"role": "user", "content": prompt}]
