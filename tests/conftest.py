"""
Pytest configuration and fixtures for Helix tests.
"""

import os

import pytest

# Set test environment before importing helix modules
os.environ["HELIX_ENV"] = "development"
os.environ["OPENAI_API_KEY"] = "sk-test-key"
os.environ.pop("HELIX_LOG_PROMPTS", None)

from helix.domain.entities import Component, Ingredient, IngredientDNA  # noqa: E402
from helix.store.backends import MemoryStore  # noqa: E402


@pytest.fixture(autouse=True)
def _isolate_state(tmp_path, monkeypatch):
    """Fresh settings, clients and prompt-log session per test; store under tmp."""
    from helix.config import settings
    from helix.llm.client import reset_clients
    from helix.llm.prompt_logger import reset_session

    monkeypatch.setenv("HELIX_STORE_PATH", str(tmp_path / "store.json"))
    monkeypatch.setenv("HELIX_PROMPT_LOG_DIR", str(tmp_path / "prompt_logs"))
    settings.reset()
    reset_clients()
    reset_session()
    yield
    settings.reset()
    reset_clients()
    reset_session()


def make_ingredient(ingredient_id: str, name: str | None = None, type_: str = "fruit", **dna) -> Ingredient:
    """Ingredient with every DNA dimension 0 unless given."""
    values = {field: 0.0 for field in IngredientDNA.model_fields}
    values.update(dna)
    return Ingredient(id=ingredient_id, name=name or ingredient_id, type=type_, dna=IngredientDNA(**values))


def make_component(component_id: str, name: str | None = None, category: str = "AI Model", **dna) -> Component:
    """Component with metrics at 5 and biases at 5 (neutral) unless given."""
    values = {
        "impact": 5.0,
        "novelty": 5.0,
        "feasibility": 5.0,
        "complexity": 5.0,
        "abstract_concrete_bias": 5.0,
        "theoretical_applied_bias": 5.0,
    }
    values.update(dna)
    return Component(id=component_id, name=name or component_id, category=category, **values)


@pytest.fixture
def sample_ingredients() -> list[Ingredient]:
    return [
        make_ingredient("A", "Ingredient A", acids=4, sugars=2),
        make_ingredient("B", "Ingredient B", acids=8, sugars=6),
        make_ingredient("C", "Kombu", type_="vegetable", umami=10),
    ]


@pytest.fixture
def sample_components() -> list[Component]:
    return [
        make_component("COMP_A", "Transformer", impact=9, abstract_concrete_bias=8),
        make_component("COMP_B", "CRISPR", category="Bio-Technology", impact=4, abstract_concrete_bias=2),
    ]


@pytest.fixture
def memory_store() -> MemoryStore:
    return MemoryStore()
