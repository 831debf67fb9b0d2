"""
Helix - Model Router.

Selects the OpenAI model and call parameters for an analysis mode.

Modes:
- standard: fast model, good default for interactive builders
- deep: larger model for longer, more careful analyses
- grounded: search-enabled model; answers may cite live web results
"""

from typing import Literal, TypedDict

AnalysisMode = Literal["standard", "deep", "grounded"]

ANALYSIS_MODES: tuple[str, ...] = ("standard", "deep", "grounded")


class ModelConfig(TypedDict, total=False):
    """Configuration for model calls."""

    model: str
    temperature: float
    web_search: bool  # search models take web_search_options, no temperature


MODE_CONFIGS: dict[str, ModelConfig] = {
    "standard": {
        "model": "gpt-4.1-mini",
        "temperature": 0.5,
    },
    "deep": {
        "model": "gpt-4.1",
        "temperature": 0.4,
    },
    "grounded": {
        "model": "gpt-4o-mini-search-preview",
        "web_search": True,
    },
}

# Default config if mode not recognized
DEFAULT_CONFIG: ModelConfig = MODE_CONFIGS["standard"]

# Node-specific temperature overrides
# Structured profile generation should be consistent, narrative analysis warmer
NODE_TEMPERATURE: dict[str, float] = {
    "component_profile": 0.2,
    "ingredient_profile": 0.2,
    "cordial_profile": 0.3,
    "synthesis": 0.6,
    "flavour": 0.5,
    "cordial": 0.5,
    "gastronomy": 0.4,
}


def get_model(mode: AnalysisMode | str) -> str:
    """Get the model name for an analysis mode."""
    return MODE_CONFIGS.get(mode, DEFAULT_CONFIG)["model"]


def get_node_config(node: str, mode: AnalysisMode | str) -> ModelConfig:
    """
    Get model configuration for a node (lab or generator) in a mode.

    Node temperatures apply only to models that accept a temperature.
    """
    config = MODE_CONFIGS.get(mode, DEFAULT_CONFIG).copy()

    if not config.get("web_search") and node in NODE_TEMPERATURE:
        config["temperature"] = NODE_TEMPERATURE[node]

    return config
