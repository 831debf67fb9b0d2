"""
Helix - Blend variants.

Each lab that derives its profile from a composition declares which DNA
key feeds which profile field.
"""

from helix.engine.blend import BiasScale, BlendVariant

# Research components: metrics copy straight over, biases move from the
# component's 0..10 scale (5 = neutral) to the profile's -5..+5 scale.
SYNTHESIS = BlendVariant(
    name="synthesis",
    dimensions={
        "target_impact": "impact",
        "target_novelty": "novelty",
        "target_feasibility": "feasibility",
        "target_complexity": "complexity",
    },
    biases={
        "target_abstract_concrete_bias": BiasScale("abstract_concrete_bias", 0, 10),
        "target_theoretical_applied_bias": BiasScale("theoretical_applied_bias", 0, 10),
    },
)

# Ingredients: sensory targets from flavour DNA, all on 0..10.
FLAVOUR = BlendVariant(
    name="flavour",
    dimensions={
        "target_acidity": "acids",
        "target_sweetness": "sugars",
        "target_bitterness": "bitterness",
        "target_umami": "umami",
        "target_aromatic_intensity": "aromatics",
        "target_texture": "texture",
    },
)

VARIANTS: dict[str, BlendVariant] = {
    SYNTHESIS.name: SYNTHESIS,
    FLAVOUR.name: FLAVOUR,
}
