"""
Helix - Prompt templates.

Serialize lab state into prompt text. Numbers are shown rounded to one
decimal; the profiles themselves keep full precision.
"""

from collections.abc import Mapping, Sequence

from helix.domain.entities import Component, Ingredient, Technique, TechniqueParameter
from helix.domain.profiles import CordialSpecificationProfile, FlavourBlendProfile, SynthesisProfile

SYNTHESIS_SYSTEM_PROMPT = """\
You are the Research DNA Synthesis Engine.

Your role is to assist researchers in thinking clearly about complex topics, not to simply provide literature reviews.
You operate using principles of systems thinking, conceptual analysis, and explainable logic.

### Operating Rules
1. Always start with the research objective, never the components.
2. Translate the objective into a Research DNA profile.
3. Treat research components as variables with defined properties, not just keywords.
4. Predict the synthesized outcome before suggesting pathways.
5. Explain why the synthesis will lead to a particular insight or outcome.
6. Reduce redundant research by identifying core conceptual overlaps and gaps.
7. Maintain a professional, scientific, and analytical tone.

### You must NEVER
- Default to just listing papers or facts.
- Use vague, unanalytical language.
- Skip the logical explanation.

### Your Output Structure (markdown)
1. **Research Objective**
2. **Research DNA Analysis**
3. **Component Pathways (optional)**: abstract classes of components that could achieve this profile
4. **Predicted Synthesized Outcome**
5. **Scientific Explanation**
6. **Risks & Opportunities**
"""

SYNTHESIS_ACK = "Acknowledged. I am ready to begin the synthesis analysis."


def fmt(value: float) -> str:
    """One-decimal display, dropping a trailing .0."""
    rounded = round(value, 1)
    return str(int(rounded)) if rounded == int(rounded) else f"{rounded:.1f}"


def format_composition(ingredients: Sequence[Ingredient], percentages: Mapping[str, float] | None = None) -> str:
    """Bullet list of ingredient names, with their share (by id) if given."""
    if not ingredients:
        return "No ingredients provided."
    if percentages is None:
        return "\n".join(f"- {i.name}" for i in ingredients)
    return "\n".join(f"- {i.name} ({percentages.get(i.id, 0.0):.1f}%)" for i in ingredients)


def format_synthesis_prompt(profile: SynthesisProfile, components: Sequence[Component] = ()) -> str:
    lines = [
        "Here is the target Research DNA profile I have engineered:",
        "",
        "- **Core Metrics**:",
        f"  - Impact: {fmt(profile.target_impact)}/10",
        f"  - Novelty: {fmt(profile.target_novelty)}/10",
        f"  - Feasibility: {fmt(profile.target_feasibility)}/10",
        f"  - Complexity: {fmt(profile.target_complexity)}/10",
        "",
        "- **Conceptual Profile**:",
        f"  - Abstract/Concrete Bias: {fmt(profile.target_abstract_concrete_bias)}/5 (from -5 Abstract to +5 Concrete)",
        f"  - Theoretical/Applied Bias: {fmt(profile.target_theoretical_applied_bias)}/5 (from -5 Theoretical to +5 Applied)",
        "",
        "- **Synthesis Parameters**:",
        f"  - Synergy Potential: {fmt(profile.synergy)}/10",
        f"  - Risk Factor: {fmt(profile.risk)}/10",
    ]
    if components:
        lines += ["", "- **Composed From**:", *(f"  - {c.name} ({c.category})" for c in components)]
    lines += ["", f'My high-level research objective is: "{profile.research_objective}".']
    return "\n".join(lines)


def format_flavour_prompt(
    profile: FlavourBlendProfile,
    ingredients: Sequence[Ingredient],
    percentages: Mapping[str, float] | None = None,
) -> str:
    composition = format_composition(ingredients, percentages)
    return f"""\
You are the Flavour DNA Perception Engine, an expert sensory analyst and R&D professional.
Your task is to analyze a given flavour blend based on its composition and target profile.

### Ingredient Composition
{composition}

### Target Sensory Profile
- Acidity: {fmt(profile.target_acidity)}/10
- Sweetness: {fmt(profile.target_sweetness)}/10
- Bitterness: {fmt(profile.target_bitterness)}/10
- Umami: {fmt(profile.target_umami)}/10
- Aromatic Intensity: {fmt(profile.target_aromatic_intensity)}/10
- Texture: {fmt(profile.target_texture)}/10
- Balance: {fmt(profile.balance)}/10
- Complexity: {fmt(profile.complexity)}/10

### High-Level Objective
"{profile.objective}"

### Your Analysis Task
Provide a professional sensory analysis in markdown:
1. ### Overall Sensory Prediction
2. ### Harmony & Dissonance
3. ### Profile Alignment
4. ### R&D Recommendations
"""


def format_cordial_prompt(profile: CordialSpecificationProfile, ingredients: Sequence[Ingredient]) -> str:
    if ingredients:
        core = "The recipe MUST be built around the following core ingredients:\n" + "\n".join(
            f"- {i.name}" for i in ingredients
        )
    else:
        core = "The recipe can be built from scratch, but should align with the base identity."

    explanation = ""
    if profile.explain_for_training:
        explanation = """
**### R&D Explanation**
Explain the "why" behind your choices:
- How does the ingredient combination achieve the target Sensory DNA?
- Why were specific acids (malic, citric, etc.) chosen?
- How is the target pH achieved and why is it important?
"""

    return f"""\
You are a master "Liquid Engineer" and R&D professional specializing in beverage formulation.
Generate a professional, production-ready cordial recipe from this specification.

### Product Specification
- **Base Identity:** {profile.base_identity}
- **High-Level Objective:** {profile.objective}
- **Target Volume:** {fmt(profile.volume_ml)} mL
- **Target pH:** {profile.target_pH:.2f}

### Sensory DNA Profile
- Sharpness (Malic Acid feel): {fmt(profile.sharpness)}/100
- Juiciness (Citric Acid feel): {fmt(profile.juiciness)}/100
- Dryness (Tartaric Acid feel): {fmt(profile.dryness)}/30
- Sweet Body: {fmt(profile.sweet_body)}/100
- Texture/Mouthfeel: {fmt(profile.texture)}/100
- Flavour Pop (Salt perception): {fmt(profile.flavour_pop)}/20
- Fresh Cut Illusion (Aldehydes/Esters): {fmt(profile.fresh_cut)}/15
- Aroma Bias: {fmt(profile.aroma_bias)} (from -50 Herbal to +50 Fruity)

### Core Ingredients & Constraints
{core}
- **Constraints:** {", ".join(profile.constraints) or "none"}

### Your Task
Use this markdown structure strictly:
**### Recipe Summary**
**### Ingredients** (grams or mL, with percentages of the final weight/volume)
**### Equipment**
**### Method**
{explanation}"""


def format_cordial_profile_request(objective: str, ingredients: Sequence[Ingredient]) -> str:
    if ingredients:
        scope = "The profile MUST be suitable for these core ingredients: " + ", ".join(i.name for i in ingredients) + "."
    else:
        scope = "The profile can be designed from a blank slate."
    return f"""\
Analyze the following beverage objective and translate it into a technical Cordial Specification Profile.
Objective: "{objective}".
{scope}

- Rate from 0-100: sharpness, juiciness, sweet_body, texture.
- Rate from 0-30: dryness.
- Rate from 0-20: flavour_pop.
- Rate from 0-15: fresh_cut.
- Rate from -50 (Herbal) to +50 (Fruity): aroma_bias.
- Estimate a suitable target_pH (typically between 2.6 and 3.4).
- Provide a short 'rationale' explaining how you translated the objective into these numbers.
"""


def _parameter_value(parameter: TechniqueParameter) -> str:
    value = parameter.value if parameter.value is not None else parameter.default_value
    return fmt(value) if isinstance(value, (int, float)) else str(value)


def format_gastronomy_prompt(objective: str, ingredient: Ingredient | None, technique: Technique | None) -> str:
    if technique and technique.parameters:
        parameters = "\n".join(
            f"- {p.name}: {_parameter_value(p)} {p.unit}".rstrip()
            for p in technique.parameters
        )
    else:
        parameters = "N/A"

    return f"""\
You are a professional Food Scientist and R&D Chef working in an advanced culinary laboratory.
Generate a detailed experimental protocol from the objective and selected parameters.

### High-Level R&D Objective
"{objective}"

### Primary Subject
- **Ingredient:** {ingredient.name if ingredient else "Not specified"}
- **Core Profile:** {ingredient.notes if ingredient and ingredient.notes else "N/A"}

### Primary Technique
- **Technique:** {technique.name if technique else "Not specified"}
- **Description:** {technique.description if technique and technique.description else "N/A"}
- **Parameters:**
{parameters}

### Your Task
Use markdown and a scientific tone:
**### Experiment Objective**
**### Predicted Outcome**
**### Scientific Rationale**
**### Required Equipment**
**### Step-by-Step Procedure**
**### Control Variables & Safety**
"""


def format_component_request(name: str) -> str:
    return f"""\
Analyze the research component "{name}" and generate its Research DNA profile.
Provide a concise, one-sentence abstract and its primary category.
Assign up to 4 descriptors from the allowed list.
Rate impact, novelty, feasibility and complexity on 0-10.
Rate abstract_concrete_bias (0=Abstract, 10=Concrete) and theoretical_applied_bias (0=Theoretical, 10=Applied) on 0-10.
Provide a relevant source URL if possible.
"""


def format_ingredient_request(name: str) -> str:
    return f"""\
Analyze the sensory profile of the ingredient "{name}" and generate its Flavour DNA profile.
- Primary type, subcategory and sensory archetype.
- Rate acids, sugars, bitterness, aromatics, aldehydes, esters, umami, texture, water_content on 0-10.
- Brief sensory notes, typical origin, seasonality and state.
- Common culinary applications.
"""
