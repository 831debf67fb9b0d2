"""
Helix - Labs.

One session class per lab. Blend labs (synthesis, flavour, cordial) keep
a composition and snapshots; the gastronomy lab works on a single
ingredient/technique pair.
"""

from helix.labs.base import BlendLab, Lab
from helix.labs.cordial import CordialLab
from helix.labs.flavour import FlavourLab
from helix.labs.gastronomy import GastronomyBrief, GastronomyLab
from helix.labs.synthesis import SynthesisLab

# Lab name -> (session class, catalog data name)
BLEND_LABS: dict[str, tuple[type[BlendLab], str]] = {
    "synthesis": (SynthesisLab, "components"),
    "flavour": (FlavourLab, "ingredients"),
    "cordial": (CordialLab, "ingredients"),
}

__all__ = [
    "BLEND_LABS",
    "BlendLab",
    "CordialLab",
    "FlavourLab",
    "GastronomyBrief",
    "GastronomyLab",
    "Lab",
    "SynthesisLab",
]
