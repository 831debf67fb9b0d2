"""
Helix - R&D intelligence builders.

Labs:
- Synthesis: research component blends -> Research DNA profile
- Flavour: ingredient blends -> sensory profile analysis
- Cordial: sensory specification -> production recipe
- Gastronomy: ingredient + technique -> experimental protocol
"""

__version__ = "0.3.0"
