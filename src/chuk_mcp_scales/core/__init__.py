"""
Core music primitives.

These are the pure building blocks everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- ScaleTemplate: Named offset pattern defining a scale
- Matched / NoMatch: Tagged result of matching 7 notes against the templates
- match_scale: The scale matcher
"""

from chuk_mcp_scales.core.pitch import PitchClass, note_names
from chuk_mcp_scales.core.scale import (
    SCALE_TEMPLATES,
    Matched,
    NoMatch,
    ScaleMatch,
    ScaleTemplate,
    match_scale,
    normalize,
    scale_type_of,
    to_pitch_classes,
)

__all__ = [
    # Pitch
    "PitchClass",
    "note_names",
    # Scale
    "SCALE_TEMPLATES",
    "ScaleTemplate",
    "ScaleMatch",
    "Matched",
    "NoMatch",
    "match_scale",
    "normalize",
    "scale_type_of",
    "to_pitch_classes",
]
