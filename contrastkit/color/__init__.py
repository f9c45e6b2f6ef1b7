"""WCAG color-contrast pipeline.

Core modules:
    base        — RGB / CandidateScore value types and errors
    hex_decoder — "#RRGGBB" → RGB
    luminance   — RGB → relative luminance
    contrast    — luminance pair → contrast ratio
    selector    — background + candidates → best text color
    palettes    — named candidate palettes from palettes.yaml
"""

from contrastkit.color.base import (
    RGB,
    CandidateScore,
    ColorContrastError,
    EmptyCandidateList,
    InvalidColorFormat,
)
from contrastkit.color.contrast import contrast_between, contrast_ratio
from contrastkit.color.hex_decoder import hex_to_rgb
from contrastkit.color.luminance import linearize_channel, relative_luminance
from contrastkit.color.palettes import optimal_text_color_from_palette
from contrastkit.color.selector import optimal_text_color, rank_text_colors

__all__ = [
    "RGB",
    "CandidateScore",
    "ColorContrastError",
    "EmptyCandidateList",
    "InvalidColorFormat",
    "hex_to_rgb",
    "linearize_channel",
    "relative_luminance",
    "contrast_ratio",
    "contrast_between",
    "optimal_text_color",
    "rank_text_colors",
    "optimal_text_color_from_palette",
]
