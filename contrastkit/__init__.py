"""contrastkit — choose readable text colors with WCAG contrast math.

Usage::

    from contrastkit import optimal_text_color

    optimal_text_color("#1A1714", ["#1E1A16", "#F2EDE4"])  # "#F2EDE4"
"""

from __future__ import annotations

from contrastkit.color import (
    RGB,
    CandidateScore,
    ColorContrastError,
    EmptyCandidateList,
    InvalidColorFormat,
    contrast_between,
    contrast_ratio,
    hex_to_rgb,
    optimal_text_color,
    optimal_text_color_from_palette,
    rank_text_colors,
    relative_luminance,
)

__all__ = [
    "RGB",
    "CandidateScore",
    "ColorContrastError",
    "EmptyCandidateList",
    "InvalidColorFormat",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    "contrast_between",
    "optimal_text_color",
    "rank_text_colors",
    "optimal_text_color_from_palette",
]
