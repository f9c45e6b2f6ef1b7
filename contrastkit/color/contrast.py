"""WCAG contrast ratio between two luminances."""

from __future__ import annotations

from contrastkit.color.hex_decoder import hex_to_rgb
from contrastkit.color.luminance import relative_luminance

# Flare term added to both luminances
FLARE = 0.05


def contrast_ratio(lighter_luminance: float, darker_luminance: float) -> float:
    """Return ``(lighter + 0.05) / (darker + 0.05)``.

    The arguments are not reordered: pass the larger luminance first to get a
    ratio in [1, 21].
    """
    return (lighter_luminance + FLARE) / (darker_luminance + FLARE)


def contrast_between(first: str, second: str) -> float:
    """Contrast ratio between two hex colors, independent of argument order."""
    first_lum = relative_luminance(hex_to_rgb(first))
    second_lum = relative_luminance(hex_to_rgb(second))
    return contrast_ratio(max(first_lum, second_lum), min(first_lum, second_lum))
