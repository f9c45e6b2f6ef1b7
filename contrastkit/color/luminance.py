"""WCAG relative luminance.

    L = 0.2126 * R + 0.7152 * G + 0.0722 * B

where R, G and B are the channels normalized to [0, 1] and then linearized
(gamma-expanded).  The linearization works on the normalized value for both
the threshold test and the power curve.
"""

from __future__ import annotations

from contrastkit.color.base import CHANNEL_MAX, RGB

# ---------------------------------------------------------------------------
# WCAG 2.x constants
# ---------------------------------------------------------------------------

LINEAR_THRESHOLD = 0.03928
LINEAR_DIVISOR = 12.92
GAMMA_OFFSET = 0.055
GAMMA_DIVISOR = 1.055
GAMMA_EXPONENT = 2.4

# Photopic sensitivity weights; must sum to 1.0
RED_WEIGHT = 0.2126
GREEN_WEIGHT = 0.7152
BLUE_WEIGHT = 0.0722


def _adjust_gamma(value: float) -> float:
    return ((value + GAMMA_OFFSET) / GAMMA_DIVISOR) ** GAMMA_EXPONENT


def linearize_channel(value: int) -> float:
    """Map one 0–255 channel to its linear-light intensity in [0, 1]."""
    normalized = value / CHANNEL_MAX
    if normalized <= LINEAR_THRESHOLD:
        return normalized / LINEAR_DIVISOR
    return _adjust_gamma(normalized)


def relative_luminance(rgb: RGB) -> float:
    """Calculate the relative luminance of an RGB color.

    Relative luminance is a real number between 0 (darkest black) and
    1 (lightest white) that can be used to compare the brightness of colors.
    """
    red = linearize_channel(rgb.r)
    green = linearize_channel(rgb.g)
    blue = linearize_channel(rgb.b)
    return RED_WEIGHT * red + GREEN_WEIGHT * green + BLUE_WEIGHT * blue
