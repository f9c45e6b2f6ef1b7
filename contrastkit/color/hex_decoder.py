"""Decode ``#RRGGBB`` strings into :class:`RGB` values."""

from __future__ import annotations

import re

from contrastkit.color.base import RGB, InvalidColorFormat

# int(..., 16) alone would also accept "0x", signs, underscores and whitespace
_HEX_DIGITS_RE = re.compile(r"[0-9A-Fa-f]{6}")


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert a hex color (e.g. ``"#cccccc"`` or ``"cccccc"``) to RGB.

    Raises:
        InvalidColorFormat: If the value is not exactly six hex digits after
            an optional leading ``#``.
    """
    if not isinstance(hex_color, str):
        raise InvalidColorFormat(hex_color, "expected a string")

    digits = hex_color[1:] if hex_color.startswith("#") else hex_color
    if not _HEX_DIGITS_RE.fullmatch(digits):
        raise InvalidColorFormat(hex_color, "expected 6 hex digits")

    packed = int(digits, 16)
    return RGB(
        r=(packed >> 16) & 0xFF,
        g=(packed >> 8) & 0xFF,
        b=packed & 0xFF,
    )
