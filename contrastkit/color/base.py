"""Value types and errors for the contrastkit color pipeline.

Every stage of the pipeline (decoder, luminance, contrast, selector) speaks
in these types.  All of them are immutable; none of them outlive a single
selection call.
"""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ColorContrastError(ValueError):
    """Base class for every error raised by the color pipeline."""


class InvalidColorFormat(ColorContrastError):
    """Raised when a value cannot be read as a 6-digit hex RGB color."""

    def __init__(
        self, value: object, reason: str = "", *, label: str = "hex color"
    ) -> None:
        self.value = value
        message = f"Invalid {label} {value!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class EmptyCandidateList(ColorContrastError):
    """Raised when the selector is given no candidate text colors."""

    def __init__(self) -> None:
        super().__init__("Expected at least one candidate text color")


# ---------------------------------------------------------------------------
# RGB triple
# ---------------------------------------------------------------------------

CHANNEL_MAX = 255


@dataclass(frozen=True)
class RGB:
    """An 8-bit-per-channel color.

    Attributes:
        r: Red channel, 0–255.
        g: Green channel, 0–255.
        b: Blue channel, 0–255.
    """

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            value = getattr(self, name)
            # bool is an int subclass but never a channel value
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidColorFormat(
                    value, "must be an int", label=f"RGB channel '{name}'"
                )
            if not 0 <= value <= CHANNEL_MAX:
                raise InvalidColorFormat(
                    value, "out of range [0, 255]", label=f"RGB channel '{name}'"
                )

    def channels(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"


@dataclass(frozen=True)
class CandidateScore:
    """How one candidate text color fares against a background.

    Attributes:
        index:     Position of the candidate in the caller's list.
        color:     The candidate string exactly as the caller passed it.
        luminance: Relative luminance of the candidate, 0.0–1.0.
        ratio:     Contrast ratio against the background, 1.0–21.0.
    """

    index: int
    color: str
    luminance: float
    ratio: float
