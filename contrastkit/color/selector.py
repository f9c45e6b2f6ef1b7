"""Pick the candidate text color with the most contrast against a background.

The background is decoded once; each candidate is decoded and scored in list
order.  A later candidate only wins if its ratio is strictly greater, so on a
tie the earliest-listed candidate is returned.
"""

from __future__ import annotations

import logging
from typing import Sequence

from contrastkit.color.base import CandidateScore, EmptyCandidateList
from contrastkit.color.contrast import contrast_ratio
from contrastkit.color.hex_decoder import hex_to_rgb
from contrastkit.color.luminance import relative_luminance

logger = logging.getLogger("contrastkit.color.selector")


def _score_candidates(
    background: str, candidates: Sequence[str]
) -> list[CandidateScore]:
    """Score every candidate against ``background``, preserving input order.

    Raises:
        EmptyCandidateList: If ``candidates`` is empty.
        InvalidColorFormat: If the background or any candidate is malformed.
    """
    if len(candidates) == 0:
        raise EmptyCandidateList()

    background_luminance = relative_luminance(hex_to_rgb(background))

    scores: list[CandidateScore] = []
    for index, color in enumerate(candidates):
        luminance = relative_luminance(hex_to_rgb(color))
        ratio = contrast_ratio(
            max(background_luminance, luminance),
            min(background_luminance, luminance),
        )
        scores.append(
            CandidateScore(index=index, color=color, luminance=luminance, ratio=ratio)
        )
    return scores


def rank_text_colors(
    background: str, candidates: Sequence[str]
) -> list[CandidateScore]:
    """Return all candidates scored, highest contrast first.

    ``sorted`` is stable, so candidates with equal ratios keep their input
    order.
    """
    scores = _score_candidates(background, candidates)
    return sorted(scores, key=lambda s: s.ratio, reverse=True)


def optimal_text_color(background: str, candidates: Sequence[str]) -> str:
    """Select the text color with the highest contrast to ``background``.

    Args:
        background: Background hex color, e.g. ``"#1a1714"``.
        candidates: Non-empty, ordered candidate hex colors.

    Returns:
        The winning element of ``candidates``, exactly as passed in.

    Raises:
        EmptyCandidateList: If ``candidates`` is empty.
        InvalidColorFormat: If the background or any candidate is malformed.

    Example::

        optimal_text_color("#FFFFFF", ["#FFFFFF", "#000000"])  # "#000000"
    """
    scores = _score_candidates(background, candidates)

    best = scores[0]
    for score in scores[1:]:
        if score.ratio > best.ratio:
            best = score

    logger.debug(
        "Selected %s (index %d, ratio %.2f) for background %s from %d candidate(s)",
        best.color,
        best.index,
        best.ratio,
        background,
        len(scores),
    )
    return best.color
