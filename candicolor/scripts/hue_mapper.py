"""Conversion of color indices into hues in degrees.

Up to ``proportional_coloring_threshold`` candidates, hues are evenly
spaced and handed out by index rank. Above it, each index is mapped to a
hue directly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

import numpy as np

from candicolor.config import get_config

from .edges import CandidateColor

logger = logging.getLogger(__name__)

# Width of the hue arc used when a color-deficiency mode is active
DEFICIENCY_HUE_RANGE = 120


def validate_color_deficiency(
    color_deficiency: str | None, color_shift: Mapping[str, float] | None = None
) -> None:
    """Raise ``ValueError`` for a mode missing from the shift table."""
    if color_deficiency is None:
        return
    if color_shift is None:
        color_shift = get_config()["color_shift"]
    if color_deficiency not in color_shift:
        logger.error(f"Unknown color deficiency mode: {color_deficiency}")
        raise ValueError(
            f"Unknown color deficiency mode: {color_deficiency!r}. "
            f"Expected one of: {', '.join(sorted(color_shift))}"
        )


def hue_from_index(
    index: float,
    n_candidates: int,
    color_deficiency: str | None = None,
    color_shift: Mapping[str, float] | None = None,
) -> float:
    """Map a color index in ``[0, n_candidates)`` to a hue in ``[0, 360)``.

    With a color-deficiency mode the hue is squeezed into a 120 degree arc
    rotated by ``color_shift[mode]``.
    """
    if color_deficiency:
        if color_shift is None:
            color_shift = get_config()["color_shift"]
        validate_color_deficiency(color_deficiency, color_shift)
        return (DEFICIENCY_HUE_RANGE * index / n_candidates + color_shift[color_deficiency]) % 360
    return 360 * index / n_candidates


def assignable_hues(
    n_candidates: int,
    color_deficiency: str | None = None,
    color_shift: Mapping[str, float] | None = None,
) -> list[float]:
    """The ``n_candidates`` evenly spaced hues, one per integer index."""
    return [hue_from_index(i, n_candidates, color_deficiency, color_shift) for i in range(n_candidates)]


def pair_candidates_to_proportional_colors(
    color_index: Mapping[str, float],
    color_deficiency: str | None = None,
    color_shift: Mapping[str, float] | None = None,
) -> list[CandidateColor]:
    """Hue straight from each candidate's index, spacing not normalized."""
    n_candidates = len(color_index)
    return [
        CandidateColor(candidate, hue_from_index(index, n_candidates, color_deficiency, color_shift))
        for candidate, index in color_index.items()
    ]


def pair_candidates_to_ranked_colors(
    color_index: Mapping[str, float],
    color_deficiency: str | None = None,
    color_shift: Mapping[str, float] | None = None,
) -> list[CandidateColor]:
    """Give the k-th candidate by index rank the k-th evenly spaced hue."""
    relative_order = sorted(CandidateColor(candidate, index) for candidate, index in color_index.items())
    hues = assignable_hues(len(relative_order), color_deficiency, color_shift)
    return [CandidateColor(ranked.candidate, hue) for ranked, hue in zip(relative_order, hues)]


def pair_candidates_to_colors(
    color_index: Mapping[str, float],
    color_deficiency: str | None = None,
    color_shift: Mapping[str, float] | None = None,
    threshold: int | None = None,
) -> list[CandidateColor]:
    """Decide on the hue of every candidate in ``color_index``.

    Args:
        color_index: candidate -> index in ``[0, N)``
        color_deficiency: ``protanopia``, ``deuteranopia``, ``tritanopia`` or None
        color_shift: mode -> hue rotation (config default)
        threshold: candidate count above which proportional coloring is used
            (config default: 75)

    Returns:
        One CandidateColor per candidate, unordered
    """
    cfg = get_config()
    if color_shift is None:
        color_shift = cfg["color_shift"]
    if threshold is None:
        threshold = cfg["proportional_coloring_threshold"]
    validate_color_deficiency(color_deficiency, color_shift)

    if not color_index:
        return []
    if len(color_index) > threshold:
        logger.debug(f"{len(color_index)} candidates exceed {threshold}, using proportional colors")
        return pair_candidates_to_proportional_colors(color_index, color_deficiency, color_shift)
    return pair_candidates_to_ranked_colors(color_index, color_deficiency, color_shift)


def provisional_hues(candidates: Iterable[str], seed: int | None = None) -> list[CandidateColor]:
    """Shuffled placeholder hues for candidates whose edges are not known yet.

    The wheel is split into ``N`` chunks and each candidate gets the
    (floored) centre of a randomly chosen chunk.
    """
    names = list(dict.fromkeys(candidates))
    if not names:
        return []

    chunk_size = 360 / len(names)
    centres = np.floor(chunk_size * np.arange(len(names)) + chunk_size / 2)
    shuffled = np.random.default_rng(seed).permutation(len(names))
    return [CandidateColor(name, float(centres[slot])) for name, slot in zip(names, shuffled)]
