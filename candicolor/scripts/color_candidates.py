"""Coloring runs: graph, indices, hues, sink.

Every call builds its own graph, weight table and index map, so calls do
not share state.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from candicolor.config import get_config

from .edges import CandidateColor
from .graph_builder import build_graph
from .hue_mapper import pair_candidates_to_colors, validate_color_deficiency
from .index_assigner import assign_color_indices
from .sink import CandidateSink, save_colors

logger = logging.getLogger(__name__)


@dataclass
class ColoringResult:
    """Indices and hues from one coloring run."""

    color_index: dict[str, float] = field(default_factory=dict)
    colors: list[CandidateColor] = field(default_factory=list)

    def hue_of(self, candidate: str) -> float:
        for candidate_color in self.colors:
            if candidate_color.candidate == candidate:
                return candidate_color.color
        raise KeyError(candidate)


def compute_color_index(
    edge_weights: Mapping[Hashable, int],
    candidates: Iterable[str],
    release_membership: Iterable[tuple[str, str]] = (),
    release_candidates: Mapping[str, Iterable[str]] | None = None,
    config: dict[str, Any] | None = None,
) -> dict[str, float]:
    """Build the graph for ``candidates`` and assign every one an index."""
    cfg = config if config is not None else get_config()
    candidate_set = set(candidates)
    graph, weights = build_graph(
        edge_weights,
        candidate_set,
        release_membership,
        release_candidates,
        release_edge_cost=cfg["release_edge_cost"],
    )
    return assign_color_indices(graph, weights, candidate_set)


def repaint_candidates(
    color_index: Mapping[str, float],
    color_deficiency: str | None = None,
    sink: CandidateSink | None = None,
    config: dict[str, Any] | None = None,
) -> list[CandidateColor]:
    """Recompute hues from existing indices, e.g. after the deficiency mode changes."""
    cfg = config if config is not None else get_config()
    colors = pair_candidates_to_colors(
        color_index,
        color_deficiency,
        color_shift=cfg["color_shift"],
        threshold=cfg["proportional_coloring_threshold"],
    )
    if sink is not None:
        save_colors(colors, sink)
    return colors


def color_candidates(
    edge_weights: Mapping[Hashable, int],
    candidates: Iterable[str],
    release_membership: Iterable[tuple[str, str]] = (),
    release_candidates: Mapping[str, Iterable[str]] | None = None,
    color_deficiency: str | None = None,
    sink: CandidateSink | None = None,
    config: dict[str, Any] | None = None,
) -> ColoringResult:
    """Color ``candidates`` so that frequent neighbours get distant hues.

    Args:
        edge_weights: co-occurrence counts keyed by string edge keys or
            ``(candidate1, candidate2)`` tuples
        candidates: the candidates to color
        release_membership: ``(candidate, release)`` pairs
        release_candidates: ``release -> candidates``; derived when omitted
        color_deficiency: optional color-vision-deficiency mode
        sink: receives one ``add_candidate(hue, candidate)`` per candidate
        config: configuration dict (default: ``get_config()``)

    Returns:
        ColoringResult with the color index and the hues

    Raises:
        ValueError: unknown deficiency mode, malformed edge key, self-edge
            or negative weight
    """
    cfg = config if config is not None else get_config()
    validate_color_deficiency(color_deficiency, cfg["color_shift"])

    candidate_set = set(candidates)
    if not candidate_set:
        logger.warning("No candidates to color")
        return ColoringResult()

    logger.info(f"Coloring {len(candidate_set)} candidates")
    color_index = compute_color_index(
        edge_weights, candidate_set, release_membership, release_candidates, cfg
    )
    colors = repaint_candidates(color_index, color_deficiency, sink, cfg)
    return ColoringResult(color_index=color_index, colors=colors)
