"""Greedy color-index assignment on a circular scale.

Edges are processed by weight, heaviest first. Each still-unindexed
endpoint takes the midpoint of the largest free arc between the indices
of its already-indexed neighbours on the circle ``[0, N)``. Indices are
orderings, not integers.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from .edges import CandidateEdge

logger = logging.getLogger(__name__)


def select_color_index(
    candidate: str,
    graph: Mapping[str, Iterable[str]],
    color_index: Mapping[str, float],
    n_candidates: int,
) -> float:
    """Return the index farthest from the indexed neighbours of ``candidate``."""
    neighbours_colors = sorted(
        color_index[neighbour] for neighbour in graph.get(candidate, ()) if neighbour in color_index
    )
    if not neighbours_colors:
        return 0.0

    answer = -1.0
    largest_space = 0.0
    for lower, upper in zip(neighbours_colors, neighbours_colors[1:]):
        if upper - lower > largest_space:
            largest_space = upper - lower
            answer = (upper + lower) / 2

    # The scale is circular: check the arc from the largest index back to the smallest
    smallest = neighbours_colors[0]
    largest = neighbours_colors[-1]
    if smallest + n_candidates - largest > largest_space:
        answer = (largest + smallest + n_candidates) / 2
        if answer >= n_candidates:
            answer -= n_candidates

    return answer


def sorted_edges(weights: Mapping[tuple[str, str], int]) -> list[CandidateEdge]:
    """Edges by weight descending; equal weights fall back to the pair order."""
    edges = [CandidateEdge(pair[0], pair[1], weight) for pair, weight in weights.items()]
    edges.sort(key=lambda edge: (-edge.occurrences, edge.candidate1, edge.candidate2))
    return edges


def assign_color_indices(
    graph: Mapping[str, Iterable[str]],
    weights: Mapping[tuple[str, str], int],
    candidates: Iterable[str],
) -> dict[str, float]:
    """Assign every candidate a position in ``[0, N)``.

    Args:
        graph: symmetric adjacency mapping
        weights: normalized pair -> weight
        candidates: the full candidate set, isolated candidates included

    Returns:
        candidate -> color index
    """
    candidate_list = sorted(set(candidates))
    n_candidates = len(candidate_list)
    color_index: dict[str, float] = {}

    isolated = 0
    for candidate in candidate_list:
        if candidate not in graph:
            color_index[candidate] = 0.0
            isolated += 1
    if isolated:
        logger.debug(f"{isolated} candidates have no edges and share index 0")

    for edge in sorted_edges(weights):
        for candidate in (edge.candidate1, edge.candidate2):
            if candidate not in color_index:
                color_index[candidate] = select_color_index(candidate, graph, color_index, n_candidates)

    return color_index
