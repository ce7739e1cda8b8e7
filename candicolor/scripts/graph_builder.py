"""Adjacency graph and edge-weight table construction.

The graph maps each candidate to the set of its neighbours and is
symmetric by construction. Weights are keyed by normalized pairs, so a
pair contributed as ``(a, b)`` and as ``(b, a)`` lands on one entry.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping

from candicolor.config import get_config

from .edges import decode_edge, normalize_pair

logger = logging.getLogger(__name__)

Graph = dict[str, set[str]]
WeightTable = dict[tuple[str, str], int]


def add_edge_to_graph(graph: Graph, candidate1: str, candidate2: str) -> None:
    """Make ``candidate1`` and ``candidate2`` neighbours of each other."""
    graph.setdefault(candidate1, set()).add(candidate2)
    graph.setdefault(candidate2, set()).add(candidate1)


def build_release_lookup(
    release_membership: Iterable[tuple[str, str]],
) -> dict[str, set[str]]:
    """Group ``(candidate, release)`` pairs into ``release -> candidates``."""
    lookup: dict[str, set[str]] = {}
    for candidate, release in release_membership:
        lookup.setdefault(release, set()).add(candidate)
    return lookup


def accumulate_edges(*tables: Mapping[Hashable, int]) -> WeightTable:
    """Sum co-occurrence weights across several edge tables.

    Each table usually comes from one timeline; a pair seen on several
    timelines gets the total of its occurrences.
    """
    total: WeightTable = {}
    for table in tables:
        for key, weight in table.items():
            pair = normalize_pair(*decode_edge(key))
            total[pair] = total.get(pair, 0) + weight
    return total


def construct_graph(
    edge_weights: Mapping[Hashable, int],
    candidates: set[str] | frozenset[str],
    graph: Graph,
    weights: WeightTable,
) -> None:
    """Merge co-occurrence edges into ``graph`` and ``weights``."""
    skipped = 0
    for key, weight in edge_weights.items():
        candidate1, candidate2 = decode_edge(key)
        if candidate1 == candidate2:
            raise ValueError(f"Edge endpoints must differ: {candidate1!r}")
        if weight < 0:
            raise ValueError(f"Negative weight {weight} for edge ({candidate1!r}, {candidate2!r})")
        if weight == 0:
            continue
        if candidate1 not in candidates or candidate2 not in candidates:
            skipped += 1
            continue

        add_edge_to_graph(graph, candidate1, candidate2)
        weights[normalize_pair(candidate1, candidate2)] = weight

    if skipped:
        logger.debug(f"Skipped {skipped} edges touching candidates outside the set")


def add_release_edges(
    release_membership: Iterable[tuple[str, str]],
    release_candidates: Mapping[str, Iterable[str]],
    candidates: set[str] | frozenset[str],
    graph: Graph,
    weights: WeightTable,
    release_edge_cost: int,
) -> None:
    """Connect candidates sharing a release with a fixed synthetic weight.

    The release weight replaces any co-occurrence weight already stored for
    the pair.
    """
    for candidate, release in release_membership:
        if candidate not in candidates:
            continue

        for other in release_candidates.get(release, ()):
            if other == candidate or other not in candidates:
                continue
            add_edge_to_graph(graph, candidate, other)
            weights[normalize_pair(candidate, other)] = release_edge_cost


def build_graph(
    edge_weights: Mapping[Hashable, int],
    candidates: Iterable[str],
    release_membership: Iterable[tuple[str, str]] = (),
    release_candidates: Mapping[str, Iterable[str]] | None = None,
    release_edge_cost: int | None = None,
) -> tuple[Graph, WeightTable]:
    """Build the adjacency graph and weight table for one coloring run.

    Args:
        edge_weights: co-occurrence counts keyed by string edge keys or
            ``(candidate1, candidate2)`` tuples
        candidates: candidates to color; edges touching anything else are
            ignored
        release_membership: ``(candidate, release)`` pairs
        release_candidates: ``release -> candidates`` lookup; derived from
            ``release_membership`` when omitted
        release_edge_cost: weight given to release edges (config default: 10)

    Returns:
        (graph, weights)
    """
    candidate_set = frozenset(candidates)
    if release_edge_cost is None:
        release_edge_cost = get_config()["release_edge_cost"]

    membership = list(release_membership)
    if release_candidates is None:
        release_candidates = build_release_lookup(membership)

    graph: Graph = {}
    weights: WeightTable = {}
    construct_graph(edge_weights, candidate_set, graph, weights)
    add_release_edges(membership, release_candidates, candidate_set, graph, weights, release_edge_cost)

    logger.debug(
        f"Built graph with {len(graph)} connected candidates and {len(weights)} weighted edges"
    )
    return graph, weights
