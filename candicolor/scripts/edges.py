"""Value types for weighted candidate pairs and colored candidates.

Edge tables cross the library boundary either as string keys
(``"<candidate1>\\n<candidate2>"``) or as ``(candidate1, candidate2)``
tuples. String keys are order-sensitive; everything inside the engine is
keyed by the order-normalized pair from ``normalize_pair``.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

SEPARATOR = "\n"


def make_edge_key(candidate1: str, candidate2: str) -> str:
    """Encode an ordered candidate pair as a string key.

    ``make_edge_key("a", "b") != make_edge_key("b", "a")``.

    Raises:
        ValueError: if either identifier contains the separator
    """
    for candidate in (candidate1, candidate2):
        if SEPARATOR in candidate:
            raise ValueError(f"Candidate identifier contains the edge key separator: {candidate!r}")
    return f"{candidate1}{SEPARATOR}{candidate2}"


def parse_edge_key(key: str) -> tuple[str, str]:
    """Decode a key produced by ``make_edge_key``.

    Raises:
        ValueError: if the key does not hold exactly two non-empty identifiers
    """
    parts = key.split(SEPARATOR)
    if len(parts) != 2 or not parts[0] or not parts[1]:
        raise ValueError(f"Malformed edge key: {key!r}")
    return parts[0], parts[1]


def normalize_pair(candidate1: str, candidate2: str) -> tuple[str, str]:
    """Return the pair with the lexicographically smaller identifier first."""
    if candidate1 <= candidate2:
        return candidate1, candidate2
    return candidate2, candidate1


def decode_edge(key: Hashable) -> tuple[str, str]:
    """Accept either a string key or a 2-tuple and return the ordered pair."""
    if isinstance(key, str):
        return parse_edge_key(key)
    if isinstance(key, tuple) and len(key) == 2:
        return str(key[0]), str(key[1])
    raise ValueError(f"Unsupported edge key: {key!r}")


@dataclass(frozen=True)
class CandidateEdge:
    """Weighted undirected edge between two distinct candidates."""

    candidate1: str
    candidate2: str
    occurrences: int = 0

    def __post_init__(self) -> None:
        if self.candidate1 == self.candidate2:
            raise ValueError(f"Edge endpoints must differ: {self.candidate1!r}")

    @classmethod
    def from_key(cls, key: str, occurrences: int = 0) -> CandidateEdge:
        candidate1, candidate2 = parse_edge_key(key)
        return cls(candidate1, candidate2, occurrences)

    def to_key(self) -> str:
        return make_edge_key(self.candidate1, self.candidate2)

    @property
    def pair(self) -> tuple[str, str]:
        return normalize_pair(self.candidate1, self.candidate2)


@dataclass(frozen=True)
class CandidateColor:
    """A candidate with its hue (or, before hue mapping, its color index).

    Instances sort by color ascending, then by candidate identifier.
    """

    candidate: str
    color: float

    def sort_key(self) -> tuple[float, str]:
        return (self.color, self.candidate)

    def __lt__(self, other: CandidateColor) -> bool:
        return self.sort_key() < other.sort_key()
