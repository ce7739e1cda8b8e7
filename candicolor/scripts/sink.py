"""Delivery of candidate colors to the store that renders them."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from .edges import CandidateColor
from .plotting.colors import hue_to_hex

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)

COLOR_COLUMNS = ["Candidate", "Index", "Hue", "HexColor"]


class CandidateSink(Protocol):
    def add_candidate(self, color: float, candidate: str) -> None: ...


class CandidateStore:
    """In-memory sink remembering the latest hue of each candidate."""

    def __init__(self) -> None:
        self._colors: dict[str, float] = {}

    def add_candidate(self, color: float, candidate: str) -> None:
        self._colors[candidate] = color

    def color_of(self, candidate: str) -> float:
        return self._colors[candidate]

    def __contains__(self, candidate: object) -> bool:
        return candidate in self._colors

    def __len__(self) -> int:
        return len(self._colors)

    def to_dataframe(self) -> pd.DataFrame:
        import pandas as pd

        return pd.DataFrame(
            {"Candidate": list(self._colors), "Hue": list(self._colors.values())}
        )


def save_colors(candidate_colors: Iterable[CandidateColor], sink: CandidateSink) -> int:
    """Push each candidate color to ``sink`` once; returns how many were pushed."""
    count = 0
    for candidate_color in candidate_colors:
        sink.add_candidate(candidate_color.color, candidate_color.candidate)
        count += 1
    logger.debug(f"Saved {count} candidate colors")
    return count


def colors_to_dataframe(
    candidate_colors: Iterable[CandidateColor],
    color_index: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """Tabulate colors sorted by hue, then candidate."""
    import pandas as pd

    ordered = sorted(candidate_colors)
    return pd.DataFrame(
        {
            "Candidate": [c.candidate for c in ordered],
            "Index": [color_index.get(c.candidate) if color_index else None for c in ordered],
            "Hue": [c.color for c in ordered],
            "HexColor": [hue_to_hex(c.color) for c in ordered],
        },
        columns=COLOR_COLUMNS,
    )


def write_colors_tsv(
    candidate_colors: Iterable[CandidateColor],
    output_file: str | Path,
    color_index: Mapping[str, float] | None = None,
) -> pd.DataFrame:
    """Write the colors table as TSV and return it."""
    df = colors_to_dataframe(candidate_colors, color_index)
    df.to_csv(output_file, sep="\t", index=False)
    logger.info(f"Wrote {len(df)} candidate colors to {output_file}")
    return df
