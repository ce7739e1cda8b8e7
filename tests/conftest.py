"""Shared test fixtures for the candicolor test suite."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from candicolor.config import _reset


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")
    config.addinivalue_line("markers", "integration: end-to-end CLI and file tests")


@pytest.fixture(autouse=True)
def fresh_config() -> Iterator[None]:
    """Drop any config overrides a test applied."""
    _reset()
    yield
    _reset()


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Load the project config.json."""
    config_path = Path(__file__).resolve().parent.parent / "candicolor" / "config.json"
    with open(config_path) as f:
        return json.load(f)


@pytest.fixture
def tmp_output_dir(tmp_path: Path) -> Path:
    """Provide a temporary output directory."""
    out = tmp_path / "output"
    out.mkdir()
    return out


@pytest.fixture
def chain_edges() -> dict[tuple[str, str], int]:
    """A-B seen five times, B-C three times."""
    return {("A", "B"): 5, ("B", "C"): 3}


@pytest.fixture
def ring_edges() -> dict[tuple[str, str], int]:
    """Eight candidates in a ring with distinct weights."""
    names = [f"c{i}" for i in range(8)]
    return {(names[i], names[(i + 1) % 8]): 10 + i for i in range(8)}


@pytest.fixture
def edges_tsv(tmp_path: Path) -> Path:
    """Edge table on disk, with one pair repeated."""
    f = tmp_path / "edges.tsv"
    f.write_text(
        "Candidate1\tCandidate2\tOccurrences\n"
        "A\tB\t3\n"
        "B\tC\t3\n"
        "A\tB\t2\n"
    )
    return f


@pytest.fixture
def releases_tsv(tmp_path: Path) -> Path:
    """Release table putting C and D in one release."""
    f = tmp_path / "releases.tsv"
    f.write_text("Candidate\tRelease\nC\tr1\nD\tr1\nA\tr2\n")
    return f
