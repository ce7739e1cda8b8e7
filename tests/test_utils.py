"""Unit tests for candicolor.scripts.utils."""

from __future__ import annotations

from pathlib import Path

import pytest

from candicolor.scripts.graph_builder import build_graph
from candicolor.scripts.utils import (
    load_color_index,
    load_edge_weights,
    load_release_membership,
    read_file_list,
    validate_file_existence,
)

# -- validate_file_existence ----------------------------------------------------


class TestValidateFileExistence:
    @pytest.mark.unit
    def test_all_files_exist(self, tmp_path: Path) -> None:
        f1 = tmp_path / "a.txt"
        f1.write_text("x")
        validate_file_existence([str(f1)])  # no exception

    @pytest.mark.unit
    def test_one_missing(self, tmp_path: Path) -> None:
        missing = str(tmp_path / "nope.tsv")
        with pytest.raises(FileNotFoundError, match=r"nope\.tsv"):
            validate_file_existence([missing])


# -- loaders --------------------------------------------------------------------


class TestLoadEdgeWeights:
    @pytest.mark.unit
    def test_repeated_pairs_summed(self, edges_tsv: Path) -> None:
        assert load_edge_weights(edges_tsv) == {("A", "B"): 5, ("B", "C"): 3}

    @pytest.mark.unit
    def test_reversed_rows_summed(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.tsv"
        f.write_text(
            "Candidate1\tCandidate2\tOccurrences\n"
            "A\tB\t3\n"
            "B\tA\t4\n"
            "B\tC\t5\n"
        )
        edge_weights = load_edge_weights(f)
        assert edge_weights == {("A", "B"): 7, ("B", "C"): 5}
        _, weights = build_graph(edge_weights, {"A", "B", "C"})
        assert weights == {("A", "B"): 7, ("B", "C"): 5}

    @pytest.mark.unit
    def test_identifiers_kept_as_strings(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.tsv"
        f.write_text("Candidate1\tCandidate2\tOccurrences\n001\t2.0\t4\n")
        assert load_edge_weights(f) == {("001", "2.0"): 4}

    @pytest.mark.unit
    def test_missing_column(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.tsv"
        f.write_text("Candidate1\tCandidate2\nA\tB\n")
        with pytest.raises(ValueError, match="Occurrences"):
            load_edge_weights(f)

    @pytest.mark.unit
    def test_non_integer_occurrences(self, tmp_path: Path) -> None:
        f = tmp_path / "edges.tsv"
        f.write_text("Candidate1\tCandidate2\tOccurrences\nA\tB\tmany\n")
        with pytest.raises(ValueError):
            load_edge_weights(f)

    @pytest.mark.unit
    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_edge_weights(tmp_path / "absent.tsv")


class TestOtherLoaders:
    @pytest.mark.unit
    def test_release_membership(self, releases_tsv: Path) -> None:
        assert load_release_membership(releases_tsv) == [("C", "r1"), ("D", "r1"), ("A", "r2")]

    @pytest.mark.unit
    def test_read_file_list_skips_blanks(self, tmp_path: Path) -> None:
        f = tmp_path / "candidates.txt"
        f.write_text("A\n\n  B  \nC\n")
        assert read_file_list(f) == ["A", "B", "C"]

    @pytest.mark.unit
    def test_load_color_index(self, tmp_path: Path) -> None:
        f = tmp_path / "colors.tsv"
        f.write_text("Candidate\tIndex\tHue\nA\t0.0\t0.0\nB\t1.5\t240.0\n")
        assert load_color_index(f) == {"A": 0.0, "B": 1.5}
