"""Tests for the file-based coloring runs."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pandas as pd
import pytest

from candicolor.config import apply_user_config
from candicolor.scripts.run_coloring import (
    collect_candidates,
    run_coloring,
    run_plot,
    run_repaint,
)


@pytest.mark.unit
def test_collect_candidates() -> None:
    found = collect_candidates({("A", "B"): 1}, [("C", "r1")])
    assert found == {"A", "B", "C"}


@pytest.mark.integration
def test_run_coloring_with_candidates_file(edges_tsv: Path, tmp_output_dir: Path) -> None:
    candidates_file = tmp_output_dir / "candidates.txt"
    candidates_file.write_text("A\nB\nE\n")
    output_file = tmp_output_dir / "colors.tsv"
    plot_file = tmp_output_dir / "wheel.png"

    result = run_coloring(edges_tsv, output_file, candidates_file=candidates_file, plot_file=plot_file)

    # C is not listed, so only A-B counts; E has no edges
    assert result.color_index == {"A": 0.0, "B": 1.5, "E": 0.0}
    df = pd.read_csv(output_file, sep="\t")
    assert df["Candidate"].tolist() == ["A", "E", "B"]
    assert df["Hue"].tolist() == [0.0, 120.0, 240.0]
    assert plot_file.exists()


@pytest.mark.integration
def test_run_repaint_and_plot(edges_tsv: Path, tmp_output_dir: Path) -> None:
    colors_file = tmp_output_dir / "colors.tsv"
    run_coloring(edges_tsv, colors_file)

    repainted = tmp_output_dir / "deuteranopia.tsv"
    colors = run_repaint(colors_file, repainted, color_deficiency="deuteranopia")
    assert {c.candidate: c.color for c in colors} == pytest.approx(
        {"A": 240.0, "C": 280.0, "B": 320.0}
    )

    plot_file = tmp_output_dir / "wheel.png"
    run_plot(repainted, plot_file, title="Deuteranopia")
    assert plot_file.exists()


@pytest.mark.integration
def test_run_coloring_sums_several_edge_files(edges_tsv: Path, tmp_output_dir: Path) -> None:
    second = tmp_output_dir / "edges_env2.tsv"
    second.write_text("Candidate1\tCandidate2\tOccurrences\nC\tB\t4\nC\tD\t6\n")
    output_file = tmp_output_dir / "colors.tsv"

    result = run_coloring([edges_tsv, second], output_file)

    # B-C totals 7 across both files, so it goes before C-D (6) and A-B (5)
    assert result.color_index == {"B": 0.0, "C": 2.0, "D": 0.0, "A": 2.0}


@pytest.mark.unit
def test_plots_use_configured_size(tmp_path: Path, tmp_output_dir: Path) -> None:
    config_file = tmp_path / "user.json"
    config_file.write_text(json.dumps({"plotting": {"width": 300, "height": 200}}))
    apply_user_config(config_file)

    colors_file = tmp_output_dir / "colors.tsv"
    colors_file.write_text("Candidate\tIndex\tHue\nA\t0.0\t0.0\nB\t1.0\t180.0\n")

    with patch(
        "candicolor.scripts.plotting.matplotlib_backend.generate_hue_wheel_matplotlib"
    ) as mock_plot:
        run_plot(colors_file, tmp_output_dir / "wheel.png", title="Sized")

    mock_plot.assert_called_once()
    assert mock_plot.call_args.kwargs == {"width": 300, "height": 200}
