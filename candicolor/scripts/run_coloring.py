import logging

from candicolor.config import get_config

from .color_candidates import color_candidates, repaint_candidates
from .graph_builder import accumulate_edges
from .sink import write_colors_tsv
from .utils import (
    load_color_index,
    load_edge_weights,
    load_release_membership,
    read_file_list,
    read_tsv,
)


def collect_candidates(edge_weights, release_membership):
    """Every candidate named by an edge or a release membership."""
    candidates = set()
    for candidate1, candidate2 in edge_weights:
        candidates.update((candidate1, candidate2))
    candidates.update(candidate for candidate, _ in release_membership)
    return candidates


def plot_hue_wheel(colors_df, plot_file, title):
    """Draw the hue wheel at the configured size."""
    from .plotting.matplotlib_backend import generate_hue_wheel_matplotlib

    plot_cfg = get_config()['plotting']
    generate_hue_wheel_matplotlib(colors_df, plot_file, title, width=plot_cfg['width'], height=plot_cfg['height'])


def run_coloring(edges_files, output_file, candidates_file=None, releases_file=None, color_deficiency=None, plot_file=None):
    """Color the candidates of one or more edge tables and write the colors TSV.

    Counts for a pair seen in several tables (one per timeline) are summed.
    """
    if not isinstance(edges_files, (list, tuple)):
        edges_files = [edges_files]
    edge_weights = accumulate_edges(*(load_edge_weights(edges_file) for edges_file in edges_files))
    release_membership = load_release_membership(releases_file) if releases_file else []

    if candidates_file:
        candidates = set(read_file_list(candidates_file))
    else:
        candidates = collect_candidates(edge_weights, release_membership)
        logging.info(f"No candidates file given, coloring all {len(candidates)} candidates found in the inputs")

    result = color_candidates(edge_weights, candidates, release_membership, color_deficiency=color_deficiency)
    colors_df = write_colors_tsv(result.colors, output_file, result.color_index)

    if plot_file:
        plot_hue_wheel(colors_df, plot_file, f"Candidate hues (N={len(colors_df)})")
    return result


def run_repaint(input_file, output_file, color_deficiency=None, plot_file=None):
    """Recompute hues from the Index column of an existing colors TSV."""
    color_index = load_color_index(input_file)
    logging.info(f"Repainting {len(color_index)} candidates from {input_file}")
    colors = repaint_candidates(color_index, color_deficiency)
    colors_df = write_colors_tsv(colors, output_file, color_index)

    if plot_file:
        plot_hue_wheel(colors_df, plot_file, f"Candidate hues (N={len(colors_df)})")
    return colors


def run_plot(input_file, output_file, title="Candidate hues"):
    """Draw the hue wheel of a colors TSV."""
    colors_df = read_tsv(input_file, ["Candidate", "Hue"])
    plot_hue_wheel(colors_df, output_file, title)
