"""Matplotlib backend for static PNG hue wheels."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pandas as pd

from .colors import FALLBACK_COLOR, hue_to_hex

logger = logging.getLogger(__name__)

# Above this many candidates the wheel is drawn without labels
MAX_LABELLED_CANDIDATES = 40


def generate_hue_wheel_matplotlib(
    colors_df: pd.DataFrame,
    output_path: Path | str,
    title: str,
    width: int = 800,
    height: int = 800,
) -> None:
    """Draw each candidate as a spoke on a polar hue wheel.

    Args:
        colors_df: DataFrame with columns [Candidate, Hue] (HexColor optional)
        output_path: Output PNG file path
        title: Plot title
        width: Plot width in pixels (default: 800)
        height: Plot height in pixels (default: 800)
    """
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt
    import numpy as np
    import seaborn as sns

    if colors_df.empty:
        logger.warning("Empty DataFrame provided to generate_hue_wheel_matplotlib")
        fig, ax = plt.subplots(figsize=(width / 100, height / 100))
        ax.text(
            0.5,
            0.5,
            "No data available",
            ha="center",
            va="center",
            fontsize=12,
            color=FALLBACK_COLOR,
        )
        fig.savefig(output_path, dpi=150, bbox_inches="tight")
        plt.close(fig)
        return

    sns.set_theme(style="white")

    hues = colors_df["Hue"].astype(float).to_numpy()
    if "HexColor" in colors_df.columns:
        bar_colors = colors_df["HexColor"].tolist()
    else:
        bar_colors = [hue_to_hex(hue) for hue in hues]

    fig = plt.figure(figsize=(width / 100, height / 100))
    ax = fig.add_subplot(projection="polar")

    theta = np.deg2rad(hues)
    bar_width = 2 * np.pi / max(len(hues), 1) * 0.8
    ax.bar(theta, np.ones_like(theta), width=bar_width, bottom=0.3, color=bar_colors, edgecolor="white")

    if len(hues) <= MAX_LABELLED_CANDIDATES:
        for angle, candidate in zip(theta, colors_df["Candidate"]):
            ax.text(angle, 1.45, str(candidate), ha="center", va="center", fontsize=8)

    ax.set_yticks([])
    ax.set_xticks(np.deg2rad(np.arange(0, 360, 60)))
    ax.set_xticklabels([f"{deg}°" for deg in range(0, 360, 60)])
    ax.set_ylim(0, 1.6)
    ax.set_title(title)

    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    logger.info(f"Saved hue wheel to {output_path}")
