"""Hue to RGB conversion for tables and plots."""

from __future__ import annotations

import colorsys

from candicolor.config import get_config

# Used for empty plots and candidates without a hue
FALLBACK_COLOR: str = "#999999"


def hue_to_hex(hue: float, saturation: float | None = None, lightness: float | None = None) -> str:
    """Convert a hue in degrees to an ``#rrggbb`` string (HSL model)."""
    plot_cfg = get_config()["plotting"]
    if saturation is None:
        saturation = plot_cfg["saturation"]
    if lightness is None:
        lightness = plot_cfg["lightness"]

    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"
