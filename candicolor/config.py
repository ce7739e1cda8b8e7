"""Centralized configuration for candicolor.

Loads the bundled config.json once at first access. A user config file
can be layered on top with ``apply_user_config``; its top-level keys
replace the bundled ones, and nested dicts (``color_shift``,
``plotting``) are merged key by key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

_config: dict[str, Any] | None = None
_CONFIG_PATH = Path(__file__).resolve().parent / "config.json"


def get_config() -> dict[str, Any]:
    """Return the loaded configuration, loading from disk on first call."""
    global _config
    if _config is None:
        with open(_CONFIG_PATH) as f:
            _config = json.load(f)
    return _config


def apply_user_config(config_file: str | Path) -> dict[str, Any]:
    """Merge a user-supplied JSON config over the bundled defaults.

    Raises:
        FileNotFoundError: if ``config_file`` does not exist
        ValueError: if the file is not a JSON object
    """
    path = Path(config_file)
    if not path.is_file():
        logging.error(f"Config file not found: {path}")
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        overrides = json.load(f)
    if not isinstance(overrides, dict):
        raise ValueError(f"Config file must contain a JSON object: {path}")

    config = get_config()
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(config.get(key), dict):
            config[key] = {**config[key], **value}
        else:
            config[key] = value
    logging.debug(f"Applied user config from {path}: {sorted(overrides)}")
    return config


def _reset() -> None:
    """Reset cached config (for testing only)."""
    global _config
    _config = None
