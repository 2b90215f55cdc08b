"""Configuration loader for FocusTime.

Reads an optional config.json. Nothing is written back: when the file is
missing the built-in defaults apply. Resolves platform-appropriate data
directories:
  - macOS:   ~/Library/Application Support/FocusTime
  - Windows: %APPDATA%/FocusTime
  - Other:   ~/.focustime
"""

import json
import logging
import math
import os
import sys
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_INTERVAL_KEYS = ("poll_interval_seconds", "display_interval_seconds")


def get_data_directory() -> Path:
    """Return the platform-appropriate data directory for FocusTime."""
    if sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    elif sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        base = Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    else:
        base = Path.home()
        return base / ".focustime"
    return base / "FocusTime"


def get_default_config() -> dict[str, Any]:
    """Return the default configuration dictionary."""
    return {
        "poll_interval_seconds": 0.1,
        "display_interval_seconds": 1.0,
    }


def get_default_config_path() -> Path:
    """Return the default path for config.json."""
    return get_data_directory() / "config.json"


def load_config(path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration from a JSON file.

    If *path* is ``None``, the platform default location is used.
    Missing files and invalid JSON yield the defaults. Interval values
    that are not positive finite numbers are logged and replaced by their
    defaults; unknown keys are ignored.
    """
    config_path = Path(path) if path is not None else get_default_config_path()
    config = get_default_config()

    if not config_path.exists():
        logger.debug("Config file not found at %s — using defaults.", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, dict):
            raise ValueError("Top-level JSON value must be an object")
    except (json.JSONDecodeError, ValueError, OSError) as exc:
        logger.error("Failed to load config from %s: %s — using defaults.", config_path, exc)
        return config

    for key in _INTERVAL_KEYS:
        if key not in data:
            continue
        value = data[key]
        if (
            isinstance(value, bool)
            or not isinstance(value, (int, float))
            or not math.isfinite(value)
            or value <= 0
        ):
            logger.error("Invalid %s=%r in %s — using default.", key, value, config_path)
            continue
        config[key] = float(value)

    return config
