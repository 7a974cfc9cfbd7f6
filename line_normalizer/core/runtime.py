"""
Generic runtime utilities used across the normalizer.

This module contains only small, infrastructure-level helpers that:
- do NOT belong to line parsing
- do NOT belong to normalization logic
- do NOT belong to completion logic

Functions included:
- log_event: append timestamped log entries
- load_settings: YAML settings overlaid on built-in defaults
"""

import os
from datetime import datetime
from typing import Any, Dict, Optional

import yaml


# ---------------------------------------------------------------------------
# Settings defaults
# ---------------------------------------------------------------------------
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DEFAULT_SETTINGS_PATH = os.path.join(BASE_DIR, "config", "settings.yaml")
SETTINGS_ENV_VAR = "LINE_NORMALIZER_CONFIG"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "output_prefix": "normalized-",
    "skip_first_line": True,
    "encodings": ["utf-8", "cp1252", "utf-16"],
    "logfile": None,
}


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def log_event(logfile_path: Optional[str], message: str) -> None:
    """
    Append a timestamped log message to the logfile.

    Without a logfile nothing is written. Logging must never interrupt the
    run, so write failures are ignored.
    """
    if not logfile_path:
        return

    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        with open(logfile_path, "a", encoding="utf-8") as f:
            f.write(f"{timestamp} {message}\n")
    except OSError:
        pass


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------
def settings_path() -> str:
    """Settings file named by LINE_NORMALIZER_CONFIG, else the bundled one."""
    return os.environ.get(SETTINGS_ENV_VAR) or DEFAULT_SETTINGS_PATH


def load_settings(path: str) -> Dict[str, Any]:
    """
    Load a YAML settings file and overlay it on DEFAULT_SETTINGS.

    - A missing file yields the defaults.
    - An empty file yields the defaults.
    - Unknown keys are kept as-is.

    Raises:
        ValueError: if the file does not hold a mapping at the top level.
    """
    settings: Dict[str, Any] = dict(DEFAULT_SETTINGS)

    if not os.path.exists(path):
        return settings

    with open(path, "r", encoding="utf-8") as f:
        loaded = yaml.safe_load(f)

    if loaded is None:
        return settings

    if not isinstance(loaded, dict):
        raise ValueError(f"Settings file {path} must contain a mapping.")

    settings.update(loaded)
    return settings
