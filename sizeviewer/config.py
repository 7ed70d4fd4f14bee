"""Read-only JSON config helpers.

Supplies defaults for theme, bar width, color and unsupported-entry policy.
Access is defensive: malformed or missing config falls back to defaults,
and nothing is ever written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "sizeviewer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    if not isinstance(data, dict):
        logger.debug("ignoring config %s: top level is not an object", CONFIG_PATH)
        return {}
    return data


def _load_bool(key: str) -> bool:
    """Only explicit booleans are accepted; anything else reads as ``False``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else False


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_bar_width() -> int | None:
    """Load configured bar width; booleans and non-positive values are dropped."""
    value = load_config().get("bar_width")
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if value <= 0:
        return None
    return value


def load_no_color() -> bool:
    return _load_bool("no_color")


def load_strict() -> bool:
    return _load_bool("strict")
