"""Persistent JSON config helpers.

Stores the UI theme, the Pygments style used by ``cat`` and the history size.
All access is tolerant: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .history import MAX_HISTORY_ENTRIES

logger = logging.getLogger(__name__)

APP_NAME = "treeshell"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON; return whether it was written."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)
        return False
    return True


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> bool:
    """Persist selected UI theme name."""
    stripped = str(theme_name).strip()
    if not stripped:
        return False
    config = load_config()
    config["theme"] = stripped
    return save_config(config)


def load_style_name() -> str:
    """Load the Pygments style name for file bodies."""
    return _load_string("style") or DEFAULT_STYLE


def load_history_size() -> int:
    """Return the configured history cap.

    Booleans, non-integers and values below one fall back to the default.
    """
    value = load_config().get("history_size")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return MAX_HISTORY_ENTRIES
    return value


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_STYLE",
    "load_config",
    "save_config",
    "load_theme_name",
    "save_theme_name",
    "load_style_name",
    "load_history_size",
]
