"""Persistent JSON config helpers.

Stores default page size, view mode, and color preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..navigation import DEFAULT_PAGE_SIZE
from ..render import VIEW_ALL

logger = logging.getLogger(__name__)

APP_NAME = "pagepick"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


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
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _config_or_load(config: dict[str, object] | None) -> dict[str, object]:
    """Use an already-loaded config dict, reading the file only when none is given."""
    return config if config is not None else load_config()


def load_page_size(config: dict[str, object] | None = None) -> int:
    """Return configured default page size.

    Booleans, non-integers, and values below one fall back to the built-in
    default.
    """
    value = _config_or_load(config).get("page_size")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_PAGE_SIZE
    return value


def load_view(config: dict[str, object] | None = None) -> str:
    """Load the default view mode, ``all`` when unset/invalid."""
    value = _config_or_load(config).get("view")
    if not isinstance(value, str):
        return VIEW_ALL
    stripped = value.strip()
    return stripped if stripped else VIEW_ALL


def load_no_color(config: dict[str, object] | None = None) -> bool:
    """Only explicit boolean values are accepted; anything else means ``False``."""
    value = _config_or_load(config).get("no_color")
    return value if isinstance(value, bool) else False


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_no_color",
    "load_page_size",
    "load_view",
]
