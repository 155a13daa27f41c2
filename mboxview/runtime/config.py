"""Read-only JSON config.

Holds display and logging preferences. View state is never written back.
Malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "mboxview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ViewerConfig:
    theme: str | None = None
    style: str | None = None
    log_file: Path | None = None
    log_level: str | None = None


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
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_str(data: dict[str, object], key: str) -> str | None:
    """Return a stripped non-empty string value, ``None`` otherwise."""
    value = data.get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_viewer_config() -> ViewerConfig:
    data = load_config()
    log_file = _load_str(data, "log_file")
    return ViewerConfig(
        theme=_load_str(data, "theme"),
        style=_load_str(data, "style"),
        log_file=Path(log_file).expanduser() if log_file else None,
        log_level=_load_str(data, "log_level"),
    )


__all__ = ["CONFIG_PATH", "ViewerConfig", "load_config", "load_viewer_config"]
