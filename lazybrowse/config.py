"""Read-only JSON config.

Holds the default theme and dotfile visibility. The file is never written;
a missing or malformed config simply yields defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazybrowse"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class BrowserConfig:
    theme: str | None = None
    show_hidden: bool = True


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_browser_config() -> BrowserConfig:
    """Build typed settings; values of the wrong type are ignored."""
    data = load_config()
    theme = data.get("theme")
    if not isinstance(theme, str) or not theme.strip():
        theme = None
    show_hidden = data.get("show_hidden")
    if not isinstance(show_hidden, bool):
        show_hidden = True
    return BrowserConfig(theme=theme.strip() if theme else None, show_hidden=show_hidden)


__all__ = ["APP_NAME", "BrowserConfig", "CONFIG_PATH", "load_browser_config", "load_config"]
