"""Persistent JSON config helpers.

Stores the listing defaults: hidden-entry visibility, sort chain and theme.
All access is lenient: malformed or missing config falls back to built-in
defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .errors import SortDirectiveError
from .ordering import SortChain, format_sort_chain, parse_sort_tokens
from .ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "showfiles"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ListingDefaults:
    """Defaults applied before command-line flags."""

    show_all: bool = False
    sort_chain: SortChain = ()
    theme: str = "default"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Write failures are logged and otherwise ignored; a listing never fails
    because its defaults could not be stored.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)


def load_show_all() -> bool:
    """Return persisted hidden-entry visibility.

    Only explicit boolean values are accepted; anything else is ``False``.
    """
    value = load_config().get("show_all")
    return value if isinstance(value, bool) else False


def load_sort_chain() -> SortChain:
    """Return the persisted sort chain, or an empty chain if invalid."""
    value = load_config().get("sort")
    if not isinstance(value, str) or not value:
        return ()
    try:
        return parse_sort_tokens(value)
    except SortDirectiveError as exc:
        logger.debug("ignoring persisted sort chain %r: %s", value, exc)
        return ()


def load_theme_name() -> str:
    value = load_config().get("theme")
    return normalize_theme_name(value if isinstance(value, str) else None)


def load_defaults() -> ListingDefaults:
    """Load every persisted listing default in one pass."""
    return ListingDefaults(
        show_all=load_show_all(),
        sort_chain=load_sort_chain(),
        theme=load_theme_name(),
    )


def save_defaults(defaults: ListingDefaults) -> None:
    config = load_config()
    config["show_all"] = bool(defaults.show_all)
    config["sort"] = format_sort_chain(defaults.sort_chain)
    config["theme"] = normalize_theme_name(defaults.theme)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ListingDefaults",
    "load_config",
    "save_config",
    "load_show_all",
    "load_sort_chain",
    "load_theme_name",
    "load_defaults",
    "save_defaults",
]
