"""Persistent JSON config helpers.

Stores the archive location, ignored folder names, and UI theme.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from ..listing import DEFAULT_IGNORED_NAMES
from ..mutations import DEFAULT_ARCHIVE_DIRNAME
from ..paths import expand_start_path, home_directory

APP_NAME = "pf"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class PickerConfig:
    """Effective settings after defaults are applied."""

    archive_dir: Path | None
    ignored_names: frozenset[str] = DEFAULT_IGNORED_NAMES
    theme: str | None = None


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def default_archive_dir() -> Path | None:
    """Return ``~/Dev-Archive``, or ``None`` when home is unknown."""
    home = home_directory()
    if home is None:
        return None
    return home / DEFAULT_ARCHIVE_DIRNAME


def _load_archive_dir(data: dict[str, object]) -> Path | None:
    value = data.get("archive_dir")
    if not isinstance(value, str) or not value.strip():
        return default_archive_dir()
    stripped = value.strip()
    home = home_directory()
    if stripped.startswith("~") and home is None:
        return None
    # Relative values are taken relative to home.
    return expand_start_path(stripped, cwd=home or Path("/"))


def _load_ignored_names(data: dict[str, object]) -> frozenset[str]:
    value = data.get("ignored_names")
    if not isinstance(value, list):
        return DEFAULT_IGNORED_NAMES
    return frozenset(name for name in value if isinstance(name, str) and name)


def _load_theme_name(data: dict[str, object]) -> str | None:
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_picker_config() -> PickerConfig:
    """Read config from disk and normalize every key."""
    data = load_config()
    return PickerConfig(
        archive_dir=_load_archive_dir(data),
        ignored_names=_load_ignored_names(data),
        theme=_load_theme_name(data),
    )
