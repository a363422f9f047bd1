"""Home-directory aware path helpers for startup and display."""

from __future__ import annotations

import os
from pathlib import Path


def home_directory() -> Path | None:
    """Return the user's home directory, or ``None`` when it cannot be resolved."""
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    if not home.is_absolute():
        return None
    return home


def expand_start_path(raw: str | None, cwd: Path | None = None) -> Path:
    """Resolve the optional start argument into an absolute directory path.

    Empty input means the current working directory. ``~`` and ``~/...`` expand
    through the home directory; if home is unknown they are left untouched.
    """
    base = cwd if cwd is not None else Path.cwd()
    if not raw:
        return Path(os.path.abspath(base))

    home = home_directory()
    if home is not None:
        if raw == "~":
            raw = str(home)
        elif raw.startswith("~/"):
            raw = str(home) + raw[1:]
    return Path(os.path.abspath(base / raw))


def display_path(path: Path, home: Path | None) -> str:
    """Render ``path`` with the home prefix collapsed to ``~``."""
    text = str(path)
    if home is None:
        return text
    home_text = str(home)
    if home_text == os.sep:
        return text
    if text == home_text:
        return "~"
    if text.startswith(home_text + os.sep):
        return "~" + text[len(home_text):]
    return text
