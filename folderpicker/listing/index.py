"""Directory scanning for the folder list.

Only immediate subdirectories are listed. Unreadable directories produce an
empty child set instead of an error, so the picker always has something to show.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .types import Entry, Listing

logger = logging.getLogger(__name__)

DEFAULT_IGNORED_NAMES: frozenset[str] = frozenset({"node_modules", "vendor"})


def self_entry(directory: Path) -> Entry:
    """Return the synthetic ``[name]`` row that stands for ``directory`` itself."""
    name = directory.name or str(directory)
    return Entry(display_name=f"[{name}]", path=directory)


def list_subdirectory_names(directory: Path, ignored_names: Iterable[str] = DEFAULT_IGNORED_NAMES) -> list[str]:
    """Return visible subdirectory names of ``directory`` in ordinal order.

    Dotfiles and ``ignored_names`` are skipped. Symlinks are not followed, so a
    link to a directory is not listed.
    """
    ignored = frozenset(ignored_names)
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if name.startswith(".") or name in ignored:
                    continue
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                if is_dir:
                    names.append(name)
    except OSError as exc:
        logger.debug("cannot list %s: %s", directory, exc)
        return []

    names.sort()
    return names


def load_listing(directory: Path, ignored_names: Iterable[str] = DEFAULT_IGNORED_NAMES) -> Listing:
    """Build the full listing for ``directory``: self-entry first, then children."""
    children = tuple(
        Entry(display_name=name, path=directory / name)
        for name in list_subdirectory_names(directory, ignored_names)
    )
    return (self_entry(directory),) + children


__all__ = [
    "DEFAULT_IGNORED_NAMES",
    "self_entry",
    "list_subdirectory_names",
    "load_listing",
]
