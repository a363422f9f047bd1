"""Immutable picker state and the modal variants it can be in.

Exactly one modal is active at a time; each variant carries only its own data.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..listing import Entry, Listing, filter_entries

RESERVED_LINES = 5
MIN_VISIBLE_LINES = 5


@dataclass(frozen=True)
class Browsing:
    """Normal list navigation and filter typing."""


@dataclass(frozen=True)
class Help:
    """Full-screen key reference."""


@dataclass(frozen=True)
class CreateFolder:
    """Prompt for a new folder name inside the current root."""

    draft: str = ""


@dataclass(frozen=True)
class ConfirmDelete:
    """Waiting for y/n before removing ``target`` recursively."""

    target: Path


@dataclass(frozen=True)
class ConfirmArchive:
    """Waiting for y/n before moving ``target`` into the archive directory."""

    target: Path


Modal = Union[Browsing, Help, CreateFolder, ConfirmDelete, ConfirmArchive]

BROWSING = Browsing()
HELP = Help()


def visible_lines_for_height(height: int) -> int:
    """Return list rows available below the header and above the footer."""
    if height <= RESERVED_LINES:
        return MIN_VISIBLE_LINES
    return height - RESERVED_LINES


def scroll_offset_for_cursor(cursor: int, offset: int, visible: int) -> int:
    """Shift ``offset`` the minimum amount that keeps ``cursor`` on screen."""
    visible = max(1, visible)
    if cursor < offset:
        return cursor
    if cursor >= offset + visible:
        return cursor - visible + 1
    return offset


@dataclass(frozen=True)
class NavigationState:
    root: Path
    listing: Listing
    filter_text: str = ""
    cursor: int = 0
    offset: int = 0
    height: int = 0
    modal: Modal = BROWSING
    error: str = ""
    selection: Path | None = None
    finished: bool = False

    @property
    def filtered(self) -> tuple[Entry, ...]:
        return filter_entries(self.listing, self.filter_text)

    @property
    def visible_lines(self) -> int:
        return visible_lines_for_height(self.height)

    def current_entry(self) -> Entry | None:
        """Return the entry under the cursor, or ``None`` for an empty view."""
        filtered = self.filtered
        if 0 <= self.cursor < len(filtered):
            return filtered[self.cursor]
        return None


__all__ = [
    "BROWSING",
    "HELP",
    "MIN_VISIBLE_LINES",
    "RESERVED_LINES",
    "Browsing",
    "ConfirmArchive",
    "ConfirmDelete",
    "CreateFolder",
    "Help",
    "Modal",
    "NavigationState",
    "scroll_offset_for_cursor",
    "visible_lines_for_height",
]
