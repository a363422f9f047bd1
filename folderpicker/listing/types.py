"""Domain types for one directory listing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One selectable row: the label shown to the user and the folder it opens."""

    display_name: str
    path: Path


Listing = tuple[Entry, ...]
