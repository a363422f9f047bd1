"""Input events consumed by the navigation reducer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class KeyPress:
    """One decoded key label such as ``UP``, ``CTRL_N`` or a single character."""

    key: str


@dataclass(frozen=True)
class Resize:
    """The terminal now has ``height`` rows."""

    height: int


Event = Union[KeyPress, Resize]


def is_printable_key(key: str) -> bool:
    """Return whether ``key`` is a single character that can be typed into text."""
    return len(key) == 1 and key.isprintable()
