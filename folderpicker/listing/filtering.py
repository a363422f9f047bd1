"""Conjunctive substring filtering of listing rows."""

from __future__ import annotations

from collections.abc import Sequence

from .types import Entry


def query_words(query: str) -> list[str]:
    """Split a raw filter string into lowercased words."""
    return query.strip().lower().split()


def entry_matches(entry: Entry, words: Sequence[str]) -> bool:
    """Return whether every word occurs in the entry's display name."""
    name = entry.display_name.lower()
    return all(word in name for word in words)


def filter_entries(listing: Sequence[Entry], query: str) -> tuple[Entry, ...]:
    """Return entries matching all words of ``query``, keeping listing order.

    A blank query keeps every entry, including the self-entry.
    """
    words = query_words(query)
    if not words:
        return tuple(listing)
    return tuple(entry for entry in listing if entry_matches(entry, words))
