"""Directory listing model: entries, loading, and query filtering."""

from .filtering import entry_matches, filter_entries, query_words
from .index import DEFAULT_IGNORED_NAMES, list_subdirectory_names, load_listing, self_entry
from .types import Entry, Listing

__all__ = [
    "DEFAULT_IGNORED_NAMES",
    "Entry",
    "Listing",
    "entry_matches",
    "filter_entries",
    "list_subdirectory_names",
    "load_listing",
    "query_words",
    "self_entry",
]
