"""Filesystem collaborators injected into the reducer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from ..listing import DEFAULT_IGNORED_NAMES, Listing, load_listing
from ..mutations import archive_folder, create_folder, delete_folder


@dataclass(frozen=True)
class NavigationDeps:
    """Operations the reducer calls for listing and mutating folders.

    Mutation callables raise ``FilesystemError`` on failure.
    """

    load_listing: Callable[[Path], Listing]
    create_folder: Callable[[Path, str], Path]
    delete_folder: Callable[[Path], None]
    archive_folder: Callable[[Path], Path]


def filesystem_deps(
    archive_dir: Path | None,
    ignored_names: frozenset[str] = DEFAULT_IGNORED_NAMES,
) -> NavigationDeps:
    """Bind the real filesystem operations to the given settings."""
    return NavigationDeps(
        load_listing=partial(load_listing, ignored_names=ignored_names),
        create_folder=create_folder,
        delete_folder=delete_folder,
        archive_folder=partial(archive_folder, archive_dir=archive_dir),
    )
