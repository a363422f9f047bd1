"""Event reducer for the folder picker.

``reduce`` maps ``(state, event)`` to the next state. Filesystem effects go
through ``NavigationDeps`` so every transition is testable without a terminal.
While a prompt or confirmation modal is active it receives every key; list
navigation never sees them.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

from ..mutations import FilesystemError
from .deps import NavigationDeps
from .events import Event, KeyPress, Resize, is_printable_key
from .state import (
    BROWSING,
    HELP,
    ConfirmArchive,
    ConfirmDelete,
    CreateFolder,
    Help,
    NavigationState,
    scroll_offset_for_cursor,
)

FILESYSTEM_ROOT = Path("/")

QUIT_KEYS = frozenset({"CTRL_C"})
HELP_KEYS = frozenset({"F1"})
DELETE_KEYS = frozenset({"ALT_BACKSPACE"})
ARCHIVE_KEYS = frozenset({"CTRL_A"})
CREATE_KEYS = frozenset({"CTRL_N"})
AFFIRM_KEYS = frozenset({"y", "Y"})
DECLINE_KEYS = frozenset({"n", "N", "ESC"})


def initial_state(start: Path, deps: NavigationDeps, height: int = 0) -> NavigationState:
    """Create the startup state rooted at ``start``."""
    return NavigationState(root=start, listing=deps.load_listing(start), height=height)


def reduce(state: NavigationState, event: Event, deps: NavigationDeps) -> NavigationState:
    """Return the state after handling ``event``.

    Unhandled keys return ``state`` itself, so callers can skip redraws with an
    identity check.
    """
    if state.finished:
        return state
    if isinstance(event, Resize):
        resized = replace(state, height=max(0, event.height))
        return with_cursor(resized, resized.cursor)
    if not isinstance(event, KeyPress):
        return state

    key = event.key
    modal = state.modal
    if isinstance(modal, ConfirmArchive):
        return _handle_confirm_key(state, key, deps, lambda: deps.archive_folder(modal.target))
    if isinstance(modal, ConfirmDelete):
        return _handle_confirm_key(state, key, deps, lambda: deps.delete_folder(modal.target))
    if isinstance(modal, CreateFolder):
        return _handle_create_key(state, modal, key, deps)

    if state.error:
        state = replace(state, error="")
    if isinstance(modal, Help):
        return _handle_help_key(state, key)
    return _handle_browsing_key(state, key, deps)


def with_cursor(state: NavigationState, cursor: int) -> NavigationState:
    """Clamp ``cursor`` to the filtered view and scroll it into the window."""
    count = len(state.filtered)
    cursor = max(0, min(cursor, count - 1)) if count else 0
    offset = scroll_offset_for_cursor(cursor, min(state.offset, cursor), state.visible_lines)
    if cursor == state.cursor and offset == state.offset:
        return state
    return replace(state, cursor=cursor, offset=offset)


def select_path(state: NavigationState, path: Path) -> NavigationState:
    """Move the cursor onto the entry for ``path`` if it is visible."""
    for idx, entry in enumerate(state.filtered):
        if entry.path == path:
            return with_cursor(state, idx)
    return state


def open_directory(state: NavigationState, directory: Path, deps: NavigationDeps) -> NavigationState:
    """Make ``directory`` the root with a fresh listing and an empty filter."""
    return replace(
        state,
        root=directory,
        listing=deps.load_listing(directory),
        filter_text="",
        cursor=0,
        offset=0,
    )


def reload_root(state: NavigationState, deps: NavigationDeps) -> NavigationState:
    """Re-read the current root after a mutation; the filter is kept."""
    return replace(state, listing=deps.load_listing(state.root), cursor=0, offset=0)


def go_to_parent(state: NavigationState, deps: NavigationDeps) -> NavigationState:
    """Open the parent of the root and land on the folder just left."""
    parent = state.root.parent
    if parent == state.root:
        return state
    departed = state.root
    return select_path(open_directory(state, parent, deps), departed)


def _finish(state: NavigationState, selection: Path | None = None) -> NavigationState:
    return replace(state, finished=True, selection=selection)


def _can_remove(state: NavigationState, target: Path) -> bool:
    return target != state.root and target != FILESYSTEM_ROOT


def _handle_browsing_key(state: NavigationState, key: str, deps: NavigationDeps) -> NavigationState:
    if key in QUIT_KEYS:
        return _finish(state)
    if key in HELP_KEYS:
        return replace(state, modal=HELP)
    if key == "ESC":
        return go_to_parent(state, deps)
    if key == "UP":
        return with_cursor(state, state.cursor - 1)
    if key == "DOWN":
        return with_cursor(state, state.cursor + 1)

    entry = state.current_entry()
    if key == "ENTER":
        if entry is None:
            return state
        if entry.path == state.root:
            return go_to_parent(state, deps)
        return open_directory(state, entry.path, deps)
    if key == "TAB":
        if entry is None:
            return state
        return _finish(state, entry.path)
    if key in DELETE_KEYS:
        if entry is None or not _can_remove(state, entry.path):
            return state
        return replace(state, modal=ConfirmDelete(target=entry.path))
    if key in ARCHIVE_KEYS:
        if entry is None or not _can_remove(state, entry.path):
            return state
        return replace(state, modal=ConfirmArchive(target=entry.path))
    if key in CREATE_KEYS:
        return replace(state, modal=CreateFolder())

    if key == "BACKSPACE":
        if not state.filter_text:
            return state
        return replace(state, filter_text=state.filter_text[:-1], cursor=0, offset=0)
    if is_printable_key(key):
        return replace(state, filter_text=state.filter_text + key, cursor=0, offset=0)
    return state


def _handle_help_key(state: NavigationState, key: str) -> NavigationState:
    if key in QUIT_KEYS:
        return _finish(state)
    if key in HELP_KEYS or key == "ESC":
        return replace(state, modal=BROWSING)
    return state


def _handle_create_key(
    state: NavigationState,
    modal: CreateFolder,
    key: str,
    deps: NavigationDeps,
) -> NavigationState:
    if key in QUIT_KEYS:
        return _finish(state)
    if key == "ESC":
        return replace(state, modal=BROWSING)
    if key == "BACKSPACE":
        if not modal.draft:
            return state
        return replace(state, modal=CreateFolder(draft=modal.draft[:-1]))
    if key == "ENTER":
        if not modal.draft:
            return state
        try:
            created = deps.create_folder(state.root, modal.draft)
        except FilesystemError as exc:
            return replace(state, modal=BROWSING, error=str(exc))
        refreshed = reload_root(replace(state, modal=BROWSING, error=""), deps)
        return select_path(refreshed, created)
    if is_printable_key(key):
        return replace(state, modal=CreateFolder(draft=modal.draft + key))
    return state


def _handle_confirm_key(
    state: NavigationState,
    key: str,
    deps: NavigationDeps,
    perform: Callable[[], object],
) -> NavigationState:
    if key in QUIT_KEYS:
        return _finish(state)
    if key in DECLINE_KEYS:
        return replace(state, modal=BROWSING)
    if key not in AFFIRM_KEYS:
        return state
    try:
        perform()
    except FilesystemError as exc:
        return replace(state, modal=BROWSING, error=str(exc))
    return reload_root(replace(state, modal=BROWSING, error=""), deps)


__all__ = [
    "initial_state",
    "reduce",
    "with_cursor",
    "select_path",
    "open_directory",
    "reload_root",
    "go_to_parent",
]
