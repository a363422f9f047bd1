"""Modal navigation state machine for the folder picker."""

from .deps import NavigationDeps, filesystem_deps
from .events import Event, KeyPress, Resize, is_printable_key
from .reducer import go_to_parent, initial_state, open_directory, reduce, reload_root, select_path, with_cursor
from .state import (
    BROWSING,
    HELP,
    Browsing,
    ConfirmArchive,
    ConfirmDelete,
    CreateFolder,
    Help,
    Modal,
    NavigationState,
    scroll_offset_for_cursor,
    visible_lines_for_height,
)

__all__ = [
    "BROWSING",
    "HELP",
    "Browsing",
    "ConfirmArchive",
    "ConfirmDelete",
    "CreateFolder",
    "Event",
    "Help",
    "KeyPress",
    "Modal",
    "NavigationDeps",
    "NavigationState",
    "Resize",
    "filesystem_deps",
    "go_to_parent",
    "initial_state",
    "is_printable_key",
    "open_directory",
    "reduce",
    "reload_root",
    "scroll_offset_for_cursor",
    "select_path",
    "visible_lines_for_height",
    "with_cursor",
]
