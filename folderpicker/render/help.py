"""Help screen content for the picker."""

from __future__ import annotations

from .. import __version__
from ..ui_theme import UITheme

HELP_KEY_ROWS: tuple[tuple[str, str], ...] = (
    ("↑ / ↓", "Navigate list"),
    ("Enter", "Open folder"),
    ("Tab", "Select & cd to folder"),
    ("Esc", "Go to parent folder"),
    ("Backspace", "Clear filter character"),
    ("Ctrl+N", "Create new folder"),
    ("Ctrl+A", "Archive folder ({archive})"),
    ("Alt+⌫", "Delete selected folder"),
    ("Ctrl+C", "Quit without select"),
    ("F1", "Toggle this help"),
)
HELP_KEY_COLUMN = 12


def help_lines(theme: UITheme, archive_label: str) -> list[str]:
    """Return the help screen as styled lines."""
    reset = theme.reset
    lines = ["", f"  {theme.help_title}pf - folder picker{reset}  {theme.dim}v{__version__}{reset}", ""]
    for key, description in HELP_KEY_ROWS:
        label = f"{theme.emphasis}{key}{reset}"
        padding = " " * max(1, HELP_KEY_COLUMN - len(key))
        lines.append(f"  {label}{padding}{description.format(archive=archive_label)}")
    lines.extend(
        [
            "",
            f"  {theme.dim}Type any text to filter folders{reset}",
            f"  {theme.dim}Multiple words = match all{reset}",
            "",
            f"  {theme.dim}Press Esc or F1 to close{reset}",
            "",
        ]
    )
    return lines
