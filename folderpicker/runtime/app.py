"""Picker session bootstrap.

Builds dependencies from config, checks the terminal, runs the loop, and
returns the selected folder.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from ..navigation import filesystem_deps, initial_state
from ..paths import home_directory
from ..render import RenderContext
from ..ui_theme import resolve_theme
from .config import PickerConfig, load_picker_config
from .loop import run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)


def run_picker(
    start: Path,
    theme_name: str | None = None,
    no_color: bool = False,
    config: PickerConfig | None = None,
) -> Path | None:
    """Browse from ``start`` interactively and return the chosen folder, if any.

    Rendering goes to stderr and keys come from stdin; both must be terminals.
    """
    if config is None:
        config = load_picker_config()
    stdin_fd = sys.stdin.fileno()
    render_fd = sys.stderr.fileno()
    if not (os.isatty(stdin_fd) and os.isatty(render_fd)):
        raise SystemExit("pf requires an interactive terminal")

    deps = filesystem_deps(config.archive_dir, config.ignored_names)
    terminal = TerminalController(stdin_fd, render_fd)
    context = RenderContext(
        theme=resolve_theme(theme_name or config.theme, no_color),
        home=home_directory(),
        archive_dir=config.archive_dir,
        width=terminal.size().columns,
    )
    logger.debug("starting at %s", start)
    final = run_main_loop(initial_state(start, deps), terminal, stdin_fd, deps, context)
    logger.debug("finished with selection %s", final.selection)
    return final.selection
