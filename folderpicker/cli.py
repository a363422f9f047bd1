"""Command-line front door for ``pf``.

Parses CLI options, resolves the start directory, and runs the picker.
Only the selected path is written to stdout so ``$(pf)`` captures it cleanly.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .paths import expand_start_path
from .runtime import run_picker
from .ui_theme import available_theme_names

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(log_file: str | None) -> None:
    """Send package logs to ``log_file`` at DEBUG; without it logging stays silent."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("folderpicker")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments, run the picker, and print the selection.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    parser = argparse.ArgumentParser(
        prog="pf",
        description="Pick a folder interactively and print its path.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Start folder. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    parser.add_argument("--version", action="version", version=f"pf {__version__}")
    args = parser.parse_args()

    configure_logging(args.log_file)

    if args.path is None and default_path is not None:
        start = expand_start_path(str(default_path))
    else:
        start = expand_start_path(args.path)
    if not start.exists():
        raise SystemExit(f"Path not found: {start}")
    if not start.is_dir():
        raise SystemExit(f"Not a directory: {start}")

    selection = run_picker(start, theme_name=args.theme, no_color=args.no_color)
    if selection is not None:
        sys.stdout.write(f"{selection}\n")
        sys.stdout.flush()


if __name__ == "__main__":
    main()
