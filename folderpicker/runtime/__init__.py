"""Interactive runtime: terminal session, event loop, and config."""

from .app import run_picker

__all__ = ["run_picker"]
