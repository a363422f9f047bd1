"""Public package surface for the ``pf`` folder picker.

Exports ``main`` for programmatic CLI invocation.
Most implementation lives in submodules under ``folderpicker``.
"""

from __future__ import annotations

import logging

__version__ = "1.1.2"

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "main"]
