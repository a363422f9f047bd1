"""Main interactive event loop for the picker.

Polls for keys, converts terminal size changes into resize events, and feeds
everything through the reducer. Redraws only when the state object changes.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from ..input import read_key
from ..navigation import KeyPress, NavigationDeps, NavigationState, Resize, reduce
from ..render import RenderContext, render_frame
from .terminal import TerminalController

logger = logging.getLogger(__name__)

KEY_POLL_TIMEOUT_MS = 120


def run_main_loop(
    state: NavigationState,
    terminal: TerminalController,
    stdin_fd: int,
    deps: NavigationDeps,
    context: RenderContext,
    poll_timeout_ms: int = KEY_POLL_TIMEOUT_MS,
) -> NavigationState:
    """Run until the state is finished and return the final state."""
    with terminal.raw_mode():
        dirty = True
        while not state.finished:
            term = terminal.size()
            if term.lines != state.height:
                state = reduce(state, Resize(term.lines), deps)
                dirty = True
            if term.columns != context.width:
                context = replace(context, width=term.columns)
                dirty = True

            if dirty:
                render_frame(terminal.stdout_fd, state, context)
                dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=poll_timeout_ms)
            except KeyboardInterrupt:
                key = "CTRL_C"
            if key == "":
                continue

            next_state = reduce(state, KeyPress(key), deps)
            if next_state is not state:
                logger.debug("key %s -> %s", key, type(next_state.modal).__name__)
                dirty = True
            state = next_state
    return state
