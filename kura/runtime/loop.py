"""Main interactive event loop for the terminal UI.

Polls for one key at a time, dispatches it, and redraws when something may
have changed. Feature logic lives in the dispatcher and session.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from functools import partial

from .. import config
from ..input import InputDispatcher, read_key
from ..render import render_session
from ..session import AppSession
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)


def run_main_loop(
    session: AppSession,
    terminal: TerminalController,
    stdin_fd: int,
    dispatcher: InputDispatcher,
    *,
    key_reader: Callable[..., str] = read_key,
    get_terminal_size: Callable[..., object] = shutil.get_terminal_size,
    render: Callable[[AppSession, int, int], None] | None = None,
) -> None:
    """Run until the dispatcher reports a quit key.

    A frame is drawn on start, after every handled key, and whenever the
    terminal size changes. Idle polls that time out do not redraw.
    """
    draw = render if render is not None else partial(render_session, fd=terminal.stdout_fd)
    dirty = True
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while True:
            term = get_terminal_size((80, 24))
            size = (max(1, term.columns), max(1, term.lines))
            if size != last_size:
                last_size = size
                dirty = True
            if dirty:
                draw(session, size[0], size[1])
                dirty = False

            key = key_reader(stdin_fd, timeout_ms=config.KEY_POLL_TIMEOUT_MS)
            if not key:
                continue
            if dispatcher.handle_key(key):
                LOGGER.info("quit requested")
                break
            dirty = True
