"""Runtime composition layer for kura.

Builds the session, terminal controller, image previewer and dispatcher,
then hands control to the event loop.
"""

from __future__ import annotations

import logging
import shutil
import sys
from pathlib import Path

from .. import logging_setup
from ..input import InputDispatcher
from ..render import viewer_visible_rows
from ..session import AppSession
from .image_preview import ImagePreviewer
from .loop import run_main_loop
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)


def _viewer_rows() -> int:
    return viewer_visible_rows(shutil.get_terminal_size((80, 24)).lines)


def run_browser(path: Path) -> None:
    """Open both panes on ``path`` and run the TUI until the user quits.

    Raises ``OSError`` when ``path`` cannot be listed; nothing has touched the
    terminal at that point.
    """
    runtime = logging_setup.configure()
    LOGGER.info("starting in %s (log level %s)", path, runtime.level_name)

    session = AppSession.open(path)
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    terminal = TerminalController(stdin_fd, stdout_fd)
    previewer = ImagePreviewer(terminal, stdin_fd)
    dispatcher = InputDispatcher(
        session,
        show_image=previewer.show,
        visible_rows=_viewer_rows,
    )
    run_main_loop(session, terminal, stdin_fd, dispatcher)
    LOGGER.info("exited cleanly")
