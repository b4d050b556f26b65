"""Full-screen image preview sub-session.

The preview leaves the TUI, draws the image with the best available
backend, blocks until a dismissal key, then restores the TUI. Restoration
happens in ``finally`` blocks so renderer failures cannot leave the terminal
in the wrong mode.

Backends, in order: kitty graphics protocol (PNG only, kitty terminals),
``chafa``, ``timg``.
"""

from __future__ import annotations

import logging
import select
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

from .. import config
from ..input import read_key
from .terminal import TerminalController

LOGGER = logging.getLogger(__name__)

EXTERNAL_BACKENDS: tuple[str, ...] = ("chafa", "timg")
DISMISS_HINT = "Press Enter to return"


def _external_command(backend: str, path: Path, columns: int, rows: int) -> list[str]:
    if backend == "chafa":
        return ["chafa", "--size", f"{columns}x{rows}", str(path)]
    return ["timg", "-g", f"{columns}x{rows}", str(path)]


class ImagePreviewer:
    """Blocking image display bound to one terminal."""

    def __init__(
        self,
        terminal: TerminalController,
        stdin_fd: int,
        *,
        key_reader: Callable[..., str] = read_key,
        which: Callable[[str], str | None] = shutil.which,
        run: Callable[..., object] = subprocess.run,
        get_terminal_size: Callable[..., object] = shutil.get_terminal_size,
        select_fn: Callable[..., tuple] = select.select,
    ) -> None:
        self.terminal = terminal
        self.stdin_fd = stdin_fd
        self._read_key = key_reader
        self._which = which
        self._run = run
        self._get_terminal_size = get_terminal_size
        self._select = select_fn

    def select_backend(self, path: Path) -> str | None:
        if path.suffix.lower() == ".png" and self.terminal.supports_kitty_graphics():
            return "kitty"
        for backend in EXTERNAL_BACKENDS:
            if self._which(backend) is not None:
                return backend
        return None

    def _draw(self, backend: str, path: Path, columns: int, rows: int) -> None:
        if backend == "kitty":
            self.terminal.kitty_draw_png(path, 1, 1, columns, rows)
            return
        self._run(_external_command(backend, path, columns, rows), check=False)

    def wait_for_dismissal(self) -> None:
        """Block until a dismissal key arrives or stdin is closed."""
        while True:
            ready, _, _ = self._select([self.stdin_fd], [], [], config.KEY_POLL_TIMEOUT_MS / 1000.0)
            if not ready:
                continue
            try:
                key = self._read_key(self.stdin_fd, timeout_ms=0)
            except OSError as exc:
                LOGGER.warning("terminal input closed during image preview: %s", exc)
                return
            # Readable but empty means end of input.
            if not key:
                LOGGER.info("stdin reached EOF during image preview")
                return
            if key in config.IMAGE_DISMISS_KEYS:
                return

    def show(self, path: Path) -> str | None:
        """Display ``path`` until dismissed; return an error message on failure."""
        backend = self.select_backend(path)
        if backend is None:
            return "Image preview unavailable: use a kitty terminal or install chafa/timg"

        term = self._get_terminal_size((80, 24))
        columns = max(1, term.columns)
        rows = max(1, term.lines - 1)
        with self.terminal.suspended():
            self.terminal.enable_key_input()
            self.terminal.clear_screen()
            try:
                self._draw(backend, path, columns, rows)
            except (OSError, subprocess.SubprocessError) as exc:
                message = f"Image preview failed via {backend}: {exc}"
                LOGGER.error(message)
                return message
            try:
                self.terminal.write(f"\x1b[{rows + 1};1H{DISMISS_HINT}")
                self.wait_for_dismissal()
            finally:
                if backend == "kitty":
                    self.terminal.kitty_clear_images()
        return None
