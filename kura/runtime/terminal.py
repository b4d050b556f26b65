"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle and alternate-screen switching. Also wraps the
Kitty graphics protocol calls used by the full-screen image preview.
"""

from __future__ import annotations

import base64
import contextlib
import os
from pathlib import Path
import termios
import tty


class TerminalController:
    """Manage terminal mode transitions and optional kitty image rendering."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen buffer and saved tty state."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def enable_key_input(self) -> None:
        """Read keys one at a time without echo while output processing stays cooked."""
        tty.setcbreak(self.stdin_fd, termios.TCSANOW)

    def write(self, text: str) -> None:
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    def clear_screen(self) -> None:
        os.write(self.stdout_fd, b"\x1b[2J\x1b[H")

    def supports_kitty_graphics(self) -> bool:
        """Return whether environment appears to support kitty graphics protocol."""
        term = os.environ.get("TERM", "")
        if term == "xterm-kitty":
            return True
        return bool(os.environ.get("KITTY_WINDOW_ID"))

    def kitty_clear_images(self) -> None:
        """Clear all kitty inline images from current screen."""
        os.write(self.stdout_fd, b"\x1b_Ga=d,d=A,q=2;\x1b\\")

    def kitty_draw_png(
        self,
        image_path: Path,
        col: int,
        row: int,
        width_cells: int,
        height_cells: int,
    ) -> None:
        """Draw a PNG via kitty graphics protocol at cell-based coordinates."""
        encoded_path = base64.b64encode(str(image_path).encode("utf-8")).decode("ascii")
        payload = (
            f"\x1b7\x1b[{max(1, row)};{max(1, col)}H"
            f"\x1b_Ga=T,t=f,f=100,q=2,c={max(1, width_cells)},r={max(1, height_cells)};{encoded_path}\x1b\\"
            "\x1b8"
        )
        os.write(self.stdout_fd, payload.encode("ascii"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()

    @contextlib.contextmanager
    def suspended(self):
        """Temporarily hand the main screen back; TUI mode is restored on every exit."""
        self.disable_tui_mode()
        try:
            yield
        finally:
            self.enable_tui_mode()
            self.clear_screen()
