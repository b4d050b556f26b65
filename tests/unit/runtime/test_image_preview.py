"""Image preview backend selection and terminal restoration."""

from __future__ import annotations

import os
import subprocess
import unittest
from contextlib import contextmanager
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from kura.runtime.image_preview import DISMISS_HINT, ImagePreviewer


class _FakeTerminal:
    def __init__(self, kitty: bool = False) -> None:
        self.kitty = kitty
        self.events: list[str] = []
        self.writes: list[str] = []

    def supports_kitty_graphics(self) -> bool:
        return self.kitty

    @contextmanager
    def suspended(self):
        self.events.append("suspend")
        try:
            yield
        finally:
            self.events.append("resume")

    def enable_key_input(self) -> None:
        self.events.append("keys")

    def clear_screen(self) -> None:
        self.events.append("clear")

    def write(self, text: str) -> None:
        self.writes.append(text)

    def kitty_draw_png(self, path, col, row, width, height) -> None:
        self.events.append(f"kitty:{path.name}:{width}x{height}")

    def kitty_clear_images(self) -> None:
        self.events.append("kitty-clear")


def _previewer(terminal: _FakeTerminal, *, installed=(), keys=("ENTER",), run=None) -> ImagePreviewer:
    key_iter = iter(keys)
    return ImagePreviewer(
        terminal,
        0,
        key_reader=lambda _fd, timeout_ms=None: next(key_iter),
        which=lambda name: f"/usr/bin/{name}" if name in installed else None,
        run=run or mock.Mock(),
        get_terminal_size=lambda _fallback=(80, 24): SimpleNamespace(columns=100, lines=40),
        select_fn=lambda readers, _w, _x, _timeout: (readers, [], []),
    )


class BackendSelectionTests(unittest.TestCase):
    def test_kitty_is_used_for_png_only(self) -> None:
        previewer = _previewer(_FakeTerminal(kitty=True), installed=("timg",))
        self.assertEqual(previewer.select_backend(Path("a.PNG")), "kitty")
        self.assertEqual(previewer.select_backend(Path("a.jpg")), "timg")

    def test_chafa_is_preferred_over_timg(self) -> None:
        previewer = _previewer(_FakeTerminal(), installed=("chafa", "timg"))
        self.assertEqual(previewer.select_backend(Path("a.png")), "chafa")

    def test_no_backend_returns_notice_without_touching_terminal(self) -> None:
        terminal = _FakeTerminal()
        message = _previewer(terminal).show(Path("a.png"))

        self.assertIn("unavailable", message)
        self.assertEqual(terminal.events, [])


class ShowImageTests(unittest.TestCase):
    def test_external_backend_runs_and_waits_for_dismissal(self) -> None:
        terminal = _FakeTerminal()
        run = mock.Mock()
        previewer = _previewer(terminal, installed=("chafa",), keys=("x", "ESC"), run=run)

        self.assertIsNone(previewer.show(Path("/pics/cat.gif")))

        run.assert_called_once_with(["chafa", "--size", "100x39", "/pics/cat.gif"], check=False)
        self.assertEqual(terminal.events, ["suspend", "keys", "clear", "resume"])
        self.assertTrue(terminal.writes[-1].endswith(DISMISS_HINT))

    def test_kitty_backend_clears_images_after_dismissal(self) -> None:
        terminal = _FakeTerminal(kitty=True)
        previewer = _previewer(terminal)

        self.assertIsNone(previewer.show(Path("/pics/cat.png")))

        self.assertEqual(
            terminal.events,
            ["suspend", "keys", "clear", "kitty:cat.png:100x39", "kitty-clear", "resume"],
        )

    def test_backend_failure_is_reported_and_terminal_restored(self) -> None:
        terminal = _FakeTerminal()
        run = mock.Mock(side_effect=subprocess.SubprocessError("crashed"))
        previewer = _previewer(terminal, installed=("timg",), run=run)

        message = previewer.show(Path("/pics/cat.jpg"))

        self.assertIn("timg", message)
        self.assertEqual(terminal.events[-1], "resume")

    def test_interrupt_while_waiting_still_restores_terminal(self) -> None:
        terminal = _FakeTerminal(kitty=True)

        def read_key(_fd, timeout_ms=None):
            raise KeyboardInterrupt

        previewer = _previewer(terminal)
        previewer._read_key = read_key

        with self.assertRaises(KeyboardInterrupt):
            previewer.show(Path("/pics/cat.png"))

        self.assertEqual(terminal.events[-2:], ["kitty-clear", "resume"])

    def test_idle_polls_keep_waiting(self) -> None:
        polls = iter([[], [], [0]])
        keys = iter(["ENTER"])
        previewer = ImagePreviewer(
            _FakeTerminal(),
            0,
            key_reader=lambda _fd, timeout_ms=None: next(keys),
            select_fn=lambda _r, _w, _x, _timeout: (next(polls), [], []),
        )

        previewer.wait_for_dismissal()

        self.assertEqual(list(polls), [])

    def test_closed_stdin_ends_the_preview(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        terminal = _FakeTerminal(kitty=True)
        try:
            previewer = ImagePreviewer(terminal, read_fd)
            self.assertIsNone(previewer.show(Path("/pics/cat.png")))
        finally:
            os.close(read_fd)

        self.assertEqual(terminal.events[-2:], ["kitty-clear", "resume"])

    def test_unreadable_stdin_ends_the_preview(self) -> None:
        def read_key(_fd, timeout_ms=None):
            raise OSError(5, "Input/output error")

        previewer = _previewer(_FakeTerminal())
        previewer._read_key = read_key

        previewer.wait_for_dismissal()


if __name__ == "__main__":
    unittest.main()
