"""Event loop wiring: render cadence, key dispatch, and quit."""

from __future__ import annotations

import os
import tempfile
import unittest
from contextlib import contextmanager
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from kura.input import InputDispatcher
from kura.pane import Pane
from kura.runtime import run_main_loop
from kura.session import AppSession


class _FakeTerminal:
    def __init__(self) -> None:
        self.raw_mode_entered = 0
        self.raw_mode_exited = 0
        self.stdout_fd = -1

    @contextmanager
    def raw_mode(self):
        self.raw_mode_entered += 1
        try:
            yield
        finally:
            self.raw_mode_exited += 1


class RunMainLoopTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        for name in ("a", "b", "c"):
            (self.root / name).write_text(name, encoding="utf-8")
        self.session = AppSession(Pane.open(self.root), Pane.open(self.root))
        self.dispatcher = InputDispatcher(self.session)
        self.terminal = _FakeTerminal()
        self.frames: list[tuple[int, int, int]] = []

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def render(self, session: AppSession, columns: int, rows: int) -> None:
        self.frames.append((columns, rows, session.active_pane.selected))

    def run_loop(self, keys: list[str], sizes: list[tuple[int, int]] | None = None) -> None:
        key_iter = iter(keys)
        size_iter = iter(sizes or [])
        last_size = [(80, 24)]

        def read_key(_fd: int, timeout_ms: int | None = None) -> str:
            return next(key_iter)

        def get_terminal_size(_fallback=(80, 24)):
            last_size[0] = next(size_iter, last_size[0])
            return SimpleNamespace(columns=last_size[0][0], lines=last_size[0][1])

        run_main_loop(
            self.session,
            self.terminal,
            0,
            self.dispatcher,
            key_reader=read_key,
            get_terminal_size=get_terminal_size,
            render=self.render,
        )

    def test_keys_are_dispatched_until_quit(self) -> None:
        self.run_loop(["j", "j", "q"])

        self.assertEqual(self.session.active_pane.selected, 2)
        self.assertEqual(self.terminal.raw_mode_entered, 1)
        self.assertEqual(self.terminal.raw_mode_exited, 1)

    def test_redraws_after_keys_but_not_after_idle_polls(self) -> None:
        self.run_loop(["", "", "j", "", "q"])

        self.assertEqual(self.frames, [(80, 24, 0), (80, 24, 1)])

    def test_resize_triggers_redraw(self) -> None:
        self.run_loop(["", "q"], sizes=[(80, 24), (100, 30)])

        self.assertEqual(self.frames, [(80, 24, 0), (100, 30, 0)])

    def test_terminal_is_restored_when_dispatch_raises(self) -> None:
        with mock.patch.object(self.dispatcher, "handle_key", side_effect=RuntimeError("boom")):
            with self.assertRaises(RuntimeError):
                self.run_loop(["j"])

        self.assertEqual(self.terminal.raw_mode_exited, 1)

    def test_default_renderer_writes_to_terminal_fd(self) -> None:
        read_fd, write_fd = os.pipe()
        self.terminal.stdout_fd = write_fd
        keys = iter(["q"])
        try:
            run_main_loop(
                self.session,
                self.terminal,
                0,
                self.dispatcher,
                key_reader=lambda _fd, timeout_ms=None: next(keys),
                get_terminal_size=lambda _fallback=(80, 24): SimpleNamespace(columns=40, lines=10),
            )
            data = os.read(read_fd, 65536)
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertIn("kura".encode("utf-8"), data)


if __name__ == "__main__":
    unittest.main()
