"""Runtime composition: ``run_browser`` wires session, preview, and loop."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest import mock

from kura.runtime import app


class RunBrowserTests(unittest.TestCase):
    def test_run_browser_builds_session_and_starts_loop(self) -> None:
        fake_sys = SimpleNamespace(
            stdin=SimpleNamespace(fileno=lambda: 10),
            stdout=SimpleNamespace(fileno=lambda: 11),
        )
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "a.txt").write_text("a", encoding="utf-8")
            with (
                mock.patch.object(app, "sys", fake_sys),
                mock.patch.object(app.logging_setup, "configure", return_value=SimpleNamespace(level_name="INFO")),
                mock.patch.object(app, "TerminalController") as terminal_cls,
                mock.patch.object(app, "run_main_loop") as run_loop,
            ):
                app.run_browser(root)

        terminal_cls.assert_called_once_with(10, 11)
        run_loop.assert_called_once()
        session, terminal, stdin_fd, dispatcher = run_loop.call_args.args
        self.assertIs(terminal, terminal_cls.return_value)
        self.assertEqual(stdin_fd, 10)
        self.assertEqual(session.left.current_dir, root)
        self.assertEqual(session.right.listing.names(), ["a.txt"])
        self.assertIs(dispatcher.session, session)
        self.assertEqual(dispatcher.context.show_image.__self__.stdin_fd, 10)

    def test_unlistable_directory_raises_before_touching_terminal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            with (
                mock.patch.object(app.logging_setup, "configure", return_value=SimpleNamespace(level_name="INFO")),
                mock.patch.object(app, "TerminalController") as terminal_cls,
            ):
                with self.assertRaises(OSError):
                    app.run_browser(missing)

        terminal_cls.assert_not_called()


if __name__ == "__main__":
    unittest.main()
