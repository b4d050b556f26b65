"""Logging bootstrap and environment-derived settings."""

from __future__ import annotations

import logging
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from kura import config, logging_setup


class ConfigTests(unittest.TestCase):
    def test_log_file_defaults_to_platform_log_dir(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(config.log_file_path(), config.DEFAULT_LOG_DIR / config.LOG_FILENAME)
            self.assertEqual(config.log_level_name(), "INFO")

    def test_environment_overrides(self) -> None:
        env = {config.LOG_FILE_ENV: "~/kura-test.log", config.LOG_LEVEL_ENV: "debug"}
        with mock.patch.dict(os.environ, env, clear=True):
            self.assertEqual(config.log_file_path(), Path("~/kura-test.log").expanduser())
            self.assertEqual(config.log_level_name(), "DEBUG")


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        logging_setup.reset()

    def tearDown(self) -> None:
        logging_setup.reset()

    def test_configure_writes_to_rotating_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "nested" / "kura.log"
            runtime = logging_setup.configure(file_path=target, level_name="debug")

            logging.getLogger("kura.pane").debug("hello from pane")
            for handler in logging.getLogger("kura").handlers:
                handler.flush()
            contents = target.read_text(encoding="utf-8")
            logging_setup.reset()

        self.assertEqual(runtime.level_name, "DEBUG")
        self.assertEqual(runtime.file_path, target)
        self.assertIn("kura.pane hello from pane", contents)

    def test_configure_is_idempotent(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            first = logging_setup.configure(file_path=Path(tmp) / "a.log")
            second = logging_setup.configure(file_path=Path(tmp) / "b.log", level_name="ERROR")
            handler_count = len(logging.getLogger("kura").handlers)
            logging_setup.reset()

        self.assertIs(first, second)
        self.assertEqual(handler_count, 1)
        self.assertIs(logging_setup.get_runtime(), None)

    def test_unknown_level_falls_back_to_info(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            runtime = logging_setup.configure(file_path=Path(tmp) / "x.log", level_name="chatty")
            logging_setup.reset()

        self.assertEqual(runtime.level, logging.INFO)

    def test_unwritable_log_location_degrades_to_null_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "file"
            blocker.write_text("", encoding="utf-8")
            runtime = logging_setup.configure(file_path=blocker / "sub" / "kura.log")
            handlers = list(logging.getLogger("kura").handlers)

        self.assertIsNone(runtime.file_path)
        self.assertEqual(len(handlers), 1)
        self.assertIsInstance(handlers[0], logging.NullHandler)
        self.assertFalse(logging.getLogger("kura").propagate)


if __name__ == "__main__":
    unittest.main()
