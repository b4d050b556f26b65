"""Logging bootstrap for the kura runtime.

Records go to a rotating file only: the TUI owns the terminal, so a stream
handler would corrupt the screen.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from pathlib import Path

from . import config

ROOT_LOGGER_NAME = "kura"


@dataclass(frozen=True)
class LoggingRuntime:
    """Resolved runtime logging configuration."""

    level_name: str
    level: int
    file_path: Path | None


_RUNTIME: LoggingRuntime | None = None


def _parse_level(raw: str) -> tuple[str, int]:
    level = getattr(logging, str(raw or "INFO").strip().upper(), None)
    if not isinstance(level, int):
        level = logging.INFO
    return logging.getLevelName(level), level


def _make_file_handler(level: int, file_path: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        file_path,
        maxBytes=2 * 1024 * 1024,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )
    return handler


def configure(file_path: Path | None = None, level_name: str | None = None) -> LoggingRuntime:
    """Configure the ``kura`` logger hierarchy.

    Idempotent: repeated calls return the originally configured runtime. If
    the log file cannot be created, records are dropped via a
    ``NullHandler`` and ``file_path`` is reported as ``None``.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    resolved_name, level = _parse_level(level_name or config.log_level_name())
    target = file_path if file_path is not None else config.log_file_path()

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(_make_file_handler(level, target))
    except OSError:
        logger.addHandler(logging.NullHandler())
        target = None

    _RUNTIME = LoggingRuntime(level_name=resolved_name, level=level, file_path=target)
    return _RUNTIME


def reset() -> None:
    """Detach handlers so ``configure`` can run again (used by tests)."""
    global _RUNTIME
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    _RUNTIME = None


def get_runtime() -> LoggingRuntime | None:
    return _RUNTIME
