"""Runtime constants and environment-derived settings.

kura keeps no persisted configuration; the keymap is fixed. The only
tunables are logging destination and level, read from the environment.
"""

from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_log_dir

APP_NAME = "kura"
LOG_FILENAME = "kura.log"
DEFAULT_LOG_DIR = Path(user_log_dir(APP_NAME, appauthor=False))
LOG_LEVEL_ENV = "KURA_LOG_LEVEL"
LOG_FILE_ENV = "KURA_LOG_FILE"
DEFAULT_LOG_LEVEL = "INFO"

KEY_POLL_TIMEOUT_MS = 100
PYGMENTS_STYLE = "monokai"
IMAGE_DISMISS_KEYS = frozenset({"ENTER", "ESC"})


def log_file_path() -> Path:
    """Return the log file path, honoring ``KURA_LOG_FILE`` when set."""
    override = os.environ.get(LOG_FILE_ENV, "").strip()
    if override:
        return Path(override).expanduser()
    return DEFAULT_LOG_DIR / LOG_FILENAME


def log_level_name() -> str:
    value = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    return value or DEFAULT_LOG_LEVEL
