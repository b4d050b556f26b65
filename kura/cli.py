"""Command-line front door for kura.

Parses the (deliberately tiny) option set, checks for an interactive
terminal, and launches the browser in the working directory.
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from . import __version__
from .runtime import run_browser


def _has_tty() -> bool:
    try:
        return os.isatty(sys.stdin.fileno()) and os.isatty(sys.stdout.fileno())
    except (OSError, ValueError):
        return False


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch kura.

    ``default_path`` is for tests; when omitted the current working directory
    is used.
    """
    parser = argparse.ArgumentParser(
        prog="kura",
        description="Dual-pane terminal file browser with vim-style keys.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args(argv)

    if not _has_tty():
        raise SystemExit("kura needs an interactive terminal.")

    path = default_path if default_path is not None else Path.cwd()
    try:
        run_browser(path)
    except OSError as exc:
        raise SystemExit(f"Cannot open {path}: {exc.strerror or exc}") from exc


if __name__ == "__main__":
    main()
