"""Shared key-handling context and token helpers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..session import AppSession

ENTER = "ENTER"
ESC = "ESC"
BACKSPACE = "BACKSPACE"
UP = "UP"
DOWN = "DOWN"
# Synthetic token emitted once the dispatcher has seen two consecutive `g` presses.
GG = "gg"

_KEY_ALIASES = {
    "ENTER_CR": ENTER,
    "ENTER_LF": ENTER,
    "\r": ENTER,
    "\n": ENTER,
    "\x1b": ESC,
    "\x7f": BACKSPACE,
    "\x08": BACKSPACE,
}


def normalize_key(key: str) -> str:
    return _KEY_ALIASES.get(key, key)


def is_printable(key: str) -> bool:
    """Return whether ``key`` is a single character that text prompts accept."""
    return len(key) == 1 and key.isprintable()


def _no_image_renderer(_path: Path) -> str | None:
    return "Image preview unavailable"


@dataclass(frozen=True)
class KeyContext:
    """Session plus runtime operations the mode handlers may invoke.

    ``show_image`` runs the blocking image preview and returns an error
    message or ``None``. ``visible_rows`` reports the viewer body height.
    """

    session: AppSession
    show_image: Callable[[Path], str | None] = _no_image_renderer
    visible_rows: Callable[[], int] = lambda: 20
