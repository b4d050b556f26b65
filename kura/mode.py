"""Interaction modes of a browsing session.

Exactly one mode is active at a time. Modes are immutable; handlers replace
the session mode with an updated copy instead of mutating payloads.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Browsing:
    """Default mode: navigation and file actions on the active pane."""


@dataclass(frozen=True)
class VisualSelect:
    """Live range selection between a fixed anchor and the cursor."""

    anchor: int


@dataclass(frozen=True)
class Viewing:
    """Read-only text viewer for one file."""

    text: str
    title: str
    scroll_offset: int = 0
    path: Path | None = None

    def line_count(self) -> int:
        return len(self.text.splitlines())

    def max_offset(self, visible_height: int) -> int:
        return max(0, self.line_count() - max(1, visible_height))


@dataclass(frozen=True)
class ConfirmDelete:
    """Pending deletion of paths captured when the prompt opened."""

    targets: tuple[Path, ...]


@dataclass(frozen=True)
class Searching:
    query: str = ""


@dataclass(frozen=True)
class Renaming:
    original_name: str
    edit_buffer: str


@dataclass(frozen=True)
class SortPicking:
    highlighted_option: int = 0


Mode = Browsing | VisualSelect | Viewing | ConfirmDelete | Searching | Renaming | SortPicking

__all__ = [
    "Browsing",
    "VisualSelect",
    "Viewing",
    "ConfirmDelete",
    "Searching",
    "Renaming",
    "SortPicking",
    "Mode",
]
