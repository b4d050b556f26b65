"""ANSI-aware width measurement, clipping, and overlay helpers.

Escape sequences are carried through untouched and never count toward
width. Tabs expand to 8-column stops; wide East Asian characters take two
columns and combining marks none.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def _iter_cells(text: str) -> Iterator[tuple[str, int]]:
    """Yield ``(chunk, width)`` pairs; escape sequences have width 0.

    Tabs are yielded already expanded to spaces.
    """
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                yield match.group(0), 0
                i = match.end()
                continue
        ch = text[i]
        width = char_display_width(ch, col)
        yield (" " * width if ch == "\t" else ch), width
        col += width
        i += 1


def display_width(text: str) -> int:
    return sum(width for _chunk, width in _iter_cells(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns."""
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    used = 0
    for chunk, width in _iter_cells(text):
        if used + width > max_cols:
            break
        out.append(chunk)
        used += width
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip or right-pad ``text`` to exactly ``width`` columns, ending with a reset."""
    clipped = clip_ansi_line(text, width)
    padding = max(0, width - display_width(clipped))
    suffix = RESET if "\x1b" in clipped else ""
    return clipped + suffix + " " * padding


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return ``max_cols`` columns of ``text`` starting at ``start_cols``.

    The last SGR sequence seen before the slice is re-emitted at its start so
    the visible part keeps its styling.
    """
    if max_cols <= 0 or not text:
        return ""
    out: list[str] = []
    pending_sgr = ""
    col = 0
    shown = 0
    for chunk, width in _iter_cells(text):
        if shown >= max_cols:
            break
        if width == 0:
            if col < start_cols:
                if chunk.endswith("m"):
                    pending_sgr = chunk
            else:
                out.append(chunk)
            continue
        if col < start_cols:
            col += width
            continue
        if shown + width > max_cols:
            break
        if pending_sgr:
            out.append(pending_sgr)
            pending_sgr = ""
        out.append(chunk)
        shown += width
        col += width
    return "".join(out)


def overlay_line(base: str, overlay: str, col: int, total_width: int) -> str:
    """Draw ``overlay`` over ``base`` starting at display column ``col``."""
    overlay_width = display_width(overlay)
    left = pad_ansi_line(base, col)
    right_start = col + overlay_width
    right = slice_ansi_line(base, right_start, max(0, total_width - right_start))
    return f"{left}{RESET}{overlay}{RESET}{right}"
