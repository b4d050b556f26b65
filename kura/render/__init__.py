"""Rendering engine for the dual-pane browser.

Builds a complete ANSI frame from a read-only view of ``AppSession`` and
writes it in one ``os.write`` call. Composition is pure so layouts can be
tested without a terminal.
"""

from __future__ import annotations

import os
import sys

from ..listing import SORT_OPTIONS
from ..mode import ConfirmDelete, Renaming, Searching, SortPicking, Viewing
from ..session import LEFT, AppSession
from ..ui_theme import DEFAULT_THEME, UITheme
from .ansi import display_width, overlay_line, pad_ansi_line
from .widgets import pane_rows, popup_box, viewer_rows

HEADER_TITLE = "kura"
HEADER_MARK = "蔵"
HEADER_ROWS = 1
FOOTER_ROWS = 1


def content_rows(rows: int) -> int:
    return max(0, rows - HEADER_ROWS - FOOTER_ROWS)


def viewer_visible_rows(rows: int) -> int:
    """Text lines visible in the viewer for a terminal of ``rows`` lines."""
    return max(1, content_rows(rows) - 2)


def header_line(columns: int, theme: UITheme = DEFAULT_THEME) -> str:
    label_width = display_width(f"{HEADER_MARK} {HEADER_TITLE}")
    left = " " * max(0, (columns - label_width) // 2)
    return pad_ansi_line(
        f"{left}{theme.header_mark}{HEADER_MARK}{theme.reset} {theme.header_name}{HEADER_TITLE}{theme.reset}",
        columns,
    )


def footer_line(session: AppSession, columns: int, theme: UITheme = DEFAULT_THEME) -> str:
    """Prompt line for text-entry modes, otherwise the status message."""
    mode = session.mode
    if isinstance(mode, Searching):
        text = f"{theme.prompt}/{theme.reset}{mode.query}"
    elif isinstance(mode, Renaming):
        text = f"{theme.prompt}rename:{theme.reset} {mode.original_name} -> {mode.edit_buffer}"
    elif session.status_message:
        text = f"{theme.status}{session.status_message}{theme.reset}"
    else:
        text = ""
    return pad_ansi_line(text, columns)


def _dual_pane_rows(session: AppSession, columns: int, height: int, theme: UITheme) -> list[str]:
    left_width = columns // 2
    right_width = columns - left_width
    left = pane_rows(session.left, session.active == LEFT, left_width, height, theme)
    right = pane_rows(session.right, session.active != LEFT, right_width, height, theme)
    return [f"{left_row}{right_row}" for left_row, right_row in zip(left, right)]


def _popup_for(session: AppSession) -> tuple[str, list[str]] | None:
    mode = session.mode
    if isinstance(mode, ConfirmDelete):
        return "Confirm", [f"Delete {len(mode.targets)} item(s)? (y/N)"]
    if isinstance(mode, SortPicking):
        lines = []
        for idx, (_criterion, label) in enumerate(SORT_OPTIONS):
            marker = ">> " if idx == mode.highlighted_option else "   "
            lines.append(f"{marker}{label}")
        return "Sort by", lines
    return None


def _apply_popup(body: list[str], title: str, lines: list[str], columns: int, theme: UITheme) -> list[str]:
    col, row, box = popup_box(title, lines, columns, len(body), theme)
    out = list(body)
    for offset, popup_line in enumerate(box):
        target = row + offset
        if 0 <= target < len(out):
            out[target] = overlay_line(out[target], popup_line, col, columns)
    return out


def render_frame(session: AppSession, columns: int, rows: int, theme: UITheme = DEFAULT_THEME) -> list[str]:
    """Compose exactly ``rows`` screen lines for the current session state."""
    if rows <= 0 or columns <= 0:
        return []
    lines = [header_line(columns, theme)]
    height = content_rows(rows)
    if height:
        if isinstance(session.mode, Viewing):
            body = viewer_rows(session.mode, columns, height, theme)
        else:
            body = _dual_pane_rows(session, columns, height, theme)
            popup = _popup_for(session)
            if popup is not None:
                body = _apply_popup(body, popup[0], popup[1], columns, theme)
        lines.extend(body)
    if rows > HEADER_ROWS:
        lines.append(footer_line(session, columns, theme))
    return lines[:rows]


def write_frame(lines: list[str], fd: int | None = None) -> None:
    out = ["\033[H\033[J", "\r\n".join(lines), "\033[0m"]
    target = sys.stdout.fileno() if fd is None else fd
    os.write(target, "".join(out).encode("utf-8", errors="replace"))


def render_session(
    session: AppSession,
    columns: int,
    rows: int,
    *,
    theme: UITheme = DEFAULT_THEME,
    fd: int | None = None,
) -> None:
    write_frame(render_frame(session, columns, rows, theme), fd)


__all__ = [
    "content_rows",
    "footer_line",
    "header_line",
    "render_frame",
    "render_session",
    "viewer_visible_rows",
    "write_frame",
]
