"""Box-drawing building blocks: bordered panels, pane listings, viewer, popups."""

from __future__ import annotations

from ..listing import Entry
from ..mode import Viewing
from ..pane import Pane
from ..ui_theme import UITheme
from .ansi import clip_ansi_line, display_width, pad_ansi_line
from .highlight import highlighted_lines_for, sanitize_terminal_text


def bordered_box(title: str, body: list[str], width: int, height: int, theme: UITheme, title_style: str = "") -> list[str]:
    """Frame ``body`` rows in a single-line border of exactly ``width`` x ``height``."""
    if width < 2 or height < 2:
        return [" " * max(0, width)] * max(0, height)
    inner_width = width - 2
    label = clip_ansi_line(f" {title} ", max(0, inner_width - 2)) if title else ""
    rule = "─" * max(0, inner_width - 1 - display_width(label))
    top = f"{theme.border}┌─{theme.reset}{title_style}{label}{theme.reset}{theme.border}{rule}┐{theme.reset}"
    if not label:
        top = f"{theme.border}┌{'─' * inner_width}┐{theme.reset}"
    rows = [top]
    for idx in range(height - 2):
        line = body[idx] if idx < len(body) else ""
        rows.append(f"{theme.border}│{theme.reset}{pad_ansi_line(line, inner_width)}{theme.border}│{theme.reset}")
    rows.append(f"{theme.border}└{'─' * inner_width}┘{theme.reset}")
    return rows


def entry_style(entry: Entry, theme: UITheme) -> str:
    if entry.is_dir:
        return theme.entry_dir
    if entry.is_hidden:
        return theme.entry_hidden
    if entry.is_executable:
        return theme.entry_executable
    return ""


def scroll_start(selected: int, total: int, visible: int) -> int:
    """First visible row index that keeps ``selected`` on screen."""
    if visible <= 0 or total <= visible:
        return 0
    return max(0, min(selected - visible + 1, total - visible))


def pane_rows(pane: Pane, active: bool, width: int, height: int, theme: UITheme) -> list[str]:
    """Render one pane as a bordered listing with marks and cursor."""
    inner_width = max(0, width - 2)
    visible = max(0, height - 2)
    entries = pane.items
    body: list[str] = []
    start = scroll_start(pane.selected, len(entries), visible)
    for idx in range(start, min(len(entries), start + visible)):
        entry = entries[idx]
        marker = "*" if idx in pane.marked else " "
        cursor = ">" if idx == pane.selected else " "
        text = clip_ansi_line(f"{cursor}{marker} {sanitize_terminal_text(entry.name)}", inner_width)
        text += " " * max(0, inner_width - display_width(text))
        prefix = theme.reverse if idx == pane.selected else ""
        body.append(f"{prefix}{entry_style(entry, theme)}{text}{theme.reset}")
    if not entries and visible:
        body.append(f"{theme.border}  (empty){theme.reset}")
    title_style = theme.title_active if active else theme.title_inactive
    return bordered_box(str(pane.current_dir), body, width, height, theme, title_style)


def viewer_rows(mode: Viewing, width: int, height: int, theme: UITheme) -> list[str]:
    """Render the text viewer with right-aligned line numbers."""
    visible = max(0, height - 2)
    lines = highlighted_lines_for(mode.text, mode.path)
    offset = min(mode.scroll_offset, mode.max_offset(visible))
    number_width = len(str(max(1, len(lines))))
    body = [
        f"{theme.line_number}{offset + idx + 1:>{number_width}}{theme.reset} {line}"
        for idx, line in enumerate(lines[offset : offset + visible])
    ]
    return bordered_box(mode.title, body, width, height, theme, theme.title_active)


def popup_box(title: str, body: list[str], columns: int, rows: int, theme: UITheme) -> tuple[int, int, list[str]]:
    """Build a centered popup; return ``(col, row, lines)`` relative to the area."""
    content_width = max([display_width(line) for line in body] + [display_width(title) + 4])
    width = min(columns, max(content_width + 4, (columns * 2) // 5))
    height = min(rows, len(body) + 2)
    col = max(0, (columns - width) // 2)
    row = max(0, (rows - height) // 2)
    centered = [
        " " * max(0, (width - 2 - display_width(line)) // 2) + line
        for line in body
    ]
    return col, row, bordered_box(title, centered, width, height, theme, theme.title_active)
