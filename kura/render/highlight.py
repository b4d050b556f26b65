"""Syntax highlighting and sanitization for the text viewer.

Uses Pygments' terminal formatter; unknown file types fall back to the
plain text lexer. Control bytes are escaped before highlighting so file
content cannot move the cursor or ring the bell.
"""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.util import ClassNotFound

from .. import config

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)


@lru_cache(maxsize=8)
def _formatter(style: str) -> TerminalFormatter:
    try:
        return TerminalFormatter(style=style)
    except ClassNotFound:
        return TerminalFormatter()


def _lexer_for(name: str, source: str):
    if not name:
        return TextLexer()
    try:
        return get_lexer_for_filename(name, source)
    except ClassNotFound:
        return TextLexer()


@lru_cache(maxsize=4)
def highlighted_lines(source: str, name: str = "", style: str = config.PYGMENTS_STYLE) -> tuple[str, ...]:
    """Return sanitized, highlighted lines of ``source``.

    The result has exactly one entry per line of ``source.splitlines()`` so
    viewer offsets computed on the raw text stay valid.
    """
    plain = [sanitize_terminal_text(line) for line in source.splitlines()]
    if not plain:
        return ()
    clean = "\n".join(plain) + "\n"
    rendered = highlight(clean, _lexer_for(name, clean), _formatter(style)).splitlines()
    if len(rendered) != len(plain):
        # Lexers may add or drop a trailing newline; keep plain text in that case.
        return tuple(plain)
    return tuple(rendered)


def highlighted_lines_for(source: str, path: Path | None) -> tuple[str, ...]:
    return highlighted_lines(source, path.name if path is not None else "")
