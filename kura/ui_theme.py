"""ANSI palette used by the renderer.

Syntax colors in the viewer come from the Pygments style; this palette only
covers browser chrome and listing rows.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    border: str
    header_mark: str
    header_name: str
    title_active: str
    title_inactive: str
    entry_dir: str
    entry_hidden: str
    entry_executable: str
    mark: str
    line_number: str
    prompt: str
    status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    border="\033[2m",
    header_mark="\033[1;35m",
    header_name="\033[1m",
    title_active="\033[1;33m",
    title_inactive="\033[1;37m",
    entry_dir="\033[34m",
    entry_hidden="\033[31m",
    entry_executable="\033[32m",
    mark="\033[1;33m",
    line_number="\033[90m",
    prompt="\033[1;36m",
    status="\033[38;5;214m",
)
