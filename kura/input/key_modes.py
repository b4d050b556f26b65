"""Key handling for the non-browsing modes.

Each handler receives the current mode instance and either replaces it
with an updated copy, commits its effect, or returns to Browsing.
"""

from __future__ import annotations

from dataclasses import replace

from ..listing import SORT_OPTIONS, sort_option_at
from ..mode import ConfirmDelete, Renaming, Searching, SortPicking, Viewing, VisualSelect
from .key_common import BACKSPACE, DOWN, ENTER, ESC, GG, UP, KeyContext, is_printable


def handle_visual_key(key: str, count: int, context: KeyContext, mode: VisualSelect) -> None:
    """Move the cursor and recompute the live range from the anchor."""
    session = context.session
    pane = session.active_pane
    if key in {"j", "k"}:
        pane.move_cursor(1 if key == "j" else -1, count)
        pane.mark_range(mode.anchor)
    elif key in {"V", ESC}:
        session.return_to_browsing()


def handle_search_key(key: str, context: KeyContext, mode: Searching) -> None:
    session = context.session
    if key in {ENTER, ESC}:
        session.return_to_browsing()
        return
    if key == BACKSPACE:
        query = mode.query[:-1]
    elif is_printable(key):
        query = mode.query + key
    else:
        return
    session.set_mode(replace(mode, query=query))
    session.active_pane.search_from_cursor(query)


def handle_rename_key(key: str, context: KeyContext, mode: Renaming) -> None:
    session = context.session
    if key == ESC:
        session.return_to_browsing()
    elif key == ENTER:
        session.return_to_browsing()
        session.rename_entry(mode.original_name, mode.edit_buffer)
    elif key == BACKSPACE:
        session.set_mode(replace(mode, edit_buffer=mode.edit_buffer[:-1]))
    elif is_printable(key):
        session.set_mode(replace(mode, edit_buffer=mode.edit_buffer + key))


def handle_sort_key(key: str, context: KeyContext, mode: SortPicking) -> None:
    session = context.session
    total = len(SORT_OPTIONS)
    if key in {"j", DOWN}:
        session.set_mode(replace(mode, highlighted_option=(mode.highlighted_option + 1) % total))
    elif key in {"k", UP}:
        session.set_mode(replace(mode, highlighted_option=(mode.highlighted_option - 1) % total))
    elif key == ENTER:
        session.return_to_browsing()
        session.apply_sort(sort_option_at(mode.highlighted_option))
    elif key == ESC:
        session.return_to_browsing()


def handle_confirm_delete_key(key: str, context: KeyContext, mode: ConfirmDelete) -> None:
    session = context.session
    if key in {"y", ENTER}:
        session.return_to_browsing()
        session.delete_paths(mode.targets)
    elif key in {"n", ESC}:
        session.return_to_browsing()


def handle_viewing_key(key: str, count: int, context: KeyContext, mode: Viewing) -> None:
    """Scroll the viewer, saturating at ``[0, max_offset]``."""
    session = context.session
    max_offset = mode.max_offset(context.visible_rows())
    offset = min(mode.scroll_offset, max_offset)
    if key == "j":
        offset = min(max_offset, offset + count)
    elif key == "k":
        offset = max(0, offset - count)
    elif key == GG:
        offset = 0
    elif key == "G":
        offset = max_offset
    elif key == ENTER:
        session.return_to_browsing()
        return
    else:
        return
    session.set_mode(replace(mode, scroll_offset=offset))
