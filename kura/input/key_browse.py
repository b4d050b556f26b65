"""Browsing-mode keyboard handling."""

from __future__ import annotations

from ..file_ops import is_image
from ..mode import ConfirmDelete, Renaming, Searching, SortPicking, VisualSelect
from ..session import LEFT
from .key_common import ENTER, GG, KeyContext
from .key_registry import KeyComboBinding, KeyComboRegistry


def build_browsing_registry(context: KeyContext) -> KeyComboRegistry:
    """Bind every Browsing key to an action on ``context.session``.

    ``gg`` and digit prefixes are resolved by the dispatcher before these
    bindings see a key.
    """
    session = context.session

    def pane():
        return session.active_pane

    def move_down(count: int) -> None:
        pane().move_cursor(1, count)

    def move_up(count: int) -> None:
        pane().move_cursor(-1, count)

    def jump_to_top(_count: int) -> None:
        pane().jump_to_top()

    def jump_to_bottom(_count: int) -> None:
        pane().jump_to_bottom()

    def go_to_parent() -> None:
        session.set_status(pane().go_to_parent())

    def left_key(_count: int) -> None:
        if session.active == LEFT:
            go_to_parent()
        else:
            session.switch_pane()

    def right_key(_count: int) -> None:
        if session.active == LEFT:
            session.switch_pane()
        else:
            go_to_parent()

    def open_selected(_count: int) -> None:
        entry = pane().selected_entry()
        if entry is None:
            return
        if not entry.is_dir and is_image(entry.path):
            session.switch_pane()
            session.set_status(context.show_image(entry.path))
            return
        viewing, error = pane().enter_directory()
        session.set_status(error)
        if viewing is not None:
            session.set_mode(viewing)

    def toggle_mark(_count: int) -> None:
        pane().toggle_mark()

    def begin_visual(_count: int) -> None:
        current = pane()
        if not current.items:
            return
        current.marked = {current.selected}
        session.set_mode(VisualSelect(anchor=current.selected))

    def confirm_delete(_count: int) -> None:
        targets = pane().resolved_targets()
        if targets:
            session.set_mode(ConfirmDelete(targets=tuple(targets)))

    def delete_now(_count: int) -> None:
        session.delete_paths(pane().resolved_targets())

    def yank(_count: int) -> None:
        session.copy_selection()

    def paste(_count: int) -> None:
        session.paste()

    def begin_search(_count: int) -> None:
        session.set_mode(Searching(query=""))

    def begin_rename(_count: int) -> None:
        entry = pane().selected_entry()
        if entry is not None:
            session.set_mode(Renaming(original_name=entry.name, edit_buffer=entry.name))

    def begin_sort(_count: int) -> None:
        session.set_mode(SortPicking(highlighted_option=0))

    return KeyComboRegistry().register_bindings(
        KeyComboBinding(("j",), move_down),
        KeyComboBinding(("k",), move_up),
        KeyComboBinding((GG,), jump_to_top),
        KeyComboBinding(("G",), jump_to_bottom),
        KeyComboBinding(("h",), left_key),
        KeyComboBinding(("l",), right_key),
        KeyComboBinding((ENTER,), open_selected),
        KeyComboBinding(("v",), toggle_mark),
        KeyComboBinding(("V",), begin_visual),
        KeyComboBinding(("x",), confirm_delete),
        KeyComboBinding(("X",), delete_now),
        KeyComboBinding(("y",), yank),
        KeyComboBinding(("p",), paste),
        KeyComboBinding(("/",), begin_search),
        KeyComboBinding(("r",), begin_rename),
        KeyComboBinding(("s",), begin_sort),
    )
