"""Route key tokens to the handler of the active mode.

The dispatcher owns the pending key-sequence state (repeat count and armed
``g``), resolves it, and then hands one normalized token to exactly one mode
handler. It never raises on filesystem failures: session operations report
them through the status line and the log.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..mode import (
    Browsing,
    ConfirmDelete,
    Mode,
    Renaming,
    Searching,
    SortPicking,
    Viewing,
    VisualSelect,
)
from ..session import AppSession
from .key_browse import build_browsing_registry
from .key_common import GG, KeyContext, normalize_key
from .key_modes import (
    handle_confirm_delete_key,
    handle_rename_key,
    handle_search_key,
    handle_sort_key,
    handle_viewing_key,
    handle_visual_key,
)
from .sequences import DIGITS, KeySequenceState

LOGGER = logging.getLogger(__name__)

QUIT_KEY = "q"


class InputDispatcher:
    def __init__(
        self,
        session: AppSession,
        *,
        show_image: Callable[[Path], str | None] | None = None,
        visible_rows: Callable[[], int] | None = None,
    ) -> None:
        overrides = {}
        if show_image is not None:
            overrides["show_image"] = show_image
        if visible_rows is not None:
            overrides["visible_rows"] = visible_rows
        self.context = KeyContext(session=session, **overrides)
        self.sequence = KeySequenceState()
        self._browsing = build_browsing_registry(self.context)

    @property
    def session(self) -> AppSession:
        return self.context.session

    def handle_key(self, key: str) -> bool:
        """Apply one key token; return ``True`` when the app should quit."""
        if not key:
            return False
        key = normalize_key(key)
        if key == QUIT_KEY:
            return True

        session = self.session
        session.clear_status()
        mode = session.mode

        if not isinstance(mode, (Browsing, Viewing)):
            # Prefixes and `gg` only exist in the two counting modes.
            self.sequence.reset()
            self._dispatch_uncounted(key, mode)
            return False

        if key in DIGITS:
            self.sequence.push_digit(key)
            return False
        count = self.sequence.take_count()
        if key == "g":
            if not self.sequence.press_g():
                return False
            key = GG
        else:
            self.sequence.clear_pending()

        if isinstance(mode, Viewing):
            handle_viewing_key(key, count, self.context, mode)
        else:
            self._browsing.dispatch(key, count)
        return False

    def _dispatch_uncounted(self, key: str, mode: Mode) -> None:
        context = self.context
        if isinstance(mode, VisualSelect):
            handle_visual_key(key, 1, context, mode)
        elif isinstance(mode, Searching):
            handle_search_key(key, context, mode)
        elif isinstance(mode, Renaming):
            handle_rename_key(key, context, mode)
        elif isinstance(mode, SortPicking):
            handle_sort_key(key, context, mode)
        elif isinstance(mode, ConfirmDelete):
            handle_confirm_delete_key(key, context, mode)
        else:
            LOGGER.warning("unknown mode %r, returning to browsing", mode)
            self.session.return_to_browsing()
