"""One side of the dual-pane browser.

A pane owns a directory listing snapshot plus index-based cursor and mark
state. Any change of snapshot (reload, directory change, sort) resets the
cursor to 0 and clears marks because indices may now name other entries.

Disk-touching operations return an error message instead of raising so the
input layer can surface it without unwinding.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .listing import DirectoryListing, Entry, SortBy, find_match, read_text_strict
from .mode import Viewing

LOGGER = logging.getLogger(__name__)


class Pane:
    def __init__(self, listing: DirectoryListing) -> None:
        self.listing = listing
        self.selected = 0
        self.marked: set[int] = set()

    @classmethod
    def open(cls, path: Path, sort_by: SortBy = SortBy.NAME) -> Pane:
        """Create a pane on ``path``; raises ``OSError`` if it cannot be listed."""
        return cls(DirectoryListing.load(path, sort_by))

    @property
    def current_dir(self) -> Path:
        return self.listing.path

    @property
    def items(self) -> tuple[Entry, ...]:
        return self.listing.entries

    def __len__(self) -> int:
        return len(self.listing)

    def selected_entry(self) -> Entry | None:
        return self.listing.get(self.selected)

    def _replace_listing(self, listing: DirectoryListing) -> None:
        self.listing = listing
        self.selected = 0
        self.marked.clear()

    def _switch_to(self, directory: Path) -> str | None:
        """Load ``directory``; on failure keep the current snapshot."""
        try:
            listing = DirectoryListing.load(directory, self.listing.sort_by)
        except OSError as exc:
            message = f"Cannot open {directory}: {exc.strerror or exc}"
            LOGGER.error(message)
            return message
        self._replace_listing(listing)
        return None

    def reload(self) -> str | None:
        """Re-list ``current_dir``; a failed reload leaves the stale listing visible."""
        try:
            listing = self.listing.reload()
        except OSError as exc:
            message = f"Cannot reload {self.current_dir}: {exc.strerror or exc}"
            LOGGER.error(message)
            return message
        self._replace_listing(listing)
        return None

    def move_cursor(self, delta: int, count: int = 1) -> None:
        if not self.listing.entries:
            self.selected = 0
            return
        target = self.selected + delta * max(1, count)
        self.selected = max(0, min(target, len(self.listing) - 1))

    def jump_to_top(self) -> None:
        self.selected = 0

    def jump_to_bottom(self) -> None:
        self.selected = max(0, len(self.listing) - 1)

    def enter_directory(self) -> tuple[Viewing | None, str | None]:
        """Descend into the selected directory or open the selected file.

        Returns ``(viewing, error)``. ``viewing`` is set when the selection is
        a text file; binary files are declined without an error.
        """
        entry = self.selected_entry()
        if entry is None:
            return None, None
        if entry.is_dir:
            return None, self._switch_to(entry.path)
        try:
            text = read_text_strict(entry.path)
        except UnicodeDecodeError:
            LOGGER.debug("not a text file, viewer declined: %s", entry.path)
            return None, None
        except OSError as exc:
            message = f"Cannot read {entry.path}: {exc.strerror or exc}"
            LOGGER.error(message)
            return None, message
        return Viewing(text=text, title=entry.name, scroll_offset=0, path=entry.path), None

    def go_to_parent(self) -> str | None:
        parent = self.current_dir.parent
        if parent == self.current_dir:
            return None
        return self._switch_to(parent)

    def toggle_mark(self) -> None:
        if not self.listing.entries:
            return
        if self.selected in self.marked:
            self.marked.discard(self.selected)
        else:
            self.marked.add(self.selected)

    def mark_range(self, anchor: int) -> None:
        """Replace marks with the inclusive interval between ``anchor`` and the cursor."""
        if not self.listing.entries:
            self.marked.clear()
            return
        last = len(self.listing) - 1
        anchor = max(0, min(anchor, last))
        low, high = sorted((anchor, self.selected))
        self.marked = set(range(low, high + 1))

    def clear_marks(self) -> None:
        self.marked.clear()

    def resolved_targets(self) -> list[Path]:
        """Paths an action applies to: marks if any, else the cursor entry."""
        if self.marked:
            return [self.listing[idx].path for idx in sorted(self.marked) if 0 <= idx < len(self.listing)]
        entry = self.selected_entry()
        return [] if entry is None else [entry.path]

    def select_name(self, name: str) -> bool:
        idx = self.listing.index_of(name)
        if idx is None:
            return False
        self.selected = idx
        return True

    def search_from_cursor(self, query: str) -> bool:
        """Jump to the next name containing ``query`` after the cursor."""
        idx = find_match(self.listing.entries, query, self.selected)
        if idx is None:
            return False
        self.selected = idx
        return True

    def apply_sort(self, criterion: SortBy) -> None:
        self._replace_listing(self.listing.sorted_by(criterion))
