"""Sorted snapshot of one directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .fs import scan_directory
from .sorting import SortBy, sort_entries
from .types import Entry


@dataclass(frozen=True)
class DirectoryListing:
    """Entries of ``path`` ordered by ``sort_by``.

    Listings are immutable; ``reload`` and ``sorted_by`` return new
    snapshots rather than patching this one.
    """

    path: Path
    entries: tuple[Entry, ...] = ()
    sort_by: SortBy = SortBy.NAME

    @classmethod
    def load(cls, path: Path, sort_by: SortBy = SortBy.NAME) -> DirectoryListing:
        """Scan ``path`` and sort the result.

        Raises ``OSError`` when the directory is unreadable.
        """
        directory = Path(path).absolute()
        return cls(path=directory, entries=sort_entries(scan_directory(directory), sort_by), sort_by=sort_by)

    def reload(self) -> DirectoryListing:
        """Re-scan the same directory with the same criterion."""
        return DirectoryListing.load(self.path, self.sort_by)

    def sorted_by(self, criterion: SortBy) -> DirectoryListing:
        return DirectoryListing(path=self.path, entries=sort_entries(self.entries, criterion), sort_by=criterion)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> Entry:
        return self.entries[index]

    def get(self, index: int) -> Entry | None:
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def index_of(self, name: str) -> int | None:
        for idx, entry in enumerate(self.entries):
            if entry.name == name:
                return idx
        return None

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]
