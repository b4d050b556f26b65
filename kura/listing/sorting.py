"""Listing order criteria and name search.

Every criterion falls back to the case-insensitive name (then the raw name)
when its primary key ties, so the resulting order is total and sorting is
idempotent.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from .types import Entry


class SortBy(Enum):
    MODIFIED = "modified"
    CREATED = "created"
    SIZE = "size"
    NAME = "name"


SORT_OPTIONS: tuple[tuple[SortBy, str], ...] = (
    (SortBy.MODIFIED, "Last modified date"),
    (SortBy.CREATED, "Creation date"),
    (SortBy.SIZE, "File size"),
    (SortBy.NAME, "Alphabetical"),
)


def sort_option_at(index: int) -> SortBy:
    """Return the criterion for a picker row, wrapping out-of-range indices."""
    return SORT_OPTIONS[index % len(SORT_OPTIONS)][0]


def _name_key(entry: Entry) -> tuple[str, str]:
    return (entry.name.lower(), entry.name)


def sort_key(entry: Entry, criterion: SortBy) -> tuple:
    """Build the full ordering key for ``entry`` under ``criterion``."""
    if criterion is SortBy.MODIFIED:
        return (entry.modified_ns or 0, *_name_key(entry))
    if criterion is SortBy.CREATED:
        return (entry.created_ns or 0, *_name_key(entry))
    if criterion is SortBy.SIZE:
        # Largest first; names still ascend within equal sizes.
        return (-(entry.size or 0), *_name_key(entry))
    return _name_key(entry)


def sort_entries(entries: Sequence[Entry], criterion: SortBy) -> tuple[Entry, ...]:
    return tuple(sorted(entries, key=lambda entry: sort_key(entry, criterion)))


def find_match(entries: Sequence[Entry], query: str, start: int) -> int | None:
    """Find the next entry whose name contains ``query``, case-insensitively.

    Scanning begins one past ``start`` and wraps around, so ``start`` itself
    is the last candidate. Returns ``None`` for an empty query or listing.
    """
    if not query or not entries:
        return None
    needle = query.lower()
    total = len(entries)
    for step in range(1, total + 1):
        idx = (start + step) % total
        if needle in entries[idx].name.lower():
            return idx
    return None
