"""Directory listing model: entries, scanning, and ordering."""

from .fs import is_executable, read_text_strict, scan_directory
from .listing import DirectoryListing
from .sorting import SORT_OPTIONS, SortBy, find_match, sort_entries, sort_key, sort_option_at
from .types import Entry

__all__ = [
    "Entry",
    "DirectoryListing",
    "SortBy",
    "SORT_OPTIONS",
    "find_match",
    "is_executable",
    "read_text_strict",
    "scan_directory",
    "sort_entries",
    "sort_key",
    "sort_option_at",
]
