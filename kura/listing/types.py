"""Domain datatypes for directory listing snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Entry:
    """One directory member with metadata observed at scan time."""

    name: str
    path: Path
    is_dir: bool
    is_symlink: bool = False
    size: int | None = None
    modified_ns: int | None = None
    created_ns: int | None = None
    is_executable: bool = False

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")


__all__ = ["Entry"]
