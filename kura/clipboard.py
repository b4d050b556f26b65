"""Session clipboard of source paths awaiting paste."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


class Clipboard:
    """Ordered source paths; replaced wholesale on copy, kept after paste."""

    def __init__(self) -> None:
        self._paths: tuple[Path, ...] = ()

    @property
    def paths(self) -> tuple[Path, ...]:
        return self._paths

    def replace(self, paths: Iterable[Path]) -> None:
        self._paths = tuple(Path(path) for path in paths)

    def __len__(self) -> int:
        return len(self._paths)

    def __bool__(self) -> bool:
        return bool(self._paths)
