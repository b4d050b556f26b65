"""Copy, delete, and rename primitives against the real filesystem.

Operations are best-effort: each returns the failures it hit instead of
raising, and one failing item never stops its siblings. Every failure is
logged before it is returned.
"""

from __future__ import annotations

import logging
import os
import shutil
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

LOGGER = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({"png", "jpg", "jpeg", "gif", "bmp", "tiff", "tif", "webp"})


@dataclass(frozen=True)
class FileOpFailure:
    """One failed filesystem action on one path."""

    action: str
    path: Path
    message: str

    def describe(self) -> str:
        return f"{self.action} failed for {self.path}: {self.message}"


def _failure(action: str, path: Path | str, message: object) -> FileOpFailure:
    failure = FileOpFailure(action=action, path=Path(path), message=str(message))
    LOGGER.error(failure.describe())
    return failure


def is_image(path: Path) -> bool:
    """Return whether ``path`` has a known raster image extension."""
    suffix = path.suffix
    if not suffix:
        return False
    return suffix[1:].lower() in IMAGE_EXTENSIONS


def _is_within(child: Path, parent: Path) -> bool:
    try:
        child.resolve().relative_to(parent.resolve())
    except ValueError:
        return False
    return True


def copy_recursive(src: Path, dst: Path) -> list[FileOpFailure]:
    """Copy ``src`` to ``dst``, recursing into directories.

    Directories merge into an existing ``dst``; files overwrite it. Returns
    every per-entry failure; siblings of a failed entry are still copied.
    """
    src = Path(src)
    dst = Path(dst)
    if src.is_dir():
        if _is_within(dst, src):
            return [_failure("copy", src, f"cannot copy a directory into itself ({dst})")]
        try:
            shutil.copytree(src, dst, symlinks=False, dirs_exist_ok=True)
        except shutil.Error as exc:
            return [_failure("copy", failed_src, why) for failed_src, _failed_dst, why in exc.args[0]]
        except OSError as exc:
            return [_failure("copy", src, exc)]
        return []

    if dst.is_dir() and not dst.is_symlink():
        return [_failure("copy", src, f"destination is a directory ({dst})")]
    try:
        shutil.copy2(src, dst, follow_symlinks=True)
    except OSError as exc:
        return [_failure("copy", src, exc)]
    return []


def delete(path: Path) -> list[FileOpFailure]:
    """Delete a file, symlink, or whole directory tree.

    Symlinks are removed themselves and never followed. Directory removal
    keeps going past entries it cannot delete.
    """
    path = Path(path)
    if path.is_symlink() or not path.is_dir():
        try:
            path.unlink()
        except OSError as exc:
            return [_failure("delete", path, exc)]
        return []

    failures: list[FileOpFailure] = []

    def record(_func, failed_path, exc) -> None:
        if isinstance(exc, tuple):
            exc = exc[1]
        failures.append(_failure("delete", failed_path, exc))

    if sys.version_info >= (3, 12):
        shutil.rmtree(path, onexc=record)
    else:
        shutil.rmtree(path, onerror=record)
    return failures


def rename(old_path: Path, new_name: str) -> FileOpFailure | None:
    """Rename ``old_path`` to ``new_name`` inside the same parent directory."""
    old_path = Path(old_path)
    if not new_name or new_name in {".", ".."}:
        return _failure("rename", old_path, f"invalid name {new_name!r}")
    if os.sep in new_name or (os.altsep and os.altsep in new_name):
        return _failure("rename", old_path, f"name must not contain a path separator: {new_name!r}")

    new_path = old_path.with_name(new_name)
    if new_path == old_path:
        return None
    try:
        os.rename(old_path, new_path)
    except OSError as exc:
        return _failure("rename", old_path, exc)
    return None


def copy_many(sources: Iterable[Path], dst_dir: Path) -> list[FileOpFailure]:
    """Copy each source into ``dst_dir`` under its own name."""
    failures: list[FileOpFailure] = []
    for src in sources:
        src = Path(src)
        if not src.name:
            failures.append(_failure("copy", src, "source has no file name"))
            continue
        failures.extend(copy_recursive(src, Path(dst_dir) / src.name))
    return failures


def delete_many(paths: Iterable[Path]) -> list[FileOpFailure]:
    failures: list[FileOpFailure] = []
    for path in paths:
        failures.extend(delete(path))
    return failures
