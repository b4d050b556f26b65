"""Filesystem scanning for directory listings.

Stat failures on individual children are tolerated and recorded as missing
metadata. Failing to open the directory itself raises ``OSError``.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path

from .types import Entry

_EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def _created_ns(st: os.stat_result) -> int | None:
    """Return creation time in nanoseconds when the platform reports one."""
    birth_ns = getattr(st, "st_birthtime_ns", None)
    if birth_ns is not None:
        return int(birth_ns)
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return int(birth * 1_000_000_000)
    if os.name == "nt":
        # Before 3.12, st_ctime is the creation time on Windows.
        return int(st.st_ctime_ns)
    return None


def is_executable(name: str, st: os.stat_result | None, *, posix: bool | None = None) -> bool:
    """Return the display-level executable flag for a file.

    POSIX checks for any execute permission bit; elsewhere the ``.exe``
    suffix is used.
    """
    if posix is None:
        posix = os.name == "posix"
    if not posix:
        return name.endswith(".exe")
    if st is None or not stat.S_ISREG(st.st_mode):
        return False
    return bool(st.st_mode & _EXECUTABLE_BITS)


def scan_entry(child: os.DirEntry) -> Entry:
    """Build an ``Entry`` from one ``os.scandir`` result."""
    path = Path(child.path).absolute()
    try:
        is_symlink = child.is_symlink()
    except OSError:
        is_symlink = False
    try:
        is_dir = child.is_dir()
    except OSError:
        is_dir = False

    st: os.stat_result | None
    try:
        st = child.stat()
    except OSError:
        # Dangling symlinks still have an lstat.
        try:
            st = child.stat(follow_symlinks=False)
        except OSError:
            st = None

    if st is None:
        return Entry(name=child.name, path=path, is_dir=is_dir, is_symlink=is_symlink)
    return Entry(
        name=child.name,
        path=path,
        is_dir=is_dir,
        is_symlink=is_symlink,
        size=int(st.st_size),
        modified_ns=int(st.st_mtime_ns),
        created_ns=_created_ns(st),
        is_executable=False if is_dir else is_executable(child.name, st),
    )


def scan_directory(directory: Path) -> list[Entry]:
    """Return every child of ``directory`` in filesystem order.

    Hidden files are included. Raises ``OSError`` when the directory cannot
    be opened or iterated.
    """
    with os.scandir(directory) as it:
        return [scan_entry(child) for child in it]


def read_text_strict(path: Path) -> str:
    """Read ``path`` as UTF-8 text (BOM tolerated).

    Raises ``UnicodeDecodeError`` for binary content and ``OSError`` when the
    file cannot be read.
    """
    return path.read_bytes().decode("utf-8-sig")
