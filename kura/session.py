"""Browser session state shared by the input layer and the renderer.

``AppSession`` is the only mutable state of a running browser. The
dispatcher calls its operations between polls; the renderer only reads it.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from . import file_ops
from .clipboard import Clipboard
from .file_ops import FileOpFailure
from .listing import SortBy
from .mode import Browsing, Mode
from .pane import Pane

LEFT = "left"
RIGHT = "right"


class AppSession:
    def __init__(self, left: Pane, right: Pane) -> None:
        self.left = left
        self.right = right
        self.active = LEFT
        self.mode: Mode = Browsing()
        self.clipboard = Clipboard()
        self.status_message = ""

    @classmethod
    def open(cls, path: Path) -> AppSession:
        """Open both panes on ``path``; raises ``OSError`` if it cannot be listed."""
        return cls(Pane.open(path), Pane.open(path))

    @property
    def active_pane(self) -> Pane:
        return self.left if self.active == LEFT else self.right

    @property
    def inactive_pane(self) -> Pane:
        return self.right if self.active == LEFT else self.left

    def panes(self) -> tuple[Pane, Pane]:
        return (self.left, self.right)

    def switch_pane(self) -> None:
        self.active = RIGHT if self.active == LEFT else LEFT

    def set_mode(self, mode: Mode) -> None:
        self.mode = mode

    def return_to_browsing(self) -> None:
        self.mode = Browsing()

    def set_status(self, message: str | None) -> None:
        self.status_message = message or ""

    def clear_status(self) -> None:
        self.status_message = ""

    def _report_failures(self, failures: list[FileOpFailure]) -> None:
        if not failures:
            return
        first = failures[0].describe()
        if len(failures) == 1:
            self.set_status(first)
        else:
            self.set_status(f"{first} (+{len(failures) - 1} more)")

    def refresh_directories(self, directories: Iterable[Path]) -> None:
        """Reload the active pane and any pane showing one of ``directories``."""
        affected = {Path(directory) for directory in directories}
        for pane in self.panes():
            if pane is self.active_pane or pane.current_dir in affected:
                error = pane.reload()
                if error and not self.status_message:
                    self.set_status(error)

    def copy_selection(self) -> int:
        """Put the active pane's resolved targets on the clipboard and clear marks."""
        pane = self.active_pane
        targets = pane.resolved_targets()
        if not targets:
            return 0
        self.clipboard.replace(targets)
        pane.clear_marks()
        self.set_status(f"Yanked {len(targets)} item(s)")
        return len(targets)

    def paste(self) -> list[FileOpFailure]:
        """Copy clipboard entries into the active directory, overwriting collisions."""
        if not self.clipboard:
            return []
        destination = self.active_pane.current_dir
        failures = file_ops.copy_many(self.clipboard.paths, destination)
        self._report_failures(failures)
        self.refresh_directories([destination])
        return failures

    def delete_paths(self, targets: Iterable[Path]) -> list[FileOpFailure]:
        targets = [Path(target) for target in targets]
        if not targets:
            return []
        failures = file_ops.delete_many(targets)
        self._report_failures(failures)
        self.refresh_directories(target.parent for target in targets)
        return failures

    def rename_entry(self, original_name: str, new_name: str) -> FileOpFailure | None:
        """Rename ``original_name`` in the active directory and re-select it."""
        pane = self.active_pane
        if new_name == original_name:
            return None
        failure = file_ops.rename(pane.current_dir / original_name, new_name)
        if failure is not None:
            self._report_failures([failure])
        self.refresh_directories([pane.current_dir])
        pane.select_name(new_name if failure is None else original_name)
        return failure

    def apply_sort(self, criterion: SortBy) -> None:
        self.active_pane.apply_sort(criterion)
