"""Pending multi-key state carried between keypresses.

Holds the numeric repeat prefix and the armed first ``g`` of ``gg``. Both
live here rather than in module globals so a dispatcher owns exactly one
copy and tests can inspect it.
"""

from __future__ import annotations

from dataclasses import dataclass

DIGITS = frozenset("0123456789")


@dataclass
class KeySequenceState:
    count_buffer: str = ""
    pending_g: bool = False

    def push_digit(self, digit: str) -> None:
        self.count_buffer += digit
        self.pending_g = False

    def take_count(self) -> int:
        """Consume the repeat prefix; an absent or zero prefix counts as 1."""
        value = int(self.count_buffer) if self.count_buffer else 0
        self.count_buffer = ""
        return value if value > 0 else 1

    def press_g(self) -> bool:
        """Register a ``g`` press; return ``True`` when it completes ``gg``."""
        if self.pending_g:
            self.pending_g = False
            return True
        self.pending_g = True
        return False

    def clear_pending(self) -> None:
        self.pending_g = False

    def reset(self) -> None:
        self.count_buffer = ""
        self.pending_g = False
