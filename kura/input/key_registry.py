"""Key-binding table primitives shared by the mode handlers."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

CountedHandler = Callable[[int], None]


@dataclass(frozen=True)
class KeyComboBinding:
    """Mapping from one or more key tokens to an action taking a repeat count."""

    combos: tuple[str, ...]
    handler: CountedHandler


class KeyComboRegistry:
    """Exact-match key table; unbound keys report ``False`` from ``dispatch``."""

    def __init__(self) -> None:
        self._handlers: dict[str, CountedHandler] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bound_keys(self) -> frozenset[str]:
        return frozenset(self._handlers)

    def dispatch(self, key: str, count: int = 1) -> bool:
        """Run the handler bound to ``key``; return whether one existed."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler(count)
        return True
