"""Key-token to action tables shared by the browser and the rename editor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable from one or more key tokens."""

    combos: tuple[str, ...]
    handler: Callable[[], object]


class KeyComboRegistry:
    """Exact-match dispatch table; later bindings replace earlier ones."""

    def __init__(self) -> None:
        """Start with no bindings."""
        self._handlers: dict[str, Callable[[], object]] = {}

    def __contains__(self, key: object) -> bool:
        """Return whether ``key`` has a bound handler."""
        return key in self._handlers

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        """Bind every combo of ``binding`` and return ``self`` for chaining."""
        for combo in binding.combos:
            self._handlers[combo] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        """Register several bindings and return ``self`` for chaining."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Run the handler bound to ``key``; ``False`` when nothing is bound."""
        handler = self._handlers.get(key)
        if handler is None:
            return False
        handler()
        return True


__all__ = ["KeyComboBinding", "KeyComboRegistry"]
