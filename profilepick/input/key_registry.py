"""Key-combo registry mapping key tokens to state transitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

StateT = TypeVar("StateT")


@dataclass(frozen=True)
class KeyComboBinding(Generic[StateT]):
    """Mapping from one or more key tokens to a single transition."""

    combos: tuple[str, ...]
    handler: Callable[[StateT], StateT]


class KeyComboRegistry(Generic[StateT]):
    """Small key-dispatch table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize if normalize is not None else self._identity
        self._handlers: dict[str, Callable[[StateT], StateT]] = {}

    @staticmethod
    def _identity(key: str) -> str:
        return key

    def register_binding(self, binding: KeyComboBinding[StateT]) -> KeyComboRegistry[StateT]:
        """Register one binding, overwriting existing handlers for same combos."""
        for combo in binding.combos:
            self._handlers[self._normalize(combo)] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyComboBinding[StateT]) -> KeyComboRegistry[StateT]:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def is_bound(self, key: str) -> bool:
        return self._normalize(key) in self._handlers

    def dispatch(self, key: str, state: StateT) -> StateT | None:
        """Apply the transition bound to ``key``; ``None`` when unbound."""
        handler = self._handlers.get(self._normalize(key))
        if handler is None:
            return None
        return handler(state)
