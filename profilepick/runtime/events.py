"""Selector events and the pure ``transition`` function.

Resize events feed layout reconciliation; key events are routed through the
key-combo registry to navigation transitions. Unknown keys are no-ops.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..input import KeyComboBinding, KeyComboRegistry
from .layout import reconcile_layout
from .navigation import cancel, confirm, move_down, move_up, toggle_detail
from .state import SelectorState


@dataclass(frozen=True)
class ResizeEvent:
    """Terminal size report in character cells."""

    width: int
    height: int


@dataclass(frozen=True)
class KeyEvent:
    """One decoded key token, as produced by ``read_key``."""

    key: str


SelectorEvent = Union[ResizeEvent, KeyEvent]

MOVE_UP_KEYS = ("UP", "k")
MOVE_DOWN_KEYS = ("DOWN", "j")
TOGGLE_DETAIL_KEYS = ("v",)
CONFIRM_KEYS = ("ENTER",)
CANCEL_KEYS = ("q", "CTRL_C")


def build_key_registry() -> KeyComboRegistry[SelectorState]:
    """Return the default key bindings for the selector."""
    return KeyComboRegistry[SelectorState]().register_bindings(
        KeyComboBinding(MOVE_UP_KEYS, move_up),
        KeyComboBinding(MOVE_DOWN_KEYS, move_down),
        KeyComboBinding(TOGGLE_DETAIL_KEYS, toggle_detail),
        KeyComboBinding(CONFIRM_KEYS, confirm),
        KeyComboBinding(CANCEL_KEYS, cancel),
    )


DEFAULT_KEY_REGISTRY = build_key_registry()


def transition(
    state: SelectorState,
    event: SelectorEvent,
    registry: KeyComboRegistry[SelectorState] | None = None,
) -> SelectorState:
    """Return the state that follows ``event``.

    Total over all inputs: once the outcome has left ``pending`` every event
    is ignored, and events of unknown type or with unbound keys leave the
    state unchanged.
    """
    if not state.outcome.is_pending:
        return state
    if isinstance(event, ResizeEvent):
        return reconcile_layout(state, event.width, event.height)
    if isinstance(event, KeyEvent):
        bindings = registry if registry is not None else DEFAULT_KEY_REGISTRY
        next_state = bindings.dispatch(event.key, state)
        return state if next_state is None else next_state
    return state
