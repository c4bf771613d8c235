"""Selector state record and outcome types.

``SelectorState`` is immutable; layout and navigation modules return updated
copies via ``dataclasses.replace`` instead of mutating in place.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..profiles import Item

OUTCOME_PENDING = "pending"
OUTCOME_SELECTED = "selected"
OUTCOME_CANCELLED = "cancelled"
OUTCOME_EMPTY_CANCELLED = "empty-cancelled"
OUTCOME_INIT_ERROR = "init-error"


@dataclass(frozen=True)
class Outcome:
    """How an interactive session ended (or ``pending`` while it runs)."""

    kind: str = OUTCOME_PENDING
    index: int | None = None
    reason: str = ""

    @property
    def is_pending(self) -> bool:
        return self.kind == OUTCOME_PENDING


PENDING = Outcome()


def selected(index: int) -> Outcome:
    return Outcome(kind=OUTCOME_SELECTED, index=index)


def cancelled() -> Outcome:
    return Outcome(kind=OUTCOME_CANCELLED)


def empty_cancelled() -> Outcome:
    return Outcome(kind=OUTCOME_EMPTY_CANCELLED)


def init_error(reason: str) -> Outcome:
    return Outcome(kind=OUTCOME_INIT_ERROR, reason=reason)


@dataclass(frozen=True)
class SelectorState:
    items: tuple[Item, ...]
    cursor: int | None
    scroll_offset: int = 0
    viewport_height: int = 0
    terminal_width: int = 0
    ready: bool = False
    show_detail: bool = False
    error: str | None = None
    outcome: Outcome = PENDING

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def accepts_navigation(self) -> bool:
        """Whether cursor movement and detail toggling have any meaning."""
        return self.error is None and bool(self.items) and self.cursor is not None

    @property
    def current_item(self) -> Item | None:
        if self.cursor is None or not 0 <= self.cursor < len(self.items):
            return None
        return self.items[self.cursor]

    def visible_range(self) -> range:
        """Item indices currently inside the viewport."""
        if self.viewport_height <= 0 or not self.items:
            return range(0)
        start = max(0, min(self.scroll_offset, len(self.items)))
        end = min(len(self.items), start + self.viewport_height)
        return range(start, end)


def new_selector_state(
    items: Sequence[Item],
    preferred_name: str | None = None,
    error: str | None = None,
) -> SelectorState:
    """Build the initial state for one session.

    The cursor starts on the first item named ``preferred_name`` and falls
    back to index 0. An empty list has no cursor. When ``error`` is given the
    state represents the source-unavailable view and carries no items.
    """
    if error is not None:
        return SelectorState(items=(), cursor=None, error=error)

    frozen_items = tuple(items)
    if not frozen_items:
        return SelectorState(items=frozen_items, cursor=None)

    cursor = 0
    if preferred_name:
        cursor = next(
            (idx for idx, item in enumerate(frozen_items) if item.name == preferred_name),
            0,
        )
    return SelectorState(items=frozen_items, cursor=cursor)
