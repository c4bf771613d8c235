"""Navigation transitions: cursor movement, detail toggle, confirm, cancel.

Every function takes a state and returns a new one; none of them fail.
Inputs that do not apply to the current state return it unchanged.
"""

from __future__ import annotations

from dataclasses import replace

from .state import SelectorState, cancelled, empty_cancelled, init_error, selected


def move_down(state: SelectorState) -> SelectorState:
    """Advance the cursor one row, scrolling when it leaves the bottom edge."""
    if not state.accepts_navigation or state.cursor is None:
        return state
    if state.cursor >= len(state.items) - 1:
        return state
    cursor = state.cursor + 1
    scroll_offset = state.scroll_offset
    height = state.viewport_height
    if height > 0 and cursor > scroll_offset + height - 1:
        scroll_offset = cursor - height + 1
    return replace(state, cursor=cursor, scroll_offset=scroll_offset)


def move_up(state: SelectorState) -> SelectorState:
    """Move the cursor one row up, scrolling when it leaves the top edge."""
    if not state.accepts_navigation or state.cursor is None:
        return state
    if state.cursor <= 0:
        return state
    cursor = state.cursor - 1
    scroll_offset = min(state.scroll_offset, cursor)
    return replace(state, cursor=cursor, scroll_offset=scroll_offset)


def toggle_detail(state: SelectorState) -> SelectorState:
    if not state.accepts_navigation:
        return state
    return replace(state, show_detail=not state.show_detail)


def confirm(state: SelectorState) -> SelectorState:
    if state.error is not None:
        return state
    if state.items and state.cursor is not None:
        return replace(state, outcome=selected(state.cursor))
    return replace(state, outcome=empty_cancelled())


def cancel(state: SelectorState) -> SelectorState:
    if state.error is not None:
        return replace(state, outcome=init_error(state.error))
    return replace(state, outcome=cancelled())
