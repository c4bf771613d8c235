"""Viewport reconciliation for terminal-size reports.

Keeps cursor, scroll offset, and viewport height mutually consistent when the
terminal first reports its size and on every later resize.
"""

from __future__ import annotations

from dataclasses import replace

from .state import SelectorState

# Title + divider above the list.
HEADER_ROWS = 2
# Divider, help text, and status line below the list.
FOOTER_ROWS = 3


def viewport_height_for(terminal_height: int) -> int:
    """Number of item rows that fit between header and footer."""
    return max(0, terminal_height - HEADER_ROWS - FOOTER_ROWS)


def max_scroll_offset(item_count: int, viewport_height: int) -> int:
    return max(0, item_count - max(0, viewport_height))


def clamp_scroll(scroll_offset: int, item_count: int, viewport_height: int) -> int:
    return max(0, min(scroll_offset, max_scroll_offset(item_count, viewport_height)))


def clamp_cursor(cursor: int, scroll_offset: int, item_count: int, viewport_height: int) -> int:
    """Pull ``cursor`` into the visible window, then into the list bounds."""
    if viewport_height > 0:
        cursor = max(scroll_offset, min(cursor, scroll_offset + viewport_height - 1))
    return max(0, min(cursor, item_count - 1))


def reconcile_layout(state: SelectorState, width: int, height: int) -> SelectorState:
    """Apply one terminal-size report to ``state``.

    The first report marks the state ready and scrolls just far enough that
    the initial cursor sits on the bottom edge when it would otherwise be
    below the fold. Later reports that change the viewport height keep the
    window from pointing past the end of the list, and keep a scrolled window
    that was showing the tail of the list anchored to it. A window still at
    the top stays there. Unchanged heights only re-run the closing clamps.
    """
    previous_height = state.viewport_height
    viewport_height = viewport_height_for(height)
    first_report = not state.ready
    state = replace(
        state,
        terminal_width=max(0, width),
        viewport_height=viewport_height,
        ready=True,
    )
    if state.cursor is None or not state.items:
        return state

    item_count = len(state.items)
    cursor = state.cursor
    scroll_offset = state.scroll_offset

    if first_report:
        if viewport_height > 0 and cursor >= viewport_height:
            scroll_offset = cursor - viewport_height + 1
        else:
            scroll_offset = 0
    elif viewport_height != previous_height and viewport_height > 0:
        runs_past_end = scroll_offset + viewport_height > item_count
        showed_tail = scroll_offset > 0 and scroll_offset + previous_height >= item_count
        if runs_past_end or showed_tail:
            scroll_offset = item_count - viewport_height

    scroll_offset = clamp_scroll(scroll_offset, item_count, viewport_height)
    cursor = clamp_cursor(cursor, scroll_offset, item_count, viewport_height)
    return replace(state, cursor=cursor, scroll_offset=scroll_offset)
