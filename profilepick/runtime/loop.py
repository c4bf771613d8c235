"""Main interactive event loop for the picker.

Turns terminal-size changes and decoded keys into selector events, applies
them one at a time, and re-renders after each state change. The loop owns the
only ``SelectorState`` and stops as soon as its outcome leaves ``pending``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from ..input import read_key
from .events import KeyEvent, ResizeEvent, SelectorEvent, transition
from .state import SelectorState
from .terminal import TerminalController

logger = logging.getLogger(__name__)

TerminalSize = os.terminal_size


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    # Input poll interval; terminal size is re-checked between polls.
    poll_ms: int = 120


@dataclass(frozen=True)
class RuntimeLoopCallbacks:
    """Injected operations used by ``run_selector_loop``."""

    render: Callable[[SelectorState], None]
    get_terminal_size: Callable[[], TerminalSize]
    read_key: Callable[[int, int | None], str] = read_key


def iter_terminal_events(
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
    timing: RuntimeLoopTiming,
) -> Iterator[SelectorEvent]:
    """Yield resize and key events in arrival order.

    A resize event is produced on the first iteration and whenever the
    reported size differs from the previous one. ``KeyboardInterrupt`` while
    waiting for input is delivered as a ``CTRL_C`` key.
    """
    last_size: tuple[int, int] | None = None
    while True:
        term = callbacks.get_terminal_size()
        size = (term.columns, term.lines)
        if size != last_size:
            last_size = size
            yield ResizeEvent(width=size[0], height=size[1])

        try:
            key = callbacks.read_key(stdin_fd, timing.poll_ms)
        except KeyboardInterrupt:
            key = "CTRL_C"
        if key == "":
            continue
        yield KeyEvent(key)


def run_event_loop(
    state: SelectorState,
    events: Iterable[SelectorEvent],
    render: Callable[[SelectorState], None],
) -> SelectorState:
    """Feed ``events`` into ``state`` until the outcome is decided.

    Renders the initial state once, then again after every event that changed
    it and after every resize, since the terminal may have reflowed the old
    frame. Returns the final state; it is still pending if ``events`` ran out.
    """
    render(state)
    if not state.outcome.is_pending:
        return state
    for event in events:
        next_state = transition(state, event)
        if next_state == state and not isinstance(event, ResizeEvent):
            continue
        state = next_state
        if not state.outcome.is_pending:
            break
        render(state)
    logger.debug("event loop finished with outcome %s", state.outcome.kind)
    return state


def run_selector_loop(
    state: SelectorState,
    terminal: TerminalController,
    stdin_fd: int,
    callbacks: RuntimeLoopCallbacks,
    timing: RuntimeLoopTiming | None = None,
) -> SelectorState:
    """Run the interactive loop inside the terminal's raw mode."""
    loop_timing = timing if timing is not None else RuntimeLoopTiming()
    with terminal.raw_mode():
        events = iter_terminal_events(stdin_fd, callbacks, loop_timing)
        return run_event_loop(state, events, callbacks.render)
