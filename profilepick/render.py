"""Frame rendering for the picker screen.

``render_frame`` is a pure projection of ``SelectorState`` into styled text;
it never mutates state. Row counts match ``HEADER_ROWS``/``FOOTER_ROWS`` in
the layout module so the list fills exactly the reconciled viewport.
"""

from __future__ import annotations

import unicodedata

from .runtime.state import SelectorState
from .ui_theme import DEFAULT_THEME, UITheme, styled

TITLE_TEXT = "Select an AWS profile"
HELP_TEXT = "↑/k: up  ↓/j: down  enter: select  v: toggle role ARN  q/ctrl+c: quit"
LOADING_TEXT = "Initializing, please wait..."
TOO_SMALL_TEXT = "Window is too small."
EMPTY_TEXT = "No AWS profiles were found."
EMPTY_HINT = " Press q, Ctrl+C, or Enter to quit."
ERROR_HINT = " Press q or Ctrl+C to quit."
CURSOR_MARKER = "> "
ROW_INDENT = "  "


def char_display_width(ch: str) -> int:
    """Terminal columns used by one character (0, 1, or 2)."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in text)


def clip_text(text: str, max_cols: int) -> str:
    """Trim plain ``text`` to at most ``max_cols`` display columns."""
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for ch in text:
        width = char_display_width(ch)
        if col + width > max_cols:
            break
        out.append(ch)
        col += width
    return "".join(out)


def status_text(state: SelectorState) -> str:
    position = 0 if state.cursor is None else state.cursor + 1
    return f"Profile {position}/{len(state.items)}"


def _item_row(state: SelectorState, index: int, theme: UITheme, width: int) -> str:
    item = state.items[index]
    is_cursor = index == state.cursor
    marker = CURSOR_MARKER if is_cursor else ROW_INDENT
    remaining = width - display_width(marker)
    name = clip_text(item.name, remaining)
    remaining -= display_width(name)

    detail = ""
    if state.show_detail and is_cursor and item.metadata:
        detail = clip_text(f" (role ARN: {item.metadata})", remaining)

    if is_cursor:
        return (
            styled(theme.cursor_marker, clip_text(marker, width))
            + styled(theme.cursor_name, name)
            + styled(theme.detail, detail)
        )
    return clip_text(marker, width) + styled(theme.item_name, name)


def _message_view(message: str, message_attr: str, hint: str, width: int) -> str:
    lines = [
        "",
        styled(message_attr, clip_text(message, width)),
        "",
        clip_text(hint, width),
    ]
    return "\n".join(lines)


def render_frame(state: SelectorState, theme: UITheme = DEFAULT_THEME, width: int | None = None) -> str:
    """Render one full screen for ``state``.

    ``width`` defaults to the terminal width recorded in the state; a width of
    zero (no size report yet) disables clipping.
    """
    columns = state.terminal_width if width is None else width
    if columns <= 0:
        columns = 10_000

    if state.error is not None:
        return _message_view(f"Initialization error: {state.error}", theme.error, ERROR_HINT, columns)
    if not state.ready:
        return clip_text(LOADING_TEXT, columns)
    if not state.items:
        return _message_view(EMPTY_TEXT, theme.notice, EMPTY_HINT, columns)

    divider = styled(theme.divider, "─" * max(0, state.terminal_width))
    lines = [
        styled(theme.title, clip_text(TITLE_TEXT, columns)),
        divider,
    ]
    if state.viewport_height <= 0:
        lines.append(styled(theme.warning, clip_text(TOO_SMALL_TEXT, columns)))
    else:
        for index in state.visible_range():
            lines.append(_item_row(state, index, theme, columns))
    lines.append(divider)
    lines.append(styled(theme.chrome, clip_text(HELP_TEXT, columns)))
    lines.append(styled(theme.chrome, clip_text(status_text(state), columns)))
    return "\n".join(lines)
