"""UI theme definitions and selection helpers.

Themes map semantic UI slots to ``pygments.console`` attribute strings
(``"*blue*"`` for bold blue, ``"_white_"`` for underlined white, and so on).
An empty attribute leaves text unstyled.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import ansiformat


@dataclass(frozen=True)
class UITheme:
    """Semantic palette used by the renderer."""

    name: str
    title: str
    divider: str
    cursor_marker: str
    cursor_name: str
    item_name: str
    detail: str
    chrome: str
    error: str
    notice: str
    warning: str


DEFAULT_THEME = UITheme(
    name="default",
    title="*brightblue*",
    divider="faint",
    cursor_marker="brightyellow",
    cursor_name="*_white_*",
    item_name="",
    detail="standout",
    chrome="faint",
    error="*brightred*",
    notice="brightyellow",
    warning="standout",
)

OCEAN_THEME = UITheme(
    name="ocean",
    title="*brightcyan*",
    divider="blue",
    cursor_marker="brightcyan",
    cursor_name="*_brightcyan_*",
    item_name="cyan",
    detail="brightblue",
    chrome="blue",
    error="*brightmagenta*",
    notice="brightcyan",
    warning="standout",
)

PLAIN_THEME = UITheme(
    name="plain",
    title="",
    divider="",
    cursor_marker="",
    cursor_name="",
    item_name="",
    detail="",
    chrome="",
    error="",
    notice="",
    warning="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    return tuple(_THEMES)


def resolve_theme(name: str | None, no_color: bool = False) -> UITheme:
    """Return the named theme, the plain theme for ``no_color``, else default."""
    if no_color:
        return PLAIN_THEME
    if name is None:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)


def styled(attr: str, text: str) -> str:
    """Apply one theme attribute to ``text``."""
    if not attr or not text:
        return text
    return ansiformat(attr, text)
