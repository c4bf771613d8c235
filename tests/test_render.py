"""Snapshot-style tests for picker frame rendering.

Uses the plain theme for exact text checks and the default theme to verify
that styling is applied through ANSI sequences.
"""

from __future__ import annotations

import unittest

from profilepick import render
from profilepick.profiles import Item
from profilepick.runtime.events import KeyEvent, ResizeEvent, transition
from profilepick.runtime.state import new_selector_state
from profilepick.ui_theme import DEFAULT_THEME, PLAIN_THEME, resolve_theme


def _ready(names: list[str], width: int = 20, height: int = 10, preferred: str | None = None):
    items = [Item(name=name, metadata=f"arn:{name}" if name != "plain" else None) for name in names]
    return transition(new_selector_state(items, preferred_name=preferred), ResizeEvent(width, height))


class RenderFrameTests(unittest.TestCase):
    def test_list_view_layout(self) -> None:
        state = _ready(["default", "dev", "prod"], preferred="dev")

        frame = render.render_frame(state, PLAIN_THEME)

        self.assertEqual(
            frame.split("\n"),
            [
                "Select an AWS profil",
                "─" * 20,
                "  default",
                "> dev",
                "  prod",
                "─" * 20,
                render.clip_text(render.HELP_TEXT, 20),
                "Profile 2/3",
            ],
        )

    def test_only_visible_window_is_rendered(self) -> None:
        names = [f"p{idx}" for idx in range(10)]
        state = _ready(names, height=8, preferred="p6")

        lines = render.render_frame(state, PLAIN_THEME).split("\n")

        self.assertEqual(lines[2:5], ["  p4", "  p5", "> p6"])
        self.assertEqual(len(lines), 8)

    def test_detail_shows_role_arn_on_cursor_row_only(self) -> None:
        state = transition(_ready(["a", "b"], width=60), KeyEvent("v"))

        lines = render.render_frame(state, PLAIN_THEME).split("\n")

        self.assertEqual(lines[2], "> a (role ARN: arn:a)")
        self.assertEqual(lines[3], "  b")

    def test_detail_without_metadata_adds_nothing(self) -> None:
        state = transition(_ready(["plain"], width=60), KeyEvent("v"))

        lines = render.render_frame(state, PLAIN_THEME).split("\n")

        self.assertEqual(lines[2], "> plain")

    def test_rows_are_clipped_to_width(self) -> None:
        state = _ready(["a-very-long-profile-name"], width=10)

        lines = render.render_frame(state, PLAIN_THEME).split("\n")

        self.assertEqual(lines[2], "> a-very-l")

    def test_too_small_window_message(self) -> None:
        state = _ready(["a", "b"], width=30, height=5)

        lines = render.render_frame(state, PLAIN_THEME).split("\n")

        self.assertEqual(lines[2], render.TOO_SMALL_TEXT)
        self.assertEqual(lines[-1], "Profile 1/2")

    def test_loading_view_before_first_size_report(self) -> None:
        state = new_selector_state([Item(name="a")])

        self.assertEqual(render.render_frame(state, PLAIN_THEME), render.LOADING_TEXT)

    def test_empty_view(self) -> None:
        state = transition(new_selector_state([]), ResizeEvent(80, 24))

        frame = render.render_frame(state, PLAIN_THEME)

        self.assertIn(render.EMPTY_TEXT, frame)
        self.assertIn("Enter", frame)

    def test_error_view_renders_before_ready(self) -> None:
        state = new_selector_state([], error="config missing")

        frame = render.render_frame(state, PLAIN_THEME)

        self.assertIn("Initialization error: config missing", frame)
        self.assertNotIn("Enter", frame)

    def test_default_theme_styles_cursor_row(self) -> None:
        state = _ready(["a", "b"], width=40)

        lines = render.render_frame(state, DEFAULT_THEME).split("\n")

        self.assertIn("\x1b[", lines[2])
        self.assertEqual(lines[3], "  b")

    def test_render_does_not_mutate_state(self) -> None:
        state = _ready(["a", "b"])

        render.render_frame(state)

        self.assertEqual(state, _ready(["a", "b"]))


class TextHelperTests(unittest.TestCase):
    def test_clip_text_counts_wide_characters(self) -> None:
        self.assertEqual(render.clip_text("日本語", 4), "日本")
        self.assertEqual(render.clip_text("abc", 0), "")
        self.assertEqual(render.display_width("日a"), 3)


class ThemeTests(unittest.TestCase):
    def test_resolve_theme(self) -> None:
        self.assertIs(resolve_theme(None), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(resolve_theme(" Ocean ").name, "ocean")
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)


if __name__ == "__main__":
    unittest.main()
