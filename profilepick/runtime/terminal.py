"""Terminal control helpers for the picker session.

Owns raw-mode lifecycle, alternate-screen switching, and frame output.
The UI is drawn on stderr so stdout stays free for the result line.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

ENTER_TUI_SEQUENCE = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI_SEQUENCE = b"\x1b[?25h\x1b[?1049l"
DEFAULT_TERMINAL_SIZE = (80, 24)


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, output_fd: int) -> None:
        """Capture tty state and bind the input and drawing file descriptors."""
        self.stdin_fd = stdin_fd
        self.output_fd = output_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.output_fd, ENTER_TUI_SEQUENCE)

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen, and restore tty state."""
        os.write(self.output_fd, EXIT_TUI_SEQUENCE)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def get_size(self) -> os.terminal_size:
        """Size of the drawing terminal; stdout is usually a pipe here."""
        try:
            return os.get_terminal_size(self.output_fd)
        except OSError:
            return shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)

    def write_frame(self, frame: str) -> None:
        """Replace the screen contents with ``frame``.

        Raw mode disables newline translation, so rows are joined with CRLF
        and each row clears its remainder.
        """
        rows = frame.split("\n")
        payload = "\x1b[H" + "\x1b[K\r\n".join(rows) + "\x1b[K\x1b[J"
        os.write(self.output_fd, payload.encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with TUI enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
