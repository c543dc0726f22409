"""Terminal control helpers for the picker session.

Owns the raw-mode lifecycle plus the autowrap and cursor-visibility toggles.
The picker draws inline (no alternate screen) so the final frame stays in
scrollback after exit.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

ENTER_PICKER_MODE = b"\x1b[?7l\x1b[?25l"
EXIT_PICKER_MODE = b"\x1b[?25h\x1b[?7h"


class TerminalController:
    """Manage terminal mode transitions for one interactive session."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_picker_mode(self) -> None:
        """Enter raw mode with autowrap disabled and the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        # No autowrap: long rows are clipped instead of adding screen lines.
        os.write(self.stdout_fd, ENTER_PICKER_MODE)

    def disable_picker_mode(self) -> None:
        """Restore saved tty attributes, cursor visibility, and autowrap.

        The tty attributes are restored even when the output fd is broken.
        """
        try:
            os.write(self.stdout_fd, EXIT_PICKER_MODE)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        """Write ``text`` unbuffered so it is visible before the next blocking read."""
        data = text.encode("utf-8")
        while data:
            written = os.write(self.stdout_fd, data)
            data = data[written:]

    @contextlib.contextmanager
    def raw_mode(self):
        """Context manager that brackets code with picker-mode enter/exit calls."""
        try:
            self.enable_picker_mode()
            yield
        finally:
            self.disable_picker_mode()
