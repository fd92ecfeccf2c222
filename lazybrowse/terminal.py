"""Terminal control for the browser session.

Owns the raw-mode lifecycle and alternate-screen switching. The controller
is the single handle on process-wide terminal state; ``raw_mode`` guarantees
cooked mode is restored on every exit path.
"""

from __future__ import annotations

import contextlib
import os
import shutil
import termios
import tty

from .errors import TerminalUnavailable

CLEAR_AND_HOME = b"\x1b[2J\x1b[H"


class TerminalController:
    """Raw-mode and alternate-screen handle on one pair of tty descriptors."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Snapshot the cooked tty state so it can be restored later."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalUnavailable(f"stdin is not a terminal: {exc}") from exc

    def enable_tui_mode(self) -> None:
        """Switch stdin to raw mode and enter the alternate screen."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        except termios.error as exc:
            raise TerminalUnavailable(f"cannot enter raw mode: {exc}") from exc
        # Enter alternate screen.
        os.write(self.stdout_fd, b"\x1b[?1049h")

    def disable_tui_mode(self) -> None:
        """Leave the alternate screen and restore the saved tty state."""
        # Clear, home the cursor, make it visible, and leave the alternate screen.
        os.write(self.stdout_fd, CLEAR_AND_HOME + b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write(self, text: str) -> None:
        """Write one UTF-8 encoded frame to stdout."""
        os.write(self.stdout_fd, text.encode("utf-8", errors="replace"))

    @staticmethod
    def size() -> tuple[int, int]:
        """Return ``(columns, rows)`` with an 80x24 fallback."""
        term = shutil.get_terminal_size((80, 24))
        return max(1, term.columns), max(1, term.lines)

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket the session with raw-mode enter/exit calls."""
        try:
            self.enable_tui_mode()
            yield self
        finally:
            self.disable_tui_mode()


__all__ = ["CLEAR_AND_HOME", "TerminalController"]
