"""Interactive runtime: mode dispatch, repaint, and session setup.

The loop reads one key, hands it to the active mode, then repaints. The
rename editor is a mode of this loop rather than a nested loop, so every
key goes through ``BrowserApp.handle_key``.
"""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable
from pathlib import Path

from .browser import Browser
from .fs import Filesystem
from .input import read_key
from .key_registry import KeyComboBinding, KeyComboRegistry
from .line_editor import EditorGeometry, EditorOutcome, LineEditor
from .render import build_browser_frame, build_editor_frame
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme


class Mode(enum.Enum):
    BROWSING = "browsing"
    EDITING = "editing"


class BrowserApp:
    """Top-level state: the browser, the active mode, and the open editor."""

    def __init__(
        self,
        browser: Browser,
        *,
        write: Callable[[str], None],
        terminal_size: Callable[[], tuple[int, int]],
        theme: UITheme = DEFAULT_THEME,
    ) -> None:
        self.browser = browser
        self.theme = theme
        self.mode = Mode.BROWSING
        self.editor: LineEditor | None = None
        self._write = write
        self._terminal_size = terminal_size
        self._quit_requested = False
        self._browse_keys = KeyComboRegistry().register_bindings(
            KeyComboBinding(("q",), self._request_quit),
            KeyComboBinding(("j", "DOWN"), browser.move_cursor_down),
            KeyComboBinding(("k", "UP"), browser.move_cursor_up),
            KeyComboBinding(("g",), self._jump_to_top),
            KeyComboBinding(("d",), browser.jump_to_bottom),
            KeyComboBinding(("ENTER",), browser.enter_selected),
            KeyComboBinding(("BACKSPACE",), browser.go_to_parent),
            KeyComboBinding(("r",), self._open_rename_editor),
        )

    def _request_quit(self) -> None:
        self._quit_requested = True

    def _jump_to_top(self) -> None:
        self.browser.jump_to_top()
        # Recompute visible_count against the live terminal before the next key.
        self.repaint()

    def _open_rename_editor(self) -> None:
        columns, rows = self._terminal_size()
        editor = self.browser.begin_rename(EditorGeometry.centered(columns, rows))
        if editor is None:
            return
        self.editor = editor
        self.mode = Mode.EDITING

    def _close_rename_editor(self) -> None:
        editor = self.editor
        self.editor = None
        self.mode = Mode.BROWSING
        if editor is not None:
            self.browser.finish_rename(editor)

    def handle_key(self, key: str) -> bool:
        """Dispatch ``key`` to the active mode; return ``True`` to quit."""
        if self.mode is Mode.EDITING and self.editor is not None:
            if self.editor.handle_key(key) is not EditorOutcome.CONTINUE:
                self._close_rename_editor()
            return False

        self.browser.clear_status()
        self._browse_keys.dispatch(key)
        return self._quit_requested

    def repaint(self) -> None:
        """Draw the listing, then the rename box on top while editing."""
        columns, rows = self._terminal_size()
        frame = build_browser_frame(self.browser, columns, rows, self.theme)
        if self.mode is Mode.EDITING and self.editor is not None:
            frame += build_editor_frame(self.editor, self.theme)
        self._write(frame)

    def run(self, next_key: Callable[[], str]) -> None:
        """Block on keys until quit or end of input, repainting after each."""
        self.repaint()
        while True:
            key = next_key()
            if not key:
                return
            if self.handle_key(key):
                return
            self.repaint()


def run_browser(
    path: Path,
    theme: UITheme = DEFAULT_THEME,
    show_hidden: bool = True,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Load ``path`` and run the interactive session until the user quits.

    ``TerminalUnavailable`` and an unreadable starting directory propagate
    before anything is drawn; the terminal is restored on every exit path once
    raw mode has been entered.
    """
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd)
    browser = Browser(Filesystem(show_hidden=show_hidden))
    browser.load_directory(path)

    app = BrowserApp(
        browser,
        write=terminal.write,
        terminal_size=terminal.size,
        theme=theme,
    )
    with terminal.raw_mode():
        app.run(lambda: read_key(stdin_fd))


__all__ = ["BrowserApp", "Mode", "run_browser"]
