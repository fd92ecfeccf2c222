"""Modal single-line editor used to rename entries.

The editor owns its text buffer and cursor; it never touches the listing.
Key handling returns an ``EditorOutcome`` so the runtime decides what a
confirm or cancel means.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .key_registry import KeyComboBinding, KeyComboRegistry

DEFAULT_TITLE = "Rename"


class EditorOutcome(enum.Enum):
    CONTINUE = "continue"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class EditorGeometry:
    """Box placement in 1-based terminal cells.

    ``origin_x`` is the column of the left border and ``origin_y`` the row of
    the top border; ``width`` counts interior columns only and ``height`` is
    the full box height including both borders.
    """

    origin_x: int
    origin_y: int
    width: int
    height: int

    @classmethod
    def centered(cls, columns: int, rows: int) -> EditorGeometry:
        """Half the terminal in each dimension, centered on screen."""
        width = max(4, columns // 2)
        height = max(3, rows // 2)
        origin_x = max(1, (columns - width - 2) // 2 + 1)
        origin_y = max(1, (rows - height) // 2 + 1)
        return cls(origin_x=origin_x, origin_y=origin_y, width=width, height=height)

    @property
    def text_row(self) -> int:
        """Interior row holding the text, in the vertical middle of the box."""
        return self.origin_y + (self.height - 1) // 2

    @property
    def bottom_row(self) -> int:
        """Row of the lower border."""
        return self.origin_y + self.height - 1

    @property
    def first_text_column(self) -> int:
        return self.origin_x + 1


class LineEditor:
    """Editable buffer plus a cursor expressed as an absolute screen column."""

    def __init__(self, geometry: EditorGeometry, content: str = "", title: str = DEFAULT_TITLE) -> None:
        self.geometry = geometry
        self.title = title
        self.content = content
        # Offset into ``content``; 0 is before the first character.
        self._offset = len(content)
        self.outcome = EditorOutcome.CONTINUE
        self._bindings = KeyComboRegistry().register_bindings(
            KeyComboBinding(("BACKSPACE",), self.delete_char),
            KeyComboBinding(("LEFT",), self.move_cursor_left),
            KeyComboBinding(("RIGHT",), self.move_cursor_right),
            KeyComboBinding(("ENTER",), self.confirm),
            KeyComboBinding(("CTRL_C",), self.cancel),
        )

    @property
    def edit_cursor(self) -> int:
        """Screen column where the next insert or backspace applies."""
        return self.geometry.first_text_column + self._offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def finished(self) -> bool:
        return self.outcome is not EditorOutcome.CONTINUE

    def insert_char(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and advance past it."""
        self.content = self.content[: self._offset] + ch + self.content[self._offset :]
        self._offset += len(ch)

    def delete_char(self) -> None:
        """Remove the character left of the cursor; no-op at the start."""
        if not self.content or self._offset == 0:
            return
        self.content = self.content[: self._offset - 1] + self.content[self._offset :]
        self._offset -= 1

    def move_cursor_left(self) -> None:
        """Step left, stopping at the first text column."""
        if self._offset > 0:
            self._offset -= 1

    def move_cursor_right(self) -> None:
        """Step right, stopping just past the last character."""
        if self._offset < len(self.content):
            self._offset += 1

    def confirm(self) -> bool:
        """Finish with a commit; refused while the buffer is empty."""
        if not self.content:
            return False
        self.outcome = EditorOutcome.CONFIRMED
        return True

    def cancel(self) -> None:
        """Finish without committing."""
        self.outcome = EditorOutcome.CANCELLED

    def handle_key(self, key: str) -> EditorOutcome:
        """Apply one key token and report whether the editor is done."""
        if self.finished:
            return self.outcome
        if key in self._bindings:
            self._bindings.dispatch(key)
        elif _is_printable(key):
            self.insert_char(key)
        return self.outcome


def _is_printable(key: str) -> bool:
    return len(key) == 1 and key.isprintable()


__all__ = ["DEFAULT_TITLE", "EditorGeometry", "EditorOutcome", "LineEditor"]
