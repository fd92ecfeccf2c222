"""Cursor and scroll state for a list rendered into a bounded viewport.

``cursor_row`` is 1-based within the viewport and ``scroll_offset`` indexes
the first rendered entry. ``absolute_index`` is the only place the two are
combined into a list index.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ViewState:
    """Viewport position over a list of ``entry_count`` items."""

    entry_count: int = 0
    viewport_rows: int = 1
    cursor_row: int = 1
    scroll_offset: int = 0
    visible_count: int = 0

    def __post_init__(self) -> None:
        """Normalize constructor values into a consistent layout."""
        self.relayout()

    def reset(self, entry_count: int) -> None:
        """Point at the first entry of a freshly loaded list."""
        self.entry_count = max(0, entry_count)
        self.scroll_offset = 0
        self.cursor_row = 1
        self.relayout()

    def resize(self, viewport_rows: int) -> None:
        """Apply a new viewport height while keeping the same entry selected."""
        self.viewport_rows = max(1, viewport_rows)
        self.relayout()

    def relayout(self) -> None:
        """Recompute ``visible_count`` around the selected entry.

        Runs on every repaint. A grown viewport pulls ``scroll_offset`` back so
        no rows are wasted below the list; a shrunk one scrolls forward so the
        selected entry stays on screen.
        """
        self.viewport_rows = max(1, self.viewport_rows)
        selected = self.absolute_index()
        if selected is None:
            self.scroll_offset = 0
            self.cursor_row = 1
            self.visible_count = 0
            return
        selected = max(0, min(selected, self.entry_count - 1))
        max_scroll = max(0, self.entry_count - self.viewport_rows)
        self.scroll_offset = max(0, min(self.scroll_offset, max_scroll, selected))
        if selected - self.scroll_offset >= self.viewport_rows:
            self.scroll_offset = selected - self.viewport_rows + 1
        self.cursor_row = selected - self.scroll_offset + 1
        self.visible_count = min(self.entry_count - self.scroll_offset, self.viewport_rows)

    def absolute_index(self) -> int | None:
        """Return the list index under the cursor, or ``None`` for an empty list."""
        if self.entry_count <= 0:
            return None
        return self.scroll_offset + self.cursor_row - 1

    def move_up(self) -> None:
        """Move the cursor up one row, scrolling once it reaches the top row."""
        if self.cursor_row > 1:
            self.cursor_row -= 1
        elif self.scroll_offset > 0:
            self.scroll_offset -= 1
        self.relayout()

    def move_down(self) -> None:
        """Move the cursor down one row, scrolling once it reaches the last row."""
        if self.cursor_row < self.visible_count:
            self.cursor_row += 1
        elif self.scroll_offset + self.visible_count < self.entry_count:
            # Scroll only while entries remain below the viewport.
            self.scroll_offset += 1
        self.relayout()

    def jump_to_top(self) -> None:
        """Select the first entry of the list."""
        self.scroll_offset = 0
        self.cursor_row = 1
        self.relayout()

    def jump_to_bottom(self) -> None:
        """Select the last rendered row; the scroll position is kept."""
        self.cursor_row = max(1, self.visible_count)
        self.relayout()

    def visible_range(self) -> range:
        """Return list indexes rendered in the viewport, top to bottom."""
        return range(self.scroll_offset, self.scroll_offset + self.visible_count)


__all__ = ["ViewState"]
