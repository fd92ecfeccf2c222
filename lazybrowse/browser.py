"""Directory browser state machine.

Reconciles the current ``Listing`` with a bounded ``ViewState`` and turns
browsing commands into state transitions. Rendering and key decoding live
elsewhere; the browser only mutates state and records status messages.
"""

from __future__ import annotations

import os
from pathlib import Path

from .errors import DirectoryUnreadable, RenameFailed
from .fs import Filesystem
from .line_editor import EditorGeometry, EditorOutcome, LineEditor
from .listing import DirectoryEntry, Listing
from .viewport import ViewState


def is_valid_entry_name(name: str) -> bool:
    """Return whether ``name`` is a single path segment."""
    if name in {"", ".", ".."} or "\x00" in name:
        return False
    return os.sep not in name and not (os.altsep and os.altsep in name)


class Browser:
    """Owns the listing, the viewport state, and the transient status line."""

    def __init__(self, filesystem: Filesystem | None = None, viewport_rows: int = 1) -> None:
        self.filesystem = filesystem if filesystem is not None else Filesystem()
        self.listing: Listing | None = None
        self.view = ViewState(viewport_rows=viewport_rows)
        self.status_message = ""
        self.status_is_error = False
        self._rename_target: DirectoryEntry | None = None

    @property
    def current_directory(self) -> Path | None:
        return None if self.listing is None else self.listing.current_directory

    @property
    def entries(self) -> list[DirectoryEntry]:
        return [] if self.listing is None else self.listing.entries

    def set_status(self, message: str, *, error: bool = False) -> None:
        self.status_message = message
        self.status_is_error = error

    def clear_status(self) -> None:
        self.status_message = ""
        self.status_is_error = False

    def set_viewport_rows(self, rows: int) -> None:
        """Apply the viewport height measured for the next repaint."""
        self.view.resize(rows)

    def load_directory(self, path: Path) -> None:
        """Read ``path`` and replace the listing, resetting cursor and scroll.

        Raises ``DirectoryUnreadable``; on failure the previous listing and
        view are left exactly as they were.
        """
        directory = self.filesystem.canonicalize(path)
        children = self.filesystem.list_children(directory)
        self.listing = Listing.from_children(directory, children)
        self.view.reset(len(self.listing))

    def _navigate(self, path: Path) -> bool:
        try:
            self.load_directory(path)
        except DirectoryUnreadable as exc:
            self.set_status(str(exc), error=True)
            return False
        return True

    def selected_index(self) -> int | None:
        return self.view.absolute_index()

    def selected_entry(self) -> DirectoryEntry | None:
        """Return the entry under the cursor, or ``None`` when nothing is listed."""
        if self.listing is None:
            return None
        return self.listing.entry_at(self.selected_index())

    def move_cursor_up(self) -> None:
        self.view.move_up()

    def move_cursor_down(self) -> None:
        self.view.move_down()

    def jump_to_top(self) -> None:
        self.view.jump_to_top()

    def jump_to_bottom(self) -> None:
        self.view.jump_to_bottom()

    def enter_selected(self) -> bool:
        """Descend into the selected directory; files are ignored."""
        entry = self.selected_entry()
        if entry is None or not entry.is_dir:
            return False
        return self._navigate(entry.path)

    def go_to_parent(self) -> bool:
        """Reload the parent directory; a no-op at the filesystem root."""
        if self.listing is None:
            return False
        parent = self.filesystem.parent_of(self.listing.current_directory)
        if parent is None:
            return False
        return self._navigate(parent)

    def begin_rename(self, geometry: EditorGeometry) -> LineEditor | None:
        """Open an editor pre-filled with the selected entry's name."""
        entry = self.selected_entry()
        if entry is None:
            return None
        self._rename_target = entry
        return LineEditor(geometry, content=entry.name, title=f"Rename {entry.name}")

    def finish_rename(self, editor: LineEditor) -> bool:
        """Commit a confirmed editor; a cancelled one changes nothing."""
        target = self._rename_target
        self._rename_target = None
        if editor.outcome is not EditorOutcome.CONFIRMED or target is None:
            return False
        return self.rename_entry(target, editor.content)

    def rename_selected(self, new_name: str) -> bool:
        entry = self.selected_entry()
        if entry is None:
            return False
        return self.rename_entry(entry, new_name)

    def rename_entry(self, entry: DirectoryEntry, new_name: str) -> bool:
        """Rename on disk, then update ``entry`` in place.

        Failures become an error status; the entry, listing, and cursor are
        untouched in that case.
        """
        if not new_name or new_name == entry.name:
            return False
        try:
            if not is_valid_entry_name(new_name):
                raise RenameFailed(entry.path, entry.path.parent / new_name, "invalid name")
            self.filesystem.rename(entry.path, entry.renamed_path(new_name))
        except RenameFailed as exc:
            self.set_status(str(exc), error=True)
            return False
        old_name = entry.name
        entry.rename_to(new_name)
        self.set_status(f"renamed {old_name} to {new_name}")
        return True


__all__ = ["Browser", "is_valid_entry_name"]
