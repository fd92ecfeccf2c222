"""Directory listing model: entries and their directories-first ordering."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from .fs import DirectoryChild


@dataclass
class DirectoryEntry:
    """One listed file or directory.

    ``name`` and ``path`` only change together, through ``rename_to``.
    """

    name: str
    path: Path
    is_dir: bool

    def renamed_path(self, new_name: str) -> Path:
        """Return this entry's path with the final segment replaced."""
        return self.path.with_name(new_name)

    def rename_to(self, new_name: str) -> None:
        self.path = self.renamed_path(new_name)
        self.name = new_name


def directories_first(entries: Iterable[DirectoryEntry]) -> list[DirectoryEntry]:
    """Stable partition: directories before files, enumeration order kept."""
    return sorted(entries, key=lambda entry: 0 if entry.is_dir else 1)


@dataclass
class Listing:
    """Entries of ``current_directory`` as of the last successful read."""

    current_directory: Path
    entries: list[DirectoryEntry] = field(default_factory=list)

    @classmethod
    def from_children(cls, directory: Path, children: Iterable[DirectoryChild]) -> Listing:
        entries = [DirectoryEntry(name=child.name, path=child.path, is_dir=child.is_dir) for child in children]
        return cls(current_directory=directory, entries=directories_first(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def entry_at(self, index: int | None) -> DirectoryEntry | None:
        if index is None or not 0 <= index < len(self.entries):
            return None
        return self.entries[index]


__all__ = ["DirectoryEntry", "Listing", "directories_first"]
