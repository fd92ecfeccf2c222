"""Filesystem collaborators used by the browser.

Listing, path resolution, and rename are the only places that touch disk.
Failures are translated into the package error types at this boundary.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import DirectoryUnreadable, RenameFailed


@dataclass(frozen=True)
class DirectoryChild:
    """One raw child row as enumerated by the filesystem."""

    name: str
    path: Path
    is_dir: bool


def _error_reason(exc: OSError) -> str:
    return exc.strerror or exc.__class__.__name__


def list_children(directory: Path, show_hidden: bool = True) -> list[DirectoryChild]:
    """Return immediate children of ``directory`` in enumeration order.

    ``is_dir`` follows symlinks so a link to a directory can be entered.
    Raises ``DirectoryUnreadable`` when the directory cannot be scanned.
    """
    children: list[DirectoryChild] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                children.append(DirectoryChild(name=name, path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        raise DirectoryUnreadable(directory, _error_reason(exc)) from exc
    return children


def canonicalize(path: Path) -> Path:
    """Return the absolute, symlink-resolved form of ``path``."""
    try:
        return path.resolve(strict=True)
    except OSError as exc:
        raise DirectoryUnreadable(path, _error_reason(exc)) from exc


def parent_of(path: Path) -> Path | None:
    """Return the parent directory, or ``None`` at the filesystem root."""
    parent = path.parent
    if parent == path:
        return None
    return parent


def _path_is_present(path: Path) -> bool:
    """Return whether anything, including a dangling symlink, sits at ``path``."""
    try:
        os.lstat(path)
    except FileNotFoundError:
        return False
    return True


def rename_path(source: Path, target: Path) -> None:
    """Rename ``source`` to ``target`` without overwriting an existing entry."""
    try:
        if _path_is_present(target):
            raise RenameFailed(source, target, "target already exists")
        os.rename(source, target)
    except OSError as exc:
        raise RenameFailed(source, target, _error_reason(exc)) from exc


@dataclass(frozen=True)
class Filesystem:
    """Bundle of filesystem operations injected into ``Browser``.

    Tests substitute recording fakes for individual operations.
    """

    show_hidden: bool = True

    def list_children(self, directory: Path) -> list[DirectoryChild]:
        return list_children(directory, show_hidden=self.show_hidden)

    def canonicalize(self, path: Path) -> Path:
        return canonicalize(path)

    def parent_of(self, path: Path) -> Path | None:
        return parent_of(path)

    def rename(self, source: Path, target: Path) -> None:
        rename_path(source, target)


__all__ = [
    "DirectoryChild",
    "Filesystem",
    "canonicalize",
    "list_children",
    "parent_of",
    "rename_path",
]
