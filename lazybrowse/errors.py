"""Error taxonomy for the browser runtime.

Each failure class maps to one propagation policy in the runtime: startup
errors end the program, navigation and rename errors become status messages.
"""

from __future__ import annotations

from pathlib import Path


class BrowserError(Exception):
    """Base class for all lazybrowse failures."""


class DirectoryUnreadable(BrowserError):
    """A directory could not be listed (missing, not a directory, no permission)."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read {path}: {reason}")
        self.path = path
        self.reason = reason


class RenameFailed(BrowserError):
    """A rename request was rejected by validation or by the filesystem."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        super().__init__(f"cannot rename {source.name}: {reason}")
        self.source = source
        self.target = target
        self.reason = reason


class TerminalUnavailable(BrowserError):
    """Raw mode could not be entered on the controlling terminal."""


__all__ = [
    "BrowserError",
    "DirectoryUnreadable",
    "RenameFailed",
    "TerminalUnavailable",
]
