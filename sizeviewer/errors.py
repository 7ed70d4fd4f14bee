"""Exception types raised by sizeviewer.

Filesystem failures are surfaced as plain ``OSError`` and are not wrapped.
These classes cover the failures that have no natural builtin counterpart.
"""

from __future__ import annotations

from pathlib import Path


class SizeViewerError(Exception):
    """Base class for sizeviewer-specific failures."""


class UnsupportedEntryTypeError(SizeViewerError):
    """A directory child is neither a regular file nor a directory."""

    def __init__(self, path: Path) -> None:
        from .size_model.types import display_text

        self.path = path
        super().__init__(f"Unsupported entry type: {display_text(path)}")


class ConfigError(SizeViewerError):
    """A configuration or command-line value is out of range."""


__all__ = [
    "SizeViewerError",
    "UnsupportedEntryTypeError",
    "ConfigError",
]
