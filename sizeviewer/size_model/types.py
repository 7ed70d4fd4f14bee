"""Domain datatypes for sized directory listings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path


def display_text(raw: str | os.PathLike[str]) -> str:
    """Return printable text for a filesystem name.

    Undecodable bytes, which ``os.scandir`` hands back as lone surrogates,
    become U+FFFD so the result always encodes as UTF-8.
    """
    return os.fsencode(raw).decode("utf-8", "replace")


class EntryKind(Enum):
    """Closed classification of a listed directory child."""

    DIRECTORY = "D"
    FILE = "F"

    @property
    def letter(self) -> str:
        return self.value


@dataclass(frozen=True)
class Entry:
    """One immediate directory child annotated with its byte size.

    ``size`` is the file length for files and the aggregated total for
    directories; ``None`` means the size could not be determined.
    """

    kind: EntryKind
    path: Path
    size: int | None = None

    @property
    def name(self) -> str:
        return display_text(self.path.name or self.path)

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


__all__ = [
    "display_text",
    "EntryKind",
    "Entry",
]
