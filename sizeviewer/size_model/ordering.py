"""Display ordering for sized listings."""

from __future__ import annotations

from collections.abc import Iterable

from .types import Entry, EntryKind

_KIND_RANK = {
    EntryKind.DIRECTORY: 0,
    EntryKind.FILE: 1,
}


def entry_sort_key(entry: Entry) -> tuple[int, int]:
    """Directories first, then larger sizes first; unknown size counts as 0."""
    return (_KIND_RANK[entry.kind], -(entry.size or 0))


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Return entries in display order without mutating the input.

    The sort is stable, so equal keys keep their listing order.
    """
    return sorted(entries, key=entry_sort_key)


__all__ = [
    "entry_sort_key",
    "sort_entries",
]
