"""Domain model for sized directory listings.

This package contains non-UI primitives:
- entry datatypes tagged as file or directory
- recursive size aggregation and child listing
- the fixed display ordering
"""

from __future__ import annotations

from .types import Entry, EntryKind, display_text
from .fs import aggregate_directory_size, list_entries
from .ordering import entry_sort_key, sort_entries

__all__ = [
    "Entry",
    "EntryKind",
    "display_text",
    "aggregate_directory_size",
    "list_entries",
    "entry_sort_key",
    "sort_entries",
]
