"""Text rendering for sized directory listings.

Produces one row per entry with index, kind letter, a proportional bar,
the base name and a human-readable size. All styling goes through the
active ``UITheme`` so ``PLAIN_THEME`` yields bare text.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from .size_model import Entry, display_text
from .ui_theme import DEFAULT_THEME, UITheme, styled

DEFAULT_BAR_WIDTH = 60
BAR_CHAR = "="
_BYTE_UNITS = ("KB", "MB", "GB", "TB")


def format_bytes(size: int) -> str:
    """Format a byte count with 1024-based units.

    Counts below 1 KB are printed as integers; larger ones get two decimals
    and stop growing at TB.
    """
    if size < 1024:
        return f"{size} B"
    value = float(size)
    for unit in _BYTE_UNITS:
        value /= 1024.0
        if value < 1024.0 or unit == _BYTE_UNITS[-1]:
            break
    return f"{value:.2f} {unit}"


def bar_length(size: int, max_size: int, bar_width: int = DEFAULT_BAR_WIDTH) -> int:
    """Return the bar length for ``size`` relative to the listing maximum."""
    if max_size <= 0:
        max_size = 1
    return int(size / max_size * bar_width)


def max_known_size(entries: Sequence[Entry]) -> int:
    """Largest known size in ``entries``; 1 when nothing is sized."""
    sizes = [entry.size for entry in entries if entry.size is not None]
    return max(sizes, default=1) or 1


def format_entry_row(
    index: int,
    entry: Entry,
    max_size: int,
    *,
    theme: UITheme | None = None,
    bar_width: int = DEFAULT_BAR_WIDTH,
) -> str:
    """Render one listing row; ``index`` is the 1-based choice number."""
    active_theme = theme or DEFAULT_THEME
    index_label = styled(active_theme.index, f"{index:<3}")
    kind_label = styled(active_theme.kind_marker, entry.kind.letter)
    name_color = active_theme.directory if entry.is_dir else active_theme.file
    name_label = styled(name_color, entry.name)
    # Listing skips unsupported children, but Entry.size stays optional.
    if entry.size is None:
        return f"{index_label} {kind_label} {name_label}"

    bar = styled(active_theme.bar, BAR_CHAR * bar_length(entry.size, max_size, bar_width))
    size_label = styled(active_theme.size, format_bytes(entry.size))
    return f"{index_label} {kind_label} [{bar}] {name_label} [{size_label}]"


def render_listing(
    entries: Sequence[Entry],
    *,
    theme: UITheme | None = None,
    bar_width: int = DEFAULT_BAR_WIDTH,
) -> list[str]:
    """Render every entry row in the given (already sorted) order."""
    max_size = max_known_size(entries)
    return [
        format_entry_row(idx, entry, max_size, theme=theme, bar_width=bar_width)
        for idx, entry in enumerate(entries, start=1)
    ]


def render_screen(
    directory: Path,
    entries: Sequence[Entry],
    *,
    theme: UITheme | None = None,
    bar_width: int = DEFAULT_BAR_WIDTH,
    status: str = "",
) -> str:
    """Render a full browsing screen: heading, rows, entry count and status."""
    active_theme = theme or DEFAULT_THEME
    out = [styled(active_theme.heading, f"Analyzing entries in directory: {display_text(directory)}"), ""]
    out.extend(render_listing(entries, theme=active_theme, bar_width=bar_width))
    out.append("")
    out.append(f"Total entries: {len(entries)}")
    if status:
        out.append(styled(active_theme.status, status))
    out.append("")
    return "\n".join(out) + "\n"


__all__ = [
    "DEFAULT_BAR_WIDTH",
    "format_bytes",
    "bar_length",
    "max_known_size",
    "format_entry_row",
    "render_listing",
    "render_screen",
]
