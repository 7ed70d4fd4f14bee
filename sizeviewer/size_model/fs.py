"""Filesystem scanning and size aggregation for directory listings."""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..errors import UnsupportedEntryTypeError
from .types import Entry, EntryKind

logger = logging.getLogger(__name__)


def _directory_identity(path: Path, st: os.stat_result) -> tuple[int, int] | None:
    """Return ``(st_dev, st_ino)`` for a directory, or ``None`` when unknown.

    ``os.scandir`` leaves inode numbers zeroed on some platforms; those are
    re-read with ``lstat`` before giving up.
    """
    if st.st_ino == 0:
        st = os.lstat(path)
    if st.st_ino == 0:
        return None
    return (st.st_dev, st.st_ino)


def _unsupported(path: Path, strict: bool) -> None:
    """Apply the shared unsupported-entry policy to ``path``."""
    if strict:
        raise UnsupportedEntryTypeError(path)
    logger.debug("skipping unsupported entry %s", path)


def aggregate_directory_size(path: Path | str, *, strict: bool = False) -> int:
    """Return the total byte size of every regular file below ``path``.

    Symlinks are never followed. Directories are walked from an explicit
    work stack, and a directory identity reached twice within one call is
    counted once. Any ``OSError`` aborts the whole aggregation.
    """
    root = Path(path)
    root_identity = _directory_identity(root, os.stat(root))
    pending: list[tuple[Path, tuple[int, int] | None]] = [(root, root_identity)]
    visited: set[tuple[int, int]] = set()
    total = 0

    while pending:
        directory, identity = pending.pop()
        if identity is not None:
            if identity in visited:
                logger.debug("directory %s already counted, skipping", directory)
                continue
            visited.add(identity)

        with os.scandir(directory) as entries:
            for child in entries:
                child_path = Path(child.path)
                child_stat = child.stat(follow_symlinks=False)
                mode = child_stat.st_mode
                if stat.S_ISREG(mode):
                    total += child_stat.st_size
                elif stat.S_ISDIR(mode):
                    pending.append((child_path, _directory_identity(child_path, child_stat)))
                else:
                    _unsupported(child_path, strict)

    logger.debug("aggregated %s: %d bytes", root, total)
    return total


def list_entries(directory: Path | str, *, strict: bool = False) -> list[Entry]:
    """List immediate children of ``directory`` with their sizes.

    Files carry their own length and directories their aggregated total.
    Children keep ``os.scandir`` order; see ``sort_entries`` for display order.
    """
    directory = Path(directory)
    listed: list[Entry] = []
    with os.scandir(directory) as entries:
        for child in entries:
            child_path = Path(child.path)
            child_stat = child.stat(follow_symlinks=False)
            mode = child_stat.st_mode
            if stat.S_ISREG(mode):
                listed.append(Entry(kind=EntryKind.FILE, path=child_path, size=child_stat.st_size))
            elif stat.S_ISDIR(mode):
                size = aggregate_directory_size(child_path, strict=strict)
                listed.append(Entry(kind=EntryKind.DIRECTORY, path=child_path, size=size))
            else:
                _unsupported(child_path, strict)

    logger.debug("listed %d entries in %s", len(listed), directory)
    return listed


__all__ = [
    "aggregate_directory_size",
    "list_entries",
]
