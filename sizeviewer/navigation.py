"""Navigation state and choice transitions for one browsing session.

This module has no I/O or UI concerns. It maps an integer choice against the
current sorted listing onto a new ``NavigationState``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .size_model import Entry

logger = logging.getLogger(__name__)

ASCEND_CHOICE = -1
QUIT_CHOICE = 0


class ChoiceOutcome(Enum):
    """Result of applying one user choice to the navigation state."""

    ASCENDED = "ascended"
    STAYED = "stayed"
    QUIT = "quit"
    DESCENDED = "descended"
    FILE_SELECTED = "file_selected"
    INVALID = "invalid"


@dataclass
class NavigationState:
    """Current directory plus the stack of directories to ascend back to."""

    current_directory: Path
    history: list[Path] = field(default_factory=list)
    exited: bool = False

    @classmethod
    def start(cls, start_path: Path) -> NavigationState:
        """Initial browsing state: ``history`` holds the start path itself."""
        return cls(current_directory=start_path, history=[start_path])

    def ascend(self) -> bool:
        """Pop the history stack into ``current_directory``.

        Returns ``False`` (and changes nothing) once history is empty.
        """
        if not self.history:
            return False
        self.current_directory = self.history.pop()
        return True

    def descend(self, target: Path) -> None:
        """Enter ``target``, remembering the current directory.

        The current directory is not pushed again when it already tops the
        stack, so one ascend always leaves the directory just entered.
        """
        if not self.history or self.history[-1] != self.current_directory:
            self.history.append(self.current_directory)
        self.current_directory = target


def apply_choice(state: NavigationState, choice: int, listing: Sequence[Entry]) -> ChoiceOutcome:
    """Apply ``choice`` against ``listing`` and mutate ``state`` in place.

    ``-1`` ascends, ``0`` quits, ``1..len(listing)`` selects an entry and any
    other value is reported as ``INVALID`` without touching the state.
    """
    if choice == ASCEND_CHOICE:
        if state.ascend():
            logger.debug("ascended to %s", state.current_directory)
            return ChoiceOutcome.ASCENDED
        return ChoiceOutcome.STAYED

    if choice == QUIT_CHOICE:
        state.exited = True
        return ChoiceOutcome.QUIT

    if 1 <= choice <= len(listing):
        entry = listing[choice - 1]
        if not entry.is_dir:
            return ChoiceOutcome.FILE_SELECTED
        state.descend(entry.path)
        logger.debug("descended into %s", state.current_directory)
        return ChoiceOutcome.DESCENDED

    logger.debug("invalid choice %d for %d entries", choice, len(listing))
    return ChoiceOutcome.INVALID


__all__ = [
    "ASCEND_CHOICE",
    "QUIT_CHOICE",
    "ChoiceOutcome",
    "NavigationState",
    "apply_choice",
]
