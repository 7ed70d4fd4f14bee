"""Interactive browsing loop.

Each iteration re-lists the current directory from scratch, renders it,
reads one integer choice and applies it to the navigation state. Listing
failures end the session; bad choices are reported on the next screen.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError, SizeViewerError
from .navigation import ChoiceOutcome, NavigationState, apply_choice
from .prompt import read_integer
from .render import DEFAULT_BAR_WIDTH, render_screen
from .size_model import Entry, list_entries, sort_entries
from .terminal import TerminalController
from .ui_theme import DEFAULT_THEME, UITheme, styled

logger = logging.getLogger(__name__)

INVALID_CHOICE_MESSAGE = "Invalid choice. Please enter a valid number."
EXIT_MESSAGE = "Exiting the program."


@dataclass(frozen=True)
class SessionOptions:
    """Display and scanning options shared by every loop iteration."""

    theme: UITheme = DEFAULT_THEME
    bar_width: int = DEFAULT_BAR_WIDTH
    strict: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.bar_width, bool) or not isinstance(self.bar_width, int) or self.bar_width <= 0:
            raise ConfigError(f"bar width must be a positive integer, got {self.bar_width!r}")


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _default_terminal() -> TerminalController:
    """Bind to the real stdout descriptor when there is one."""
    try:
        fd = sys.stdout.fileno()
    except (OSError, ValueError):
        fd = -1
    return TerminalController(fd)


def load_sorted_listing(directory: Path, *, strict: bool = False) -> list[Entry]:
    """List, size and order the children of ``directory``."""
    return sort_entries(list_entries(directory, strict=strict))


def _report_error(exc: Exception, options: SessionOptions, write: Callable[[str], None]) -> int:
    logger.debug("listing failed: %r", exc)
    write(styled(options.theme.error, f"Error: {exc}") + "\n")
    return 1


def print_listing(
    directory: Path,
    options: SessionOptions | None = None,
    *,
    write: Callable[[str], None] = _write_stdout,
) -> int:
    """Render ``directory`` once without prompting; returns an exit status."""
    options = options or SessionOptions()
    try:
        listing = load_sorted_listing(directory, strict=options.strict)
    except (OSError, SizeViewerError) as exc:
        return _report_error(exc, options, write)
    write(render_screen(directory, listing, theme=options.theme, bar_width=options.bar_width))
    return 0


def run_session(
    start: Path,
    options: SessionOptions | None = None,
    *,
    read_line: Callable[[], str] | None = None,
    write: Callable[[str], None] = _write_stdout,
    terminal: TerminalController | None = None,
) -> int:
    """Run the browse/choose loop from ``start`` until the user quits.

    Returns ``0`` on a normal exit (quit choice, end of input or Ctrl-C) and
    ``1`` when a directory cannot be listed.
    """
    options = options or SessionOptions()
    if terminal is None:
        terminal = _default_terminal()

    state = NavigationState.start(start)
    status = ""
    while not state.exited:
        terminal.clear_screen()
        try:
            listing = load_sorted_listing(state.current_directory, strict=options.strict)
        except (OSError, SizeViewerError) as exc:
            return _report_error(exc, options, write)
        except KeyboardInterrupt:
            write("\n")
            break

        write(
            render_screen(
                state.current_directory,
                listing,
                theme=options.theme,
                bar_width=options.bar_width,
                status=status,
            )
        )
        status = ""

        try:
            choice = read_integer(read_line=read_line, write=write)
        except (EOFError, KeyboardInterrupt):
            write("\n")
            break

        outcome = apply_choice(state, choice, listing)
        if outcome is ChoiceOutcome.INVALID:
            status = INVALID_CHOICE_MESSAGE

    terminal.clear_screen()
    write(EXIT_MESSAGE + "\n")
    return 0


__all__ = [
    "INVALID_CHOICE_MESSAGE",
    "EXIT_MESSAGE",
    "SessionOptions",
    "load_sorted_listing",
    "print_listing",
    "run_session",
]
