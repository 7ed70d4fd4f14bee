"""Line-based integer prompting for the browsing loop."""

from __future__ import annotations

import sys
from collections.abc import Callable

DEFAULT_PROMPT = "Please enter the number of the directory you want to analyze (-1 to go back): "
INVALID_INPUT_MESSAGE = "Invalid input. Please enter a valid number."


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def read_integer(
    prompt: str = DEFAULT_PROMPT,
    *,
    read_line: Callable[[], str] | None = None,
    write: Callable[[str], None] = _write_stdout,
) -> int:
    """Prompt until one line parses as an integer and return it.

    ``read_line`` returns a single input line and raises ``EOFError`` at end
    of input; it defaults to ``sys.stdin.readline``. Bad lines are reported
    and the prompt repeats.
    """
    if read_line is None:
        read_line = _read_stdin_line
    while True:
        write(prompt)
        raw = read_line()
        try:
            return int(raw.strip())
        except ValueError:
            write(INVALID_INPUT_MESSAGE + "\n")


def _read_stdin_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError
    return line


__all__ = [
    "DEFAULT_PROMPT",
    "INVALID_INPUT_MESSAGE",
    "read_integer",
]
