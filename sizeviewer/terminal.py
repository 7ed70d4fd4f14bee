"""Terminal control helpers for the browsing session.

Only screen clearing is needed: each loop iteration redraws from the top.
Writes go straight to the output file descriptor, bypassing ``sys.stdout``
buffering, so callers flush their own text before clearing.
"""

from __future__ import annotations

import os

CLEAR_SCREEN = b"\x1b[2J\x1b[H"


class TerminalController:
    """Clear the screen on a TTY; do nothing when output is redirected."""

    def __init__(self, stdout_fd: int) -> None:
        self.stdout_fd = stdout_fd
        try:
            self.is_tty = os.isatty(stdout_fd)
        except OSError:
            self.is_tty = False

    def clear_screen(self) -> None:
        if not self.is_tty:
            return
        # Erase the whole display and home the cursor.
        os.write(self.stdout_fd, CLEAR_SCREEN)
