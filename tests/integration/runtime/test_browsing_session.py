"""End-to-end browsing loop scenarios with scripted input.

Runs ``run_session`` against real temporary trees and inspects each
rendered screen between clears.
"""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from sizeviewer.errors import UnsupportedEntryTypeError
from sizeviewer.prompt import DEFAULT_PROMPT
from sizeviewer.runtime import EXIT_MESSAGE, INVALID_CHOICE_MESSAGE, SessionOptions, run_session
from sizeviewer.ui_theme import PLAIN_THEME

CLEAR = "<clear>"


class _RecordingTerminal:
    def __init__(self, out: list[str]) -> None:
        self.out = out

    def clear_screen(self) -> None:
        self.out.append(CLEAR)


class _Session:
    def __init__(self, start: Path, lines: list[str], *, strict: bool = False) -> None:
        self.out: list[str] = []
        pending = list(lines)

        def read_line() -> str:
            if not pending:
                raise EOFError
            return pending.pop(0)

        self.status = run_session(
            start,
            SessionOptions(theme=PLAIN_THEME, bar_width=10, strict=strict),
            read_line=read_line,
            write=self.out.append,
            terminal=_RecordingTerminal(self.out),
        )

    def screens(self) -> list[list[str]]:
        """Return rendered screens as plain lines, prompts stripped."""
        text = "".join(self.out).replace(DEFAULT_PROMPT, "")
        return [chunk.splitlines() for chunk in text.split(CLEAR)[1:]]


def _build_scenario_tree(root: Path) -> None:
    (root / "a.txt").write_bytes(b"x" * 100)
    (root / "b.txt").write_bytes(b"x" * 500)
    (root / "sub").mkdir()
    (root / "sub" / "inner.bin").write_bytes(b"x" * 1000)


class BrowsingSessionTests(unittest.TestCase):
    def test_descend_into_directory_and_back(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_scenario_tree(root)

            session = _Session(root, ["1\n", "-1\n", "0\n"])

            self.assertEqual(session.status, 0)
            first, inside, back, farewell = session.screens()
            self.assertEqual(
                first,
                [
                    f"Analyzing entries in directory: {root}",
                    "",
                    "1   D [==========] sub [1000 B]",
                    "2   F [=====] b.txt [500 B]",
                    "3   F [=] a.txt [100 B]",
                    "",
                    "Total entries: 3",
                    "",
                ],
            )
            self.assertEqual(inside[0], f"Analyzing entries in directory: {root / 'sub'}")
            self.assertIn("1   F [==========] inner.bin [1000 B]", inside)
            self.assertEqual(back, first)
            self.assertEqual(farewell, [EXIT_MESSAGE])

    def test_ascend_past_session_root_stays_in_place(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_scenario_tree(root)

            session = _Session(root, ["1\n", "-1\n", "-1\n", "-1\n", "0\n"])

            screens = session.screens()
            headings = [screen[0] for screen in screens[:-1]]
            self.assertEqual(
                headings,
                [f"Analyzing entries in directory: {path}" for path in (root, root / "sub", root, root, root)],
            )

    def test_selecting_file_redraws_same_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_scenario_tree(root)

            session = _Session(root, ["3\n", "0\n"])

            first, second, _farewell = session.screens()
            self.assertEqual(first, second)

    def test_empty_directory_reports_invalid_choices(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)

            session = _Session(root, ["1\n", "-5\n", "0\n"])

            first, second, third, _farewell = session.screens()
            self.assertIn("Total entries: 0", first)
            self.assertNotIn(INVALID_CHOICE_MESSAGE, first)
            self.assertIn(INVALID_CHOICE_MESSAGE, second)
            self.assertIn(INVALID_CHOICE_MESSAGE, third)
            self.assertEqual(second[0], f"Analyzing entries in directory: {root}")

    def test_non_integer_input_reprompts_without_redraw(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)

            session = _Session(root, ["abc\n", "0\n"])

            first, _farewell = session.screens()
            self.assertIn("Invalid input. Please enter a valid number.", first)

    def test_end_of_input_exits_cleanly(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            session = _Session(Path(tmp), [])

            self.assertEqual(session.status, 0)
            self.assertEqual(session.screens()[-1], [EXIT_MESSAGE])

    def test_interrupt_while_listing_exits_cleanly(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_scenario_tree(root)

            with mock.patch("sizeviewer.runtime.list_entries", side_effect=KeyboardInterrupt):
                session = _Session(root, ["0\n"])

            self.assertEqual(session.status, 0)
            interrupted, farewell = session.screens()
            self.assertNotIn("Total entries: 3", interrupted)
            self.assertEqual(farewell, [EXIT_MESSAGE])

    def test_listing_failure_ends_session_with_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            _build_scenario_tree(root)

            with mock.patch(
                "sizeviewer.runtime.list_entries",
                side_effect=[PermissionError(13, "Permission denied", str(root / "sub"))],
            ):
                session = _Session(root, ["0\n"])

            self.assertEqual(session.status, 1)
            (only_screen,) = session.screens()
            self.assertEqual(len(only_screen), 1)
            self.assertTrue(only_screen[0].startswith("Error: "))
            self.assertIn("Permission denied", only_screen[0])

    def test_strict_mode_failure_is_fatal(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with mock.patch(
                "sizeviewer.runtime.list_entries",
                side_effect=UnsupportedEntryTypeError(root / "fifo"),
            ):
                session = _Session(root, ["0\n"], strict=True)

            self.assertEqual(session.status, 1)
            self.assertIn(f"Error: Unsupported entry type: {root / 'fifo'}", session.screens()[0])


if __name__ == "__main__":
    unittest.main()
