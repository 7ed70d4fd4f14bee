"""Command-line front door for sizeviewer.

Parses CLI options, merges them over the config file, and validates the
starting directory. Then dispatches into the interactive browsing loop.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import config
from .render import DEFAULT_BAR_WIDTH
from .runtime import SessionOptions, print_listing, run_session
from .ui_theme import available_theme_names, resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _configure_logging(log_file: str | None) -> None:
    """Send debug logs to ``log_file``; without one, logging stays unconfigured."""
    if log_file is None:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizeviewer",
        description="Browse a directory tree sorted by disk usage.",
    )
    parser.add_argument("path", help="Directory to analyze.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--color",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Enable or disable color output (default: config, else enabled).",
    )
    parser.add_argument(
        "--bar-width",
        type=_positive_int,
        default=None,
        help=f"Length of the largest entry's bar (default: {DEFAULT_BAR_WIDTH}).",
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Fail on entries that are neither files nor directories instead of skipping them.",
    )
    parser.add_argument("--nopager", action="store_true", help="Print the listing once and exit.")
    parser.add_argument("--log-file", metavar="PATH", default=None, help="Write debug logs to PATH.")
    return parser


def session_options_from_args(args: argparse.Namespace) -> SessionOptions:
    """Merge parsed flags over config-file values over built-in defaults."""
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    no_color = not args.color if args.color is not None else config.load_no_color()
    bar_width = args.bar_width or config.load_bar_width() or DEFAULT_BAR_WIDTH
    return SessionOptions(
        theme=resolve_theme(theme_name, no_color=no_color),
        bar_width=bar_width,
        strict=args.strict if args.strict is not None else config.load_strict(),
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and browse the given directory.

    A missing path is a usage error (argparse exits with status 2). A path
    that is not a directory exits with a message; listing failures exit 1.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_file)

    path = Path(args.path)
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")

    options = session_options_from_args(args)
    if args.nopager:
        status = print_listing(path, options)
    else:
        status = run_session(path, options)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
