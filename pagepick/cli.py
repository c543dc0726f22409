"""Command-line front door for pagepick.

Parses CLI options, loads the item list, and reports load failures before the
terminal is touched. Then dispatches into the interactive picker runtime.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .items import load_items
from .runtime import run_picker
from .runtime.app import EXIT_OK, PickerOptions
from .runtime.config import load_config, load_no_color, load_page_size, load_view
from .ui_theme import resolve_theme


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pagepick",
        description="Pick one line of a text file in a paged terminal list and save the choice.",
        epilog=(
            "Exit status: 0 after a choice is saved (save errors are reported on stderr) "
            "or when the input has no items; 1 when the input file cannot be read; "
            "2 for invalid arguments; 130 when cancelled with Ctrl-C."
        ),
    )
    parser.add_argument("-i", "--input", required=True, metavar="PATH", help="File with one item per line.")
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        metavar="PATH",
        help="File receiving the chosen item ('-' prints it to stdout). Also used to restore the last choice.",
    )
    parser.add_argument(
        "-n",
        "--output-number",
        default="",
        metavar="PATH",
        help="Optional file receiving the 1-based number of the chosen item.",
    )
    parser.add_argument("-r", "--reverse", action="store_true", help="Reverse item order after loading.")
    parser.add_argument(
        "-p",
        "--page-size",
        "--page_size",
        dest="page_size",
        type=_positive_int,
        default=None,
        help="Items per page (default: 10).",
    )
    parser.add_argument(
        "-v",
        "--view",
        default=None,
        help="'all' shows key hints and page counter; any other value hides them (default: all).",
    )
    parser.add_argument("--no-color", action="store_true", help="Highlight the selection without color.")
    parser.add_argument("--log-file", default=None, metavar="PATH", help="Write debug log to PATH.")
    return parser


def _configure_logging(log_file: str | None) -> None:
    if not log_file:
        return
    logging.basicConfig(
        filename=log_file,
        level=logging.DEBUG,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and run one picker session.

    Exits non-zero when the input cannot be read and with 130 when the user
    cancels; a committed or empty list returns normally.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_file)

    input_path = Path(args.input)
    try:
        items = load_items(input_path, reverse=args.reverse)
    except OSError as exc:
        raise SystemExit(f"Cannot read input file: {input_path}: {exc.strerror or exc}") from exc

    config = load_config()
    options = PickerOptions(
        input_path=str(input_path),
        output=args.output,
        output_number=args.output_number,
        page_size=args.page_size if args.page_size is not None else load_page_size(config),
        view=args.view if args.view is not None else load_view(config),
        theme=resolve_theme(no_color=args.no_color or load_no_color(config)),
    )
    exit_code = run_picker(items, options)
    if exit_code != EXIT_OK:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
