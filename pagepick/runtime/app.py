"""Picker session bootstrap.

Restores the previous choice, runs the interactive loop inside raw mode, and
persists the committed item once the terminal is back to normal.
"""

from __future__ import annotations

import contextlib
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from ..navigation import initial_state
from ..selection import commit_selection, restore_selected
from ..ui_theme import PickerTheme
from .loop import PickerSettings, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CANCELLED = 130
CONTROLLING_TTY = "/dev/tty"


@dataclass(frozen=True)
class PickerOptions:
    """Resolved command-line options for one picker session."""

    input_path: str
    output: str
    output_number: str
    page_size: int
    view: str
    theme: PickerTheme


@contextlib.contextmanager
def _frame_fd(stdout: TextIO, stderr: TextIO):
    """Yield the fd frames are drawn on.

    Prefers stdout, then stderr, then the controlling terminal, so redirected
    streams (``-o -`` inside ``$(...)``, ``2>/dev/null``) never hide the picker.
    """
    if stdout.isatty():
        yield stdout.fileno()
        return
    if stderr.isatty():
        yield stderr.fileno()
        return
    try:
        fd = os.open(CONTROLLING_TTY, os.O_WRONLY | os.O_NOCTTY)
    except OSError as exc:
        raise SystemExit(f"pagepick needs a terminal to draw on: {CONTROLLING_TTY}: {exc.strerror or exc}") from exc
    try:
        yield fd
    finally:
        os.close(fd)


def run_picker(
    items: Sequence[str],
    options: PickerOptions,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run one interactive session over ``items`` and return the exit code."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    if not items:
        print(f"Input file is empty: {options.input_path}", file=stderr)
        return EXIT_OK

    restored = restore_selected(options.output, items)
    state = initial_state(len(items), options.page_size, restored)
    settings = PickerSettings(page_size=options.page_size, view=options.view, theme=options.theme)

    stdin_fd = stdin.fileno()
    if not os.isatty(stdin_fd):
        raise SystemExit("pagepick needs an interactive terminal on stdin.")
    stdout.flush()
    stderr.flush()
    with _frame_fd(stdout, stderr) as frame_fd:
        terminal = TerminalController(stdin_fd=stdin_fd, stdout_fd=frame_fd)
        logger.debug("session start: %d items, page size %d, view %r", len(items), options.page_size, options.view)
        with terminal.raw_mode():
            outcome = run_main_loop(items, state, settings, terminal, stdin_fd)
    logger.debug("session end: %s at item %d", outcome.status, outcome.state.selected)

    commitment = outcome.commitment(items)
    if commitment is None:
        print("Cancelled.", file=stderr)
        return EXIT_CANCELLED

    for message in commit_selection(commitment, options.output, options.output_number, stdout):
        print(message, file=stderr)
    return EXIT_OK
