"""Selection store: persist the committed choice and restore it next run.

The output file holds exactly one value, the chosen item with trailing
whitespace trimmed. Restoring matches that value against the freshly loaded
items; anything unreadable or unmatched simply means "no prior selection".
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

logger = logging.getLogger(__name__)

STDOUT_TARGET = "-"


@dataclass(frozen=True)
class Commitment:
    """Committed item text and its 1-based position in the list."""

    value: str
    number: int


def writes_to_stdout(output: str) -> bool:
    return output == STDOUT_TARGET


def save_selected(path: Path, value: str) -> None:
    path.write_text(value.rstrip(), encoding="utf-8")


def restore_selected(output: str, items: Sequence[str]) -> int | None:
    """Return the index of the previously saved value in ``items``, if any."""
    if not output or writes_to_stdout(output):
        return None
    path = Path(output)
    if not path.is_file():
        return None
    try:
        value = path.read_text(encoding="utf-8", errors="replace").rstrip()
    except OSError as exc:
        logger.debug("cannot read previous selection from %s: %s", path, exc)
        return None
    for idx, item in enumerate(items):
        if item == value:
            logger.debug("restored selection %d from %s", idx, path)
            return idx
    logger.debug("previous selection %r no longer in item list", value)
    return None


def commit_selection(
    commitment: Commitment,
    output: str,
    output_number: str,
    stdout: TextIO,
) -> list[str]:
    """Write the committed value and optional index, collecting failure messages.

    Each target is written independently so one failure never skips the other.
    """
    errors: list[str] = []
    if writes_to_stdout(output):
        stdout.write(commitment.value.rstrip() + "\n")
        stdout.flush()
    else:
        try:
            save_selected(Path(output), commitment.value)
        except OSError as exc:
            logger.warning("failed to save selection to %s: %s", output, exc)
            errors.append(f"Failed to save selection to {output}: {exc}")

    if output_number:
        try:
            save_selected(Path(output_number), str(commitment.number))
        except OSError as exc:
            logger.warning("failed to save selection number to %s: %s", output_number, exc)
            errors.append(f"Failed to save selection number to {output_number}: {exc}")
    return errors


__all__ = [
    "Commitment",
    "STDOUT_TARGET",
    "commit_selection",
    "restore_selected",
    "save_selected",
    "writes_to_stdout",
]
