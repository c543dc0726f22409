"""Item source: turn a newline-delimited text file into picker entries."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8 (dropping a leading BOM), then latin-1, which accepts any
    byte sequence. ``OSError`` propagates.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def parse_items(text: str, reverse: bool = False) -> list[str]:
    """Split ``text`` into right-trimmed, non-empty lines, optionally reversed."""
    items = [line.rstrip() for line in text.splitlines()]
    items = [item for item in items if item]
    if reverse:
        items.reverse()
    return items


def load_items(path: Path, reverse: bool = False) -> list[str]:
    items = parse_items(read_text(path), reverse=reverse)
    logger.debug("loaded %d items from %s (reverse=%s)", len(items), path, reverse)
    return items


__all__ = ["load_items", "parse_items", "read_text"]
