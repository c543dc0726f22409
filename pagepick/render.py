"""Frame rendering for the paged picker.

A frame always has the same height for a given page size and view, so it can
be repainted in place: the payload clears from the cursor down, prints every
row, then moves the cursor back up to the first row for the next redraw.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from .navigation import NavigationState, current_page, page_count, visible_range
from .ui_theme import PickerTheme

VIEW_ALL = "all"
HEADER_TEXT = "↑↓/← navigate; PgUp/PgDn page; Enter/Space/→ select; Ctrl-C cancel"

CLEAR_TO_END = "\033[J"
ERASE_LINE = "\033[2K"

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f]")


@dataclass(frozen=True)
class RenderFrame:
    """Rows for one redraw and the row offset of the highlighted item.

    ``highlight_row`` is informational; parking the cursor below the frame
    only needs ``height``.
    """

    lines: tuple[str, ...]
    highlight_row: int

    @property
    def height(self) -> int:
        return len(self.lines)


def shows_chrome(view: str) -> bool:
    """Only the ``all`` view prints header and footer lines."""
    return view == VIEW_ALL


def sanitize_item_text(text: str) -> str:
    """Escape control characters (bell, escapes, tabs...) so rows stay one line."""
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group()):02x}", text)


def _item_row(text: str, is_selected: bool, theme: PickerTheme) -> str:
    label = sanitize_item_text(text)
    if not is_selected:
        return f"{theme.plain_marker}{label}"
    return f"{theme.selected}{theme.selected_marker}{label}{theme.reset}"


def build_frame(
    items: Sequence[str],
    state: NavigationState,
    page_size: int,
    view: str,
    theme: PickerTheme,
) -> RenderFrame:
    """Build the rows shown for ``state``.

    The item block is always ``page_size`` rows tall; a short last page is
    padded with blank rows. The footer is only added when there is more than
    one page, which is fixed for the session, so height never changes between
    redraws.
    """
    chrome = shows_chrome(view)
    lines: list[str] = []
    if chrome:
        lines.append(f"{theme.hint}{HEADER_TEXT}{theme.reset}")
        lines.append("")

    highlight_row = len(lines)
    shown = 0
    for idx in visible_range(state, len(items), page_size):
        if idx == state.selected:
            highlight_row = len(lines)
        lines.append(_item_row(items[idx], idx == state.selected, theme))
        shown += 1
    lines.extend("" for _ in range(page_size - shown))

    total_pages = page_count(len(items), page_size)
    if chrome and total_pages > 1:
        lines.append("")
        lines.append(f"{theme.footer}Page {current_page(state, page_size)}/{total_pages}{theme.reset}")

    return RenderFrame(lines=tuple(lines), highlight_row=highlight_row)


def frame_payload(frame: RenderFrame) -> str:
    """Return the terminal payload that paints ``frame`` and rewinds to its top."""
    out = [CLEAR_TO_END]
    for line in frame.lines:
        out.append(f"\r{ERASE_LINE}{line}\r\n")
    if frame.height:
        out.append(f"\033[{frame.height}A")
    return "".join(out)


def park_payload(frame: RenderFrame) -> str:
    """Return the payload moving the cursor from the frame top to just below it.

    Depends only on ``frame.height``, wherever the highlighted row is.
    """
    if not frame.height:
        return "\r"
    return f"\r\033[{frame.height}B"


__all__ = [
    "HEADER_TEXT",
    "RenderFrame",
    "VIEW_ALL",
    "build_frame",
    "frame_payload",
    "park_payload",
    "sanitize_item_text",
    "shows_chrome",
]
