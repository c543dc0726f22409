"""Main interactive event loop for the picker.

Each iteration paints one frame, blocks for one key, and applies it.
The loop ends on a commit or cancel key; state changes live in
``pagepick.navigation`` and painting lives in ``pagepick.render``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..input import read_key
from ..navigation import NAVIGATION_COMMANDS, NavigationState
from ..render import RenderFrame, build_frame, frame_payload, park_payload
from ..selection import Commitment
from ..ui_theme import PickerTheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)

STATUS_COMMITTED = "committed"
STATUS_CANCELLED = "cancelled"

KEY_COMMANDS: dict[str, str] = {
    "UP": "up",
    "DOWN": "down",
    "LEFT": "left",
    "PAGE_UP": "page_up",
    "PAGE_DOWN": "page_down",
}
COMMIT_KEYS = frozenset({"ENTER_CR", "ENTER_LF", "RIGHT", " "})
# An empty token means stdin hit EOF; no further key can ever arrive.
CANCEL_KEYS = frozenset({"CTRL_C", ""})


@dataclass(frozen=True)
class PickerSettings:
    """Session-wide display options, fixed before the loop starts."""

    page_size: int
    view: str
    theme: PickerTheme


@dataclass(frozen=True)
class LoopOutcome:
    """Terminal status of the loop plus the state it ended in."""

    status: str
    state: NavigationState

    @property
    def committed(self) -> bool:
        return self.status == STATUS_COMMITTED

    def commitment(self, items: Sequence[str]) -> Commitment | None:
        """Return the committed item, or ``None`` for a cancelled session."""
        if not self.committed:
            return None
        return Commitment(value=items[self.state.selected], number=self.state.selected + 1)


def apply_key(key: str, state: NavigationState, item_count: int, page_size: int) -> NavigationState:
    """Return the state after a navigation key; other keys leave it unchanged."""
    command = KEY_COMMANDS.get(key)
    if command is None:
        return state
    return NAVIGATION_COMMANDS[command](state, item_count, page_size)


def run_main_loop(
    items: Sequence[str],
    state: NavigationState,
    settings: PickerSettings,
    terminal: TerminalController,
    stdin_fd: int,
    key_reader: Callable[[int], str] = read_key,
) -> LoopOutcome:
    """Run the picker until a commit or cancel key arrives.

    The caller owns raw mode. On every exit path, exceptions included, the
    cursor is parked on the line below the last painted frame.
    """
    frame: RenderFrame | None = None
    try:
        while True:
            frame = build_frame(items, state, settings.page_size, settings.view, settings.theme)
            terminal.write(frame_payload(frame))

            key = key_reader(stdin_fd)
            if key in COMMIT_KEYS:
                logger.debug("committed item %d", state.selected)
                return LoopOutcome(status=STATUS_COMMITTED, state=state)
            if key in CANCEL_KEYS:
                logger.debug("cancelled by %s", key or "EOF")
                return LoopOutcome(status=STATUS_CANCELLED, state=state)
            state = apply_key(key, state, len(items), settings.page_size)
    finally:
        if frame is not None:
            terminal.write(park_payload(frame))
