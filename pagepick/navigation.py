"""Pagination state and navigation transitions.

This module intentionally has no UI concerns.
Every transition takes a ``NavigationState`` and returns a new one; the
selection and the page start are always moved together so the current page
keeps containing the current selection.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class NavigationState:
    """Selected item index plus the index of the first item on its page."""

    selected: int = 0
    page_start: int = 0


def _require_page_size(page_size: int) -> None:
    if page_size < 1:
        raise ValueError(f"page size must be >= 1, got {page_size}")


def page_start_for(index: int, page_size: int) -> int:
    """Return the page-aligned start of the page containing ``index``."""
    _require_page_size(page_size)
    return page_size * (max(0, index) // page_size)


def initial_state(item_count: int, page_size: int, restored_index: int | None = None) -> NavigationState:
    """Seed navigation from an optional restored selection.

    Out-of-range restored indices are ignored and the first item is selected.
    """
    _require_page_size(page_size)
    if restored_index is None or not 0 <= restored_index < item_count:
        return NavigationState()
    return NavigationState(selected=restored_index, page_start=page_start_for(restored_index, page_size))


def move_up(state: NavigationState, item_count: int, page_size: int) -> NavigationState:
    """Select the previous item, flipping back one page when leaving the current one."""
    if state.selected <= 0:
        return state
    selected = state.selected - 1
    page_start = state.page_start
    if selected < page_start:
        page_start = max(0, page_start - page_size)
    return NavigationState(selected=selected, page_start=page_start)


def move_left(state: NavigationState, item_count: int, page_size: int) -> NavigationState:
    return move_up(state, item_count, page_size)


def move_down(state: NavigationState, item_count: int, page_size: int) -> NavigationState:
    """Select the next item, advancing one page when stepping past the current one."""
    if state.selected + 1 >= item_count:
        return state
    selected = state.selected + 1
    page_start = state.page_start
    if selected >= page_start + page_size:
        page_start += page_size
    return NavigationState(selected=selected, page_start=page_start)


def page_up(state: NavigationState, item_count: int, page_size: int) -> NavigationState:
    """Jump one page back, landing on the first item when the jump would overshoot."""
    target = state.selected - page_size
    if target <= 0:
        return NavigationState(selected=0, page_start=0)
    return NavigationState(selected=target, page_start=max(0, state.page_start - page_size))


def page_down(state: NavigationState, item_count: int, page_size: int) -> NavigationState:
    """Jump one page forward, clamping onto the last item at the end of the list."""
    last_index = max(0, item_count - 1)
    target = state.selected + page_size
    if target >= last_index:
        return NavigationState(selected=last_index, page_start=page_start_for(last_index, page_size))
    return NavigationState(selected=target, page_start=state.page_start + page_size)


def page_count(item_count: int, page_size: int) -> int:
    """Return ``ceil(item_count / page_size)``, never less than one page."""
    _require_page_size(page_size)
    return max(1, (item_count + page_size - 1) // page_size)


def current_page(state: NavigationState, page_size: int) -> int:
    """Return the 1-based number of the page showing ``state.selected``."""
    _require_page_size(page_size)
    return state.page_start // page_size + 1


def visible_range(state: NavigationState, item_count: int, page_size: int) -> range:
    """Return indices of the real items on the current page (last page may be short)."""
    return range(state.page_start, min(state.page_start + page_size, item_count))


NavigationCommand = Callable[[NavigationState, int, int], NavigationState]

NAVIGATION_COMMANDS: dict[str, NavigationCommand] = {
    "up": move_up,
    "down": move_down,
    "left": move_left,
    "page_up": page_up,
    "page_down": page_down,
}

__all__ = [
    "DEFAULT_PAGE_SIZE",
    "NAVIGATION_COMMANDS",
    "NavigationCommand",
    "NavigationState",
    "current_page",
    "initial_state",
    "move_down",
    "move_left",
    "move_up",
    "page_count",
    "page_down",
    "page_start_for",
    "page_up",
    "visible_range",
]
