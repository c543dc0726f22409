"""Highlight style for picker frames.

There is a single color style plus a colorless variant. The marker text is
part of every theme so the selection stays visible without color.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class PickerTheme:
    """ANSI fragments used by the frame renderer."""

    name: str
    selected_marker: str
    plain_marker: str
    selected: str
    hint: str
    footer: str
    reset: str


DEFAULT_THEME = PickerTheme(
    name="default",
    selected_marker=">>> ",
    plain_marker="    ",
    selected="\033[44m",
    hint="\033[2m",
    footer="\033[2m",
    reset="\033[0m",
)

PLAIN_THEME = PickerTheme(
    name="plain",
    selected_marker=">>> ",
    plain_marker="    ",
    selected="",
    hint="",
    footer="",
    reset="",
)


def color_disabled_by_env() -> bool:
    """Honor the ``NO_COLOR`` convention (any non-empty value disables color)."""
    return bool(os.environ.get("NO_COLOR"))


def resolve_theme(*, no_color: bool = False) -> PickerTheme:
    """Return the concrete theme for the requested color mode."""
    if no_color or color_disabled_by_env():
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "PickerTheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "color_disabled_by_env",
    "resolve_theme",
]
