"""Public runtime orchestration entry points.

This package groups the interactive session bootstrap (`run_picker`) and the
lower-level event loop used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .app import PickerOptions
    from .loop import LoopOutcome, PickerSettings


def run_picker(*args, **kwargs):
    """Lazily import session entrypoint so ``termios`` loads only when needed."""
    from .app import run_picker as _run_picker

    return _run_picker(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


def __getattr__(name: str):
    if name == "PickerOptions":
        from . import app as _app

        return _app.PickerOptions
    if name in {"LoopOutcome", "PickerSettings"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "LoopOutcome",
    "PickerOptions",
    "PickerSettings",
    "run_main_loop",
    "run_picker",
]
