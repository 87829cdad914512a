"""Shared Rich Console instance for protoutline."""

from __future__ import annotations

from rich.console import Console

_console: Console | None = None


def get_console() -> Console:
    """Get the shared Console instance.

    Creates the console on first access. Highlighting is disabled so symbol
    names are printed exactly as declared.
    """
    global _console
    if _console is None:
        _console = Console(highlight=False, markup=True)
    return _console


def set_console(console: Console | None) -> None:
    """Set a custom Console instance.

    Useful for testing or custom configurations. None resets to the default.
    """
    global _console
    _console = console
