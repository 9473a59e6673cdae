"""Terminal size queries on standard output, with fixed fallbacks."""

from __future__ import annotations

import os

_STDOUT_FILENO = 1
_DEFAULT_HEIGHT = 24
_DEFAULT_WIDTH = 80


def _size() -> os.terminal_size | None:
    try:
        return os.get_terminal_size(_STDOUT_FILENO)
    except (OSError, ValueError):
        return None


def terminal_height() -> int:
    """Return the number of rows of the terminal, or 24 when unknown."""
    size = _size()
    if size is None:
        return _DEFAULT_HEIGHT
    return size.lines


def terminal_width() -> int:
    """Return the number of columns of the terminal.

    Falls back to 80 when the size is unknown or reports 24 columns.
    """
    size = _size()
    if size is None or size.columns == 24:
        return _DEFAULT_WIDTH
    return size.columns