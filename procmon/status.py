"""Helpers for reading ``Key:<whitespace>value`` fields from /proc status files."""

from __future__ import annotations

from typing import Iterable, Optional

_DIGITS = frozenset("0123456789")


def is_numeric(text: str) -> bool:
    """Return True when every character of *text* is an ASCII digit."""
    return all(ch in _DIGITS for ch in text)


def field_value(line: str, key: str) -> str:
    """Return the value that follows *key* on *line*.

    Leading whitespace after the key is dropped and the value ends at the
    first newline.
    """
    value = line[len(key):].lstrip()
    return value.split("\n", 1)[0]


def find_field(lines: Iterable[str], key: str) -> Optional[str]:
    """Consume *lines* until one starts with *key* and return its value.

    Lines before the match are consumed, so repeated calls on one iterator
    find fields in file order.  Returns None when no line matches.
    """
    for line in lines:
        if line.startswith(key):
            return field_value(line, key)
    return None