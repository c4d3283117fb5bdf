"""
String helpers used by the config store and the prefix rules.

Thin, explicit wrappers so path handling and value rewriting read the
same way across the package. Indices are 0-based; a missing substring is
reported as None rather than -1.
"""

from __future__ import annotations

import typing as _typing


def split(string: str, separator: str) -> list[str]:
    """
    Split a string on every occurrence of separator.

    An empty string yields an empty list (not [""]).

    Raises:
        ValueError: If separator is empty.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if not string:
        return []
    return string.split(separator)


def join(parts: _typing.Iterable[str], separator: str = "") -> str:
    """Join parts with separator."""
    return separator.join(parts)


def slice(string: str, start: int, end: int | None = None) -> str:  # noqa: A001
    """Return string[start:end]."""
    return string[start:end]


def index_of(string: str, substr: str) -> int | None:
    """Return the index of the first occurrence of substr, or None."""
    index = string.find(substr)
    return None if index < 0 else index


def str_replace(string: str, substr: str, newsubstr: str, all: bool = False) -> str:  # noqa: A002
    """
    Replace the first occurrence of substr, or every occurrence if all is set.

    Scanning is left to right and non-overlapping. An empty substr leaves
    the string unchanged.

    Example:
        >>> str_replace("a-b-c", "-", "+")
        'a+b-c'
        >>> str_replace("a-b-c", "-", "+", all=True)
        'a+b+c'
    """
    if not substr:
        return string
    result: list[str] = []
    position = 0
    while True:
        index = string.find(substr, position)
        if index < 0:
            break
        result.append(string[position:index])
        result.append(newsubstr)
        position = index + len(substr)
        if not all:
            break
    result.append(string[position:])
    return join(result)


def collapse_spaces(string: str) -> str:
    """Collapse runs of spaces to one and trim the ends."""
    while "  " in string:
        string = str_replace(string, "  ", " ", all=True)
    return string.strip()
