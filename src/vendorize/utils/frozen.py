"""
Read-only config tree values.

PathConfigStore hands out frozen values so callers can read seed tables
(remaps, browser aliases, feature toggles) without editing a tier behind
the store's back:

- maps are wrapped in a FrozenMapping view, frozen again on item access
- sequences are copied into tuples of frozen items
- scalars are returned as they are

thaw() is the inverse used on the way in: every value written to a tier
becomes plain dicts and lists owned by the store.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


def _is_sequence(value: _typing.Any) -> bool:
    return isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes))


class FrozenMapping(_abc.Mapping[str, _typing.Any]):
    """
    Read-only view of a config map.

    Equality ignores the tuple/list distinction introduced by freezing, so
    a view compares equal to the plain tree it was made from.

    Example:
        >>> remaps = FrozenMapping({"flex-end": "end"})
        >>> remaps.get("flex-end")
        'end'
    """

    __slots__ = ("_tree",)

    def __init__(self, tree: _abc.Mapping[str, _typing.Any]) -> None:
        self._tree = tree

    def __getitem__(self, key: str) -> _typing.Any:
        return freeze(self._tree[key])

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._tree)

    def __len__(self) -> int:
        return len(self._tree)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _abc.Mapping):
            return NotImplemented
        return thaw(self) == thaw(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FrozenMapping({thaw(self)!r})"


def freeze(value: _typing.Any) -> _typing.Any:
    """
    Make a config value read-only.

    Example:
        >>> freeze({"major": ["chrome"]})["major"]
        ('chrome',)
    """
    if isinstance(value, FrozenMapping):
        return value
    if isinstance(value, _abc.Mapping):
        return FrozenMapping(value)
    if _is_sequence(value):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: _typing.Any) -> _typing.Any:
    """
    Copy a (possibly frozen) value into plain dicts and lists.

    The result shares nothing with the input, so a tier never aliases
    caller data.
    """
    if isinstance(value, _abc.Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if _is_sequence(value):
        return [thaw(item) for item in value]
    return value
