"""Value kinds and merge rules for config trees.

A config tree holds three kinds of values:

- MAP: a nested tree (any Mapping)
- SEQUENCE: a list of values (any non-string Sequence)
- SCALAR: everything else, including strings

Writing a value over an existing one combines the pair according to
MERGE_RULES. Only MAP over MAP merges; every other pairing replaces.
"""

from __future__ import annotations

import collections.abc as _abc
import enum as _enum
import typing as _typing

import vendorize.utils.frozen as frozen

# Tuple of segments addressing a node, e.g. ("remaps", "align-items")
Path: _typing.TypeAlias = tuple[str, ...]

# What callers may pass as a path: "remaps.align-items" or ("remaps", "align-items")
PathLike: _typing.TypeAlias = "str | _abc.Sequence[str]"


class ValueKind(_enum.Enum):
    """Shape of a config tree value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAP = "map"


def kind_of(value: _typing.Any) -> ValueKind:
    """
    Classify a value.

    Example:
        >>> kind_of({"a": 1})
        <ValueKind.MAP: 'map'>
        >>> kind_of("flex-end")
        <ValueKind.SCALAR: 'scalar'>
    """
    if isinstance(value, _abc.Mapping):
        return ValueKind.MAP
    if isinstance(value, _abc.Sequence) and not isinstance(value, (str, bytes)):
        return ValueKind.SEQUENCE
    return ValueKind.SCALAR


def _replace(existing: _typing.Any, incoming: _typing.Any) -> _typing.Any:
    return frozen.thaw(incoming)


def _merge_maps(
    existing: _abc.Mapping[str, _typing.Any],
    incoming: _abc.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    result = dict(existing)
    for key, value in incoming.items():
        if key in result:
            result[key] = merge_values(result[key], value)
        else:
            result[key] = frozen.thaw(value)
    return result


MergeRule: _typing.TypeAlias = _typing.Callable[[_typing.Any, _typing.Any], _typing.Any]

MERGE_RULES: dict[tuple[ValueKind, ValueKind], MergeRule] = {
    (ValueKind.MAP, ValueKind.MAP): _merge_maps,
    (ValueKind.MAP, ValueKind.SEQUENCE): _replace,
    (ValueKind.MAP, ValueKind.SCALAR): _replace,
    (ValueKind.SEQUENCE, ValueKind.MAP): _replace,
    (ValueKind.SEQUENCE, ValueKind.SEQUENCE): _replace,
    (ValueKind.SEQUENCE, ValueKind.SCALAR): _replace,
    (ValueKind.SCALAR, ValueKind.MAP): _replace,
    (ValueKind.SCALAR, ValueKind.SEQUENCE): _replace,
    (ValueKind.SCALAR, ValueKind.SCALAR): _replace,
}
"""Merge rule for every (existing, incoming) pairing of value kinds."""


def merge_values(existing: _typing.Any, incoming: _typing.Any) -> _typing.Any:
    """
    Combine an existing tree value with an incoming one.

    Maps merge key-wise and recursively with incoming keys winning;
    any other pairing stores an independent copy of the incoming value.

    Example:
        >>> merge_values({"x": 1, "n": {"a": 1}}, {"y": 2, "n": {"b": 2}})
        {'x': 1, 'n': {'a': 1, 'b': 2}, 'y': 2}
        >>> merge_values([1, 2], [3])
        [3]
    """
    rule = MERGE_RULES[(kind_of(existing), kind_of(incoming))]
    return rule(existing, incoming)
