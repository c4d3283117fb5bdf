"""Tests for config value kinds and merge rules."""

import pytest as _pytest

import vendorize.config.types as types
import vendorize.utils.frozen as frozen


class TestKindOf:
    """Classification of tree values."""

    @_pytest.mark.parametrize(
        ("value", "kind"),
        [
            ({"a": 1}, types.ValueKind.MAP),
            (frozen.FrozenMapping({"a": 1}), types.ValueKind.MAP),
            ([1, 2], types.ValueKind.SEQUENCE),
            (("a", "b"), types.ValueKind.SEQUENCE),
            ("flex-end", types.ValueKind.SCALAR),
            (b"raw", types.ValueKind.SCALAR),
            (3, types.ValueKind.SCALAR),
            (None, types.ValueKind.SCALAR),
        ],
    )
    def test_kinds(self, value: object, kind: types.ValueKind) -> None:
        """Strings are scalars; mappings and other sequences are containers."""
        assert types.kind_of(value) is kind


class TestMergeValues:
    """Merge rules per (existing, incoming) pairing."""

    def test_every_pairing_has_a_rule(self) -> None:
        """The rule table covers all nine pairings."""
        assert len(types.MERGE_RULES) == len(types.ValueKind) ** 2

    def test_maps_merge_recursively(self) -> None:
        """Incoming keys win, untouched keys survive at every level."""
        existing = {"keep": 1, "nested": {"a": 1, "b": 1}}
        incoming = {"nested": {"b": 2, "c": 3}, "new": True}
        assert types.merge_values(existing, incoming) == {
            "keep": 1,
            "nested": {"a": 1, "b": 2, "c": 3},
            "new": True,
        }

    def test_sequences_replace(self) -> None:
        """Sequences are not concatenated."""
        assert types.merge_values([1, 2], [3]) == [3]

    def test_replacement_is_a_copy(self) -> None:
        """Replaced values do not alias the incoming object."""
        incoming = {"x": [1]}
        result = types.merge_values("scalar", incoming)
        incoming["x"].append(2)
        assert result == {"x": [1]}

    def test_frozen_input_is_thawed(self) -> None:
        """Frozen views are stored as plain containers."""
        result = types.merge_values(None, frozen.FrozenMapping({"a": [1]}))
        assert type(result) is dict
        assert type(result["a"]) is list
