"""Tests for read-only config values."""

import pytest as _pytest

import vendorize.utils.frozen as frozen


class TestFreeze:
    """freeze() makes config values read-only."""

    def test_maps_are_views(self) -> None:
        """Maps, nested ones included, cannot be written."""
        view = frozen.freeze({"remaps": {"align-items": {"flex-end": "end"}}})
        assert isinstance(view["remaps"], frozen.FrozenMapping)
        with _pytest.raises(TypeError):
            view["remaps"]["align-items"]["flex-end"] = "x"  # type: ignore[index]

    def test_sequences_become_tuples(self) -> None:
        """Sequences are copied into tuples of frozen items."""
        result = frozen.freeze(["chrome", {"a": 1}])
        assert isinstance(result, tuple)
        assert isinstance(result[1], frozen.FrozenMapping)

    def test_scalars_unchanged(self) -> None:
        """Strings, numbers and booleans pass through."""
        assert frozen.freeze("flex-end") == "flex-end"
        assert frozen.freeze(1) == 1
        assert frozen.freeze(True) is True

    def test_view_tracks_tree(self) -> None:
        """A view reflects later changes to the tree it wraps."""
        tree = {"a": 1}
        view = frozen.freeze(tree)
        tree["b"] = 2
        assert view == {"a": 1, "b": 2}

    def test_equality_with_plain_tree(self) -> None:
        """A view equals the plain tree it was made from."""
        assert frozen.freeze({"major": ["chrome"]}) == {"major": ["chrome"]}
        assert frozen.freeze({"a": 1}) != {"a": 2}
        assert frozen.freeze({"a": 1}) != "a"

    def test_unhashable(self) -> None:
        """Views are not hashable."""
        with _pytest.raises(TypeError):
            hash(frozen.freeze({}))


class TestThaw:
    """thaw() produces independent plain containers."""

    def test_thaw(self) -> None:
        """Views and tuples become dicts and lists."""
        result = frozen.thaw(frozen.freeze({"a": ("x", {"b": 1})}))
        assert result == {"a": ["x", {"b": 1}]}
        assert type(result["a"][1]) is dict

    def test_copy_is_independent(self) -> None:
        """Changing the copy leaves the source alone."""
        source = {"a": [1]}
        copy = frozen.thaw(source)
        copy["a"].append(2)
        assert source == {"a": [1]}
