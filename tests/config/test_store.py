"""Tests for PathConfigStore."""

import logging as _logging

import pytest as _pytest

import vendorize.config as config
import vendorize.errors as errors
import vendorize.utils.frozen as frozen


class TestSetAndGet:
    """Basic read/write behavior."""

    def test_round_trip_scalar(self, store: config.PathConfigStore) -> None:
        """A value written at a path reads back unchanged."""
        store.set("a.b.c", "value")
        assert store.get("a.b.c") == "value"

    def test_set_returns_written_value(self, store: config.PathConfigStore) -> None:
        """set() returns what is now stored at the path."""
        assert store.set("flag", True) is True

    def test_string_and_segment_paths_are_equivalent(
        self, store: config.PathConfigStore
    ) -> None:
        """A delimited string and a segment tuple address the same node."""
        store.set(("remaps", "align-items"), {"flex-end": "end"})
        assert store.get("remaps.align-items") == {"flex-end": "end"}
        assert store.get(["remaps", "align-items", "flex-end"]) == "end"

    def test_custom_delimiter(self) -> None:
        """String paths are split on the configured delimiter."""
        store = config.PathConfigStore(delimiter="/")
        store.set("a/b", 1)
        assert store.get(("a", "b")) == 1

    def test_map_results_are_read_only(self, store: config.PathConfigStore) -> None:
        """Maps come back as frozen views."""
        store.set("a", {"x": 1})
        result = store.get("a")
        assert isinstance(result, frozen.FrozenMapping)
        with _pytest.raises(TypeError):
            result["x"] = 2  # type: ignore[index]

    def test_stored_value_is_independent_of_caller(
        self, store: config.PathConfigStore
    ) -> None:
        """Mutating the written dict afterwards does not change the store."""
        data = {"x": [1, 2]}
        store.set("a", data)
        data["x"].append(3)
        assert store.get("a.x") == (1, 2)


class TestDeepMerge:
    """Writes over existing maps merge instead of replacing."""

    def test_sibling_keys_are_kept(self, store: config.PathConfigStore) -> None:
        """set(P, {x}) then set(P, {y}) yields {x, y}."""
        store.set("a.b", {"x": 1})
        store.set("a.b", {"y": 2})
        assert store.get("a.b") == {"x": 1, "y": 2}

    def test_merge_is_recursive(self, store: config.PathConfigStore) -> None:
        """Nested maps merge at every level; new keys win."""
        store.set("a", {"n": {"x": 1, "keep": True}})
        store.set("a", {"n": {"x": 2, "y": 3}})
        assert store.get("a") == {"n": {"x": 2, "keep": True, "y": 3}}

    def test_sequences_replace(self, store: config.PathConfigStore) -> None:
        """A sequence written over a sequence replaces it."""
        store.set("major", ["chrome", "firefox"])
        store.set("major", ["safari"])
        assert store.get("major") == ("safari",)

    def test_scalar_replaces_map(self, store: config.PathConfigStore) -> None:
        """A scalar written over a map replaces the map."""
        store.set("a", {"x": 1})
        store.set("a", 5)
        assert store.get("a") == 5

    def test_non_map_intermediate_is_replaced(
        self, store: config.PathConfigStore
    ) -> None:
        """Writing through a scalar turns it into a map."""
        store.set("a", 5)
        store.set("a.b", 1)
        assert store.get("a") == {"b": 1}


class TestTiers:
    """Defaults/overrides interaction."""

    def test_overrides_shadow_defaults(self, store: config.PathConfigStore) -> None:
        """get() prefers the overrides tier."""
        store.set("flag", False, default_tier=True)
        store.set("flag", True)
        assert store.get("flag") is True

    def test_falls_back_to_defaults(self, store: config.PathConfigStore) -> None:
        """get() reads defaults when overrides lack the path."""
        store.set("a.b", 1, default_tier=True)
        assert store.get("a.b") == 1

    def test_default_tier_read_ignores_overrides(
        self, store: config.PathConfigStore
    ) -> None:
        """get(default_tier=True) only reads defaults."""
        store.set("flag", False, default_tier=True)
        store.set("flag", True)
        assert store.get("flag", default_tier=True) is False

    def test_override_write_does_not_touch_defaults(
        self, store: config.PathConfigStore
    ) -> None:
        """Writing an override leaves the seeded map intact."""
        store.set("a", {"x": 1}, default_tier=True)
        store.set("a", {"y": 2})
        assert store.get("a", default_tier=True) == {"x": 1}

    def test_override_map_merges_into_default_map(
        self, store: config.PathConfigStore
    ) -> None:
        """An override map reads as a deep merge over the default map."""
        store.set(
            "remaps.align-items",
            {"flex-end": "end", "flex-start": "start"},
            default_tier=True,
        )
        result = store.set("remaps.align-items", {"baseline": "base", "flex-end": "last"})
        expected = {"flex-end": "last", "flex-start": "start", "baseline": "base"}
        assert result == expected
        assert store.get("remaps.align-items") == expected
        assert store.get("remaps") == {"align-items": expected}

    def test_parent_and_leaf_reads_agree(self, store: config.PathConfigStore) -> None:
        """A leaf visible on its own is also visible through its parent."""
        store.set("features", {"flex": True, "order": True}, default_tier=True)
        store.set("features.flex", False)
        assert store.get("features.order") is True
        assert store.get("features") == {"flex": False, "order": True}

    def test_cross_tier_merge_is_recursive(self, store: config.PathConfigStore) -> None:
        """Nested maps merge across tiers at every level."""
        store.set("a", {"n": {"x": 1, "keep": True}}, default_tier=True)
        store.set("a", {"n": {"x": 2}})
        assert store.get("a") == {"n": {"x": 2, "keep": True}}

    def test_override_scalar_replaces_default_map(
        self, store: config.PathConfigStore
    ) -> None:
        """Only map over map merges across tiers."""
        store.set("a", {"x": 1}, default_tier=True)
        store.set("a", "off")
        assert store.get("a") == "off"
        assert store.get("a", default_tier=True) == {"x": 1}

    def test_seed_writes_defaults(self, store: config.PathConfigStore) -> None:
        """seed() fills the defaults tier only."""
        store.seed({"a": 1, "b": {"c": 2}})
        assert store.snapshot(default_tier=True) == {"a": 1, "b": {"c": 2}}
        assert store.snapshot() == {}


class TestMissingPaths:
    """Lookups of paths that do not exist."""

    def test_get_missing_returns_none(self, store: config.PathConfigStore) -> None:
        """A missing path reads as None."""
        assert store.get("nope") is None

    def test_get_missing_logs_warning(
        self,
        store: config.PathConfigStore,
        caplog: _pytest.LogCaptureFixture,
    ) -> None:
        """A missing path is reported as a warning."""
        with caplog.at_level(_logging.WARNING, logger="vendorize.config.store"):
            store.get("nope.deeper")
        assert "nope.deeper" in caplog.text

    def test_lookup_through_scalar_fails(self, store: config.PathConfigStore) -> None:
        """A non-map before the end of the path is a failed lookup."""
        store.set("a", "scalar")
        assert store.get("a.b") is None
        assert not store.has("a.b")

    def test_require_raises(self, store: config.PathConfigStore) -> None:
        """require() raises ConfigPathNotFoundError."""
        with _pytest.raises(errors.ConfigPathNotFoundError) as exc_info:
            store.require("a.b")
        assert exc_info.value.path == ("a", "b")
        assert isinstance(exc_info.value, KeyError)

    def test_has(self, store: config.PathConfigStore) -> None:
        """has() checks both tiers."""
        store.set("d", 1, default_tier=True)
        store.set("o", 1)
        assert store.has("d")
        assert store.has("o")
        assert not store.has("x")

    def test_empty_path_is_rejected(self, store: config.PathConfigStore) -> None:
        """Empty paths and empty segments raise ValueError."""
        with _pytest.raises(ValueError):
            store.get("")
        with _pytest.raises(ValueError):
            store.set("a..b", 1)

    def test_non_string_segment_is_rejected(
        self, store: config.PathConfigStore
    ) -> None:
        """Segment sequences must hold strings."""
        with _pytest.raises(TypeError):
            store.set(("a", 1), 1)  # type: ignore[arg-type]


class TestReset:
    """reset() removes paths from one tier."""

    def test_reset_path(self, store: config.PathConfigStore) -> None:
        """Resetting an override reveals the default again."""
        store.set("flag", False, default_tier=True)
        store.set("flag", True)
        assert store.reset("flag") is True
        assert store.get("flag") is False

    def test_reset_several_paths(self, store: config.PathConfigStore) -> None:
        """Several paths can be reset at once."""
        store.set("a", 1)
        store.set("b", 2)
        store.set("c", 3)
        store.reset("a", ("b",))
        assert store.snapshot() == {"c": 3}

    def test_reset_nested_path(self, store: config.PathConfigStore) -> None:
        """A nested path removes only the final key."""
        store.set("a", {"x": 1, "y": 2})
        store.reset("a.x")
        assert store.get("a") == {"y": 2}

    def test_reset_missing_path_is_fine(self, store: config.PathConfigStore) -> None:
        """Resetting a missing path still returns True."""
        assert store.reset("missing.path") is True

    def test_reset_all(self, store: config.PathConfigStore) -> None:
        """No paths clears the whole selected tier."""
        store.set("a", 1, default_tier=True)
        store.set("b", 2)
        store.reset()
        assert store.snapshot() == {}
        assert store.get("a") == 1

    def test_reset_default_tier(self, store: config.PathConfigStore) -> None:
        """default_tier=True resets defaults."""
        store.set("a", 1, default_tier=True)
        store.reset("a", default_tier=True)
        assert not store.has("a")


class TestNamespace:
    """A namespaced store prefixes every path."""

    def test_paths_are_prefixed(self) -> None:
        """Writes land under the namespace."""
        store = config.PathConfigStore(namespace="site")
        store.set("a.b", 1)
        assert store.snapshot() == {"site": {"a": {"b": 1}}}
        assert store.get("a.b") == 1
        assert store.has("a.b")

    def test_reset_all_only_clears_namespace(self) -> None:
        """Full reset removes only the namespace subtree."""
        store = config.PathConfigStore(namespace="site")
        store.set("a", 1)
        store.reset()
        assert store.snapshot() == {}
        assert not store.has("a")

    def test_resolve(self) -> None:
        """resolve() shows the full segment tuple."""
        store = config.PathConfigStore(namespace="site.theme")
        assert store.resolve("a.b") == ("site", "theme", "a", "b")
