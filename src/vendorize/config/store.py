"""
Two-tier path-addressed config store.

The store keeps two nested trees:

- defaults: seed data written once when a context is created (browser
  alias tables, feature toggles, keyword remaps)
- overrides: values written by later configuration calls

Reads layer overrides over defaults: a path set in only one tier reads
from that tier, and where both tiers hold a value the two are combined
with config.types.merge_values, so an override map deep-merges into the
seeded map beneath it. Writes merge the same way within their own tier.

Paths are either delimiter-joined strings ("remaps.align-items") or
explicit segment sequences (("remaps", "align-items")). A store created
with a namespace prefixes every path with the namespace segments.

Thread safety: none. Use one store per transform pass.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import typing as _typing

import vendorize.config.types as types
import vendorize.constants as constants
import vendorize.errors as errors
import vendorize.utils.frozen as frozen
import vendorize.utils.strings as strings

_logger = _logging.getLogger(__name__)


class _MissingType:
    """Sentinel type for a failed tree lookup."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


_MISSING = _MissingType()


def _lookup(tree: dict[str, _typing.Any], path: types.Path) -> _typing.Any:
    """Walk tree along path; return _MISSING if any step is not a mapping hit."""
    current: _typing.Any = tree
    for key in path:
        if not isinstance(current, _abc.Mapping) or key not in current:
            return _MISSING
        current = current[key]
    return current


def _remove(tree: dict[str, _typing.Any], path: types.Path) -> None:
    """Delete the final key of path from tree if it exists."""
    current: _typing.Any = tree
    for key in path[:-1]:
        if not isinstance(current, dict) or key not in current:
            return
        current = current[key]
    if isinstance(current, dict):
        current.pop(path[-1], None)


class PathConfigStore:
    """
    Nested key-value store with a defaults tier and an overrides tier.

    Example:
        >>> store = PathConfigStore()
        >>> store.set("a.b", {"x": 1})
        FrozenMapping({'x': 1})
        >>> store.set("a.b", {"y": 2})
        FrozenMapping({'x': 1, 'y': 2})
        >>> store.get(("a", "b", "y"))
        2

    Args:
        delimiter: Separator between segments of string paths.
        namespace: Optional path prepended to every path.
    """

    def __init__(
        self,
        *,
        delimiter: str = constants.DEFAULT_PATH_DELIMITER,
        namespace: types.PathLike | None = None,
    ) -> None:
        if not delimiter:
            raise ValueError("delimiter must not be empty")
        self._delimiter = delimiter
        self._defaults: dict[str, _typing.Any] = {}
        self._overrides: dict[str, _typing.Any] = {}
        self._namespace: types.Path = (
            self._split(namespace) if namespace else ()
        )

    @property
    def delimiter(self) -> str:
        """Separator used for string paths."""
        return self._delimiter

    @property
    def namespace(self) -> types.Path:
        """Segments prepended to every path (empty when unset)."""
        return self._namespace

    # =========================================================================
    # Path helpers
    # =========================================================================

    def _split(self, path: types.PathLike) -> types.Path:
        """
        Turn a string or segment sequence into a tuple of segments.

        Raises:
            TypeError: If a segment is not a string.
            ValueError: If the path is empty or has an empty segment.
        """
        if isinstance(path, str):
            segments = tuple(strings.split(path, self._delimiter))
        else:
            segments = tuple(path)
            for segment in segments:
                if not isinstance(segment, str):
                    raise TypeError(
                        f"Path segments must be strings, got {type(segment).__name__}"
                    )
        if not segments:
            raise ValueError("Config path must not be empty")
        if any(not segment for segment in segments):
            raise ValueError(f"Config path {path!r} has an empty segment")
        return segments

    def resolve(self, path: types.PathLike) -> types.Path:
        """Return the full segment tuple for path, namespace included."""
        return self._namespace + self._split(path)

    def _tier(self, default_tier: bool) -> dict[str, _typing.Any]:
        return self._defaults if default_tier else self._overrides

    def _find(self, segments: types.Path, default_tier: bool) -> _typing.Any:
        """
        Look up segments, layering the overrides tier over the defaults.

        An override map sitting on a default map reads as their deep merge,
        so a parent read agrees with reads of its leaves.
        """
        default = _lookup(self._defaults, segments)
        if default_tier:
            return default
        override = _lookup(self._overrides, segments)
        if override is _MISSING:
            return default
        if default is _MISSING:
            return override
        return types.merge_values(default, override)

    def _exists(self, segments: types.Path) -> bool:
        return (
            _lookup(self._overrides, segments) is not _MISSING
            or _lookup(self._defaults, segments) is not _MISSING
        )

    # =========================================================================
    # Public API
    # =========================================================================

    def set(
        self,
        path: types.PathLike,
        value: _typing.Any,
        *,
        default_tier: bool = False,
    ) -> _typing.Any:
        """
        Write a value at path in the selected tier.

        Intermediate maps are created as needed; a non-map node in the way
        is replaced by a map. If a value already sits at the path, the two
        are combined with merge_values, so map over map is a deep merge.

        Args:
            path: Where to write.
            value: Scalar, sequence, or mapping to store.
            default_tier: Write into defaults instead of overrides.

        Returns:
            The value a read of path now returns (frozen view for
            containers), so an override map comes back merged with the
            default map beneath it.
        """
        segments = self.resolve(path)
        current = self._tier(default_tier)
        for key in segments[:-1]:
            if key not in current or not isinstance(current[key], dict):
                current[key] = {}
            current = current[key]

        final_key = segments[-1]
        if final_key in current:
            current[final_key] = types.merge_values(current[final_key], value)
        else:
            current[final_key] = frozen.thaw(value)
        return frozen.freeze(self._find(segments, default_tier))

    def get(
        self,
        path: types.PathLike,
        *,
        default_tier: bool = False,
    ) -> _typing.Any:
        """
        Read the value at path.

        Overrides are layered over defaults, maps merging deeply; with
        default_tier only defaults are read.
        A missing path is logged as a warning and reported as None, so
        callers must treat None as "no value".

        Returns:
            The value (frozen view for containers), or None.
        """
        try:
            return self.require(path, default_tier=default_tier)
        except errors.ConfigPathNotFoundError as e:
            _logger.warning("%s", e)
            return None

    def require(
        self,
        path: types.PathLike,
        *,
        default_tier: bool = False,
    ) -> _typing.Any:
        """
        Read the value at path, raising if it is missing.

        Raises:
            ConfigPathNotFoundError: If path resolves in neither tier.
        """
        segments = self.resolve(path)
        value = self._find(segments, default_tier)
        if value is _MISSING:
            raise errors.ConfigPathNotFoundError(segments, default_tier=default_tier)
        return frozen.freeze(value)

    def has(self, path: types.PathLike) -> bool:
        """Check whether path resolves in either tier."""
        segments = self.resolve(path)
        found = self._exists(segments)
        if not found:
            _logger.debug("Config path '%s' not set", ".".join(segments))
        return found

    def reset(self, *paths: types.PathLike, default_tier: bool = False) -> bool:
        """
        Remove paths from the selected tier.

        Called without paths, clears the whole tier (or, for a namespaced
        store, everything under the namespace). Missing paths are ignored.

        Returns:
            Always True.
        """
        tier = self._tier(default_tier)
        if not paths:
            if self._namespace:
                _remove(tier, self._namespace)
            else:
                tier.clear()
            return True
        for path in paths:
            _remove(tier, self.resolve(path))
        return True

    def seed(self, tree: _abc.Mapping[str, _typing.Any]) -> None:
        """Write every top-level key of tree into the defaults tier."""
        for key, value in tree.items():
            self.set((key,), value, default_tier=True)

    def snapshot(self, *, default_tier: bool = False) -> dict[str, _typing.Any]:
        """Return an independent deep copy of a tier."""
        return _copy.deepcopy(self._tier(default_tier))
