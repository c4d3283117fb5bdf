"""
Base classes for the prefix rule system.

A rule handles one CSS feature family. It knows every property name the
feature has gone by (names) and turns a (prefix, value, property) triple
into the declaration that prefix needs, or None when the prefix has no
syntax for the feature.
"""

from __future__ import annotations

import abc as _abc
import collections.abc as _cabc
import dataclasses as _dataclasses
import logging as _logging
import typing as _typing

import vendorize.constants as constants
import vendorize.spec as spec

if _typing.TYPE_CHECKING:
    import vendorize.config.store as _store

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True)
class Declaration:
    """A single CSS property/value pair produced by a rule."""

    property: str
    value: str

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"

    def to_dict(self) -> dict[str, str]:
        """Convert to JSON-serializable dict."""
        return {"property": self.property, "value": self.value}


class PrefixRule(_abc.ABC):
    """
    Base class for all prefix rules.

    Subclasses set the class attributes and implement transform().

    Class attributes:
        name: Feature name, also the feature toggle key (features.<name>).
        names: Every CSS property the rule may consume or produce. The
            first entry is used when transform() gets no property.
        complete: False for rules that only implement the generic
            prefixing contract so far.
    """

    name: _typing.ClassVar[str] = ""
    names: _typing.ClassVar[tuple[str, ...]] = ()
    complete: _typing.ClassVar[bool] = True

    def __init__(self, store: _store.PathConfigStore) -> None:
        self._store = store

    @property
    def store(self) -> _store.PathConfigStore:
        """Config store the rule reads tables from."""
        return self._store

    def default_property(self) -> str:
        """Property assumed when transform() is called without one."""
        return self.names[0] if self.names else self.name

    def remap(self, value: str) -> str:
        """
        Translate a keyword through the remaps.<name> table.

        Values without an entry, a missing table, or a table that is not a
        map pass through unchanged.
        """
        path = (constants.REMAPS_KEY, self.name)
        if not self._store.has(path):
            return value
        table = self._store.get(path)
        if not isinstance(table, _cabc.Mapping):
            _logger.warning(
                "Ignoring %s.%s: expected a map, got %s",
                constants.REMAPS_KEY,
                self.name,
                type(table).__name__,
            )
            return value
        return table.get(value, value)

    @_abc.abstractmethod
    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> Declaration | None:
        """
        Build the declaration for one prefix.

        Args:
            prefix: Vendor prefix token (see vendorize.constants).
            value: Declared value.
            prop: Declared property; defaults to default_property().

        Returns:
            The rewritten declaration, or None if nothing applies.
        """
        ...

    def describe(self) -> dict[str, _typing.Any]:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "names": list(self.names),
            "complete": self.complete,
        }

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"


class PrefixedPropertyRule(PrefixRule):
    """Rule that prepends the normalized prefix to the property name."""

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> Declaration | None:
        prop = prop or self.default_property()
        return Declaration(spec.normalize_prefix(prefix) + prop, value)
