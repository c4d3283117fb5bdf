"""
Exception types for Vendorize.

Most lookup failures are recoverable: the config store logs a warning and
returns None, and duplicate module imports return a falsy result. The
exceptions here are raised only by the strict variants of those calls and
for programming or installation errors.
"""

from __future__ import annotations

import pathlib as _pathlib
import typing as _typing


class VendorizeError(Exception):
    """Base class for all Vendorize errors."""

    pass


class ConfigPathNotFoundError(VendorizeError, KeyError):
    """A config path could not be resolved in the requested tier(s)."""

    def __init__(self, path: _typing.Sequence[str], *, default_tier: bool = False) -> None:
        self.path = tuple(path)
        self.default_tier = default_tier
        tier = "defaults" if default_tier else "overrides or defaults"
        super().__init__(f"Config path '{'.'.join(self.path)}' not found in {tier}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class DuplicateRuleError(VendorizeError, ValueError):
    """A rule name or property name was registered twice."""

    pass


class UnregisteredPropertyError(VendorizeError, LookupError):
    """No prefix rule handles the requested property."""

    def __init__(self, prop: str) -> None:
        self.property = prop
        super().__init__(f"No prefix rule registered for property '{prop}'")


class SeedFileError(VendorizeError):
    """Error loading or parsing a seed data file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in seed file {path}: {message}")
