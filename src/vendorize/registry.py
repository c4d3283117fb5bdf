"""
One-shot registry for rule modules.

Each rule module is registered at most once per registry. Registering a
module again is harmless: the call reports it was skipped and logs a
warning, so re-running setup code is idempotent.
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import typing as _typing

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass(frozen=True)
class ImportResult:
    """
    Outcome of ModuleRegistry.import_once.

    Truthy exactly when the module was registered by this call.
    """

    name: str
    imported: bool

    def __bool__(self) -> bool:
        return self.imported


class ModuleRegistry:
    """
    Set of module names that have already been registered.

    The set only grows; there is no way to unregister a module.
    """

    def __init__(self) -> None:
        self._imported: set[str] = set()
        self._order: list[str] = []

    def import_once(self, name: str) -> ImportResult:
        """
        Register a module name unless it is already registered.

        Args:
            name: Module name.

        Returns:
            ImportResult, truthy the first time name is seen and falsy
            (with a warning logged) on every later call.
        """
        if name in self._imported:
            _logger.warning("Module '%s' has already been imported", name)
            return ImportResult(name=name, imported=False)
        self._imported.add(name)
        self._order.append(name)
        return ImportResult(name=name, imported=True)

    def is_imported(self, name: str) -> bool:
        """Check if a module name has been registered."""
        return name in self._imported

    def imported_names(self) -> list[str]:
        """List registered module names in registration order."""
        return list(self._order)

    def __contains__(self, name: object) -> bool:
        return name in self._imported

    def __len__(self) -> int:
        return len(self._imported)

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self.imported_names())
