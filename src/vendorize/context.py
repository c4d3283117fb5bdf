"""
Prefixing context: everything one transform pass needs.

A context bundles the settings, the two-tier config store, the module
registry and the rule set. Nothing here is process-global, so separate
passes (or threads) each build their own context with create_context().
"""

from __future__ import annotations

import dataclasses as _dataclasses
import logging as _logging
import typing as _typing

import vendorize.config as config
import vendorize.constants as constants
import vendorize.registry as registry
import vendorize.rules as rules

_logger = _logging.getLogger(__name__)


@_dataclasses.dataclass
class PrefixContext:
    """State shared by the rules and the driver during a transform pass."""

    settings: config.Settings
    store: config.PathConfigStore
    modules: registry.ModuleRegistry
    rules: rules.RuleSet


def create_context(
    settings: config.Settings | None = None,
    *,
    seed: dict[str, _typing.Any] | None = None,
) -> PrefixContext:
    """
    Build a ready-to-use context.

    Seeds the defaults tier, applies feature toggle overrides from settings
    and installs the built-in rule modules.

    Args:
        settings: Settings to use. Defaults to Settings() (environment).
        seed: Seed tree for the defaults tier. Defaults to the file named by
            settings.seed_path, or the bundled seed file.

    Returns:
        New PrefixContext.

    Raises:
        SeedFileError: If seed data has to be loaded and cannot be.
    """
    if settings is None:
        settings = config.Settings()

    store = config.PathConfigStore(
        delimiter=settings.path_delimiter,
        namespace=settings.namespace,
    )
    if seed is None:
        seed = config.load_seed(settings.seed_path)
    config.seed_defaults(store, seed)

    for name, enabled in settings.features.items():
        store.set((constants.FEATURES_KEY, name), enabled)

    modules = registry.ModuleRegistry()
    ruleset = rules.RuleSet(store)
    installed = rules.install_rule_modules(ruleset, modules)
    _logger.debug("Created prefix context with %d rules", len(installed))

    return PrefixContext(
        settings=settings,
        store=store,
        modules=modules,
        rules=ruleset,
    )


# Global default context
_default_context: PrefixContext | None = None


def get_default_context() -> PrefixContext:
    """
    Get the default context.

    The default context is lazily created from environment settings.
    """
    global _default_context
    if _default_context is None:
        _default_context = create_context()
    return _default_context
