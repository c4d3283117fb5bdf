"""
Rule set for managing available prefix rules.

The rule set provides a central place to register rules, look them up by
rule name or by any CSS property they claim, and check their feature
toggles.
"""

from __future__ import annotations

import importlib as _importlib
import logging as _logging
import typing as _typing

import vendorize.constants as constants
import vendorize.errors as errors
import vendorize.rules.base as base

if _typing.TYPE_CHECKING:
    import vendorize.config.store as _store
    import vendorize.registry as _registry

_logger = _logging.getLogger(__name__)

BUILTIN_RULE_MODULES = (
    "alignment",
    "appearance",
    "backgrounds",
    "borders",
    "logical",
    "fragmentation",
    "pending",
)
"""Rule modules under vendorize.rules, in registration order."""


class RuleSet:
    """
    Registry for prefix rule instances.

    Rules are instantiated with the set's config store on registration.
    Each rule name, and each property a rule claims, may only be
    registered once.
    """

    def __init__(self, store: _store.PathConfigStore) -> None:
        self._store = store
        self._rules: dict[str, base.PrefixRule] = {}
        self._by_property: dict[str, base.PrefixRule] = {}

    def register(self, rule_cls: type[base.PrefixRule]) -> base.PrefixRule:
        """
        Instantiate and register a rule class.

        Args:
            rule_cls: PrefixRule subclass to register.

        Returns:
            The registered rule instance.

        Raises:
            DuplicateRuleError: If the rule name, or a property it claims,
                is already registered.
        """
        if not rule_cls.name:
            raise ValueError(f"Rule class {rule_cls.__name__} has no name")
        if rule_cls.name in self._rules:
            raise errors.DuplicateRuleError(f"Rule '{rule_cls.name}' is already registered")
        for prop in rule_cls.names:
            owner = self._by_property.get(prop)
            if owner is not None:
                raise errors.DuplicateRuleError(
                    f"Property '{prop}' of rule '{rule_cls.name}' "
                    f"is already handled by rule '{owner.name}'"
                )

        rule = rule_cls(self._store)
        self._rules[rule.name] = rule
        for prop in rule.names:
            self._by_property[prop] = rule
        return rule

    def get(self, name: str) -> base.PrefixRule | None:
        """Get a rule by rule name."""
        return self._rules.get(name)

    def for_property(self, prop: str) -> base.PrefixRule | None:
        """
        Find the rule handling a CSS property.

        Property names claimed by rules are checked first, then rule names,
        so value-level features can still be addressed directly.
        """
        rule = self._by_property.get(prop)
        if rule is None:
            rule = self._rules.get(prop)
        return rule

    def is_enabled(self, name: str) -> bool:
        """
        Check the features.<name> toggle.

        A rule without a toggle entry is treated as disabled.
        """
        path = (constants.FEATURES_KEY, name)
        if not self._store.has(path):
            return False
        return bool(self._store.get(path))

    def list_rules(self) -> list[base.PrefixRule]:
        """List all registered rules, sorted by name."""
        return sorted(self._rules.values(), key=lambda r: r.name)

    def list_names(self) -> list[str]:
        """List names of all registered rules, sorted."""
        return sorted(self._rules)

    def to_dict(self) -> list[dict[str, _typing.Any]]:
        """Describe every rule, including its toggle state."""
        return [
            {**rule.describe(), "enabled": self.is_enabled(rule.name)}
            for rule in self.list_rules()
        ]

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __iter__(self) -> _typing.Iterator[base.PrefixRule]:
        return iter(self.list_rules())


def install_rule_modules(
    ruleset: RuleSet,
    modules: _registry.ModuleRegistry,
    names: _typing.Iterable[str] = BUILTIN_RULE_MODULES,
) -> list[base.PrefixRule]:
    """
    Import rule modules and register their RULES.

    Each module goes through modules.import_once first, so installing the
    same module twice registers its rules only once.

    Args:
        ruleset: Rule set to register into.
        modules: Registry guarding repeated installs.
        names: Module names under vendorize.rules.

    Returns:
        Rules registered by this call.
    """
    registered: list[base.PrefixRule] = []
    for name in names:
        if not modules.import_once(name):
            continue
        module = _importlib.import_module(f"vendorize.rules.{name}")
        for rule_cls in module.RULES:
            registered.append(ruleset.register(rule_cls))
        _logger.debug("Installed rule module '%s' (%d rules)", name, len(module.RULES))
    return registered
