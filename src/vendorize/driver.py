"""
Autoprefixer driver.

Turns one declaration plus an ordered list of vendor prefix tokens into
the declarations a stylesheet needs, by dispatching each prefix to the
rule registered for the property.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import vendorize.context as context_module
import vendorize.errors as errors
import vendorize.rules.base as base

_logger = _logging.getLogger(__name__)


class Autoprefixer:
    """
    Emits prefixed declarations using a PrefixContext.

    Example:
        >>> prefixer = Autoprefixer(create_context())
        >>> [str(d) for d in prefixer.autoprefix("align-items", "flex-start", ["-webkit-", "-ms-"])]
        ['-webkit-align-items: flex-start', '-ms-flex-align: start']
    """

    def __init__(self, context: context_module.PrefixContext) -> None:
        self._context = context

    @property
    def context(self) -> context_module.PrefixContext:
        """The context rules and settings come from."""
        return self._context

    def autoprefix(
        self,
        prop: str,
        value: str,
        prefixes: _typing.Iterable[str],
    ) -> list[base.Declaration]:
        """
        Emit one declaration per prefix for a property/value pair.

        Order follows prefixes, duplicates included; nothing is
        deduplicated. Prefixes the rule has no syntax for are skipped.

        A property without a rule is handled by settings.unknown_property;
        a rule whose feature toggle is off passes the input through.

        Args:
            prop: CSS property name.
            value: CSS value.
            prefixes: Vendor prefix tokens, in output order.

        Returns:
            Declarations to emit.

        Raises:
            UnregisteredPropertyError: If no rule handles prop and the
                unknown_property policy is "error".
        """
        rule = self._context.rules.for_property(prop)
        if rule is None:
            return self._unregistered(prop, value)

        if not self._context.rules.is_enabled(rule.name):
            _logger.debug("Feature '%s' is disabled; passing '%s' through", rule.name, prop)
            return [base.Declaration(prop, value)]

        declarations: list[base.Declaration] = []
        for prefix in prefixes:
            declaration = rule.transform(prefix, value, prop)
            if declaration is None:
                _logger.debug("Rule '%s' has no syntax for prefix '%s'", rule.name, prefix)
                continue
            declarations.append(declaration)
        return declarations

    def _unregistered(self, prop: str, value: str) -> list[base.Declaration]:
        policy = self._context.settings.unknown_property
        if policy == "error":
            raise errors.UnregisteredPropertyError(prop)
        if policy == "silent":
            _logger.debug("No rule for '%s'; emitting nothing", prop)
            return []
        _logger.debug("No rule for '%s'; passing through unprefixed", prop)
        return [base.Declaration(prop, value)]


def autoprefix(
    prop: str,
    value: str,
    prefixes: _typing.Iterable[str],
    *,
    context: context_module.PrefixContext | None = None,
) -> list[base.Declaration]:
    """
    Prefix a declaration with the given (or default) context.

    See Autoprefixer.autoprefix.
    """
    if context is None:
        context = context_module.get_default_context()
    return Autoprefixer(context).autoprefix(prop, value, prefixes)
