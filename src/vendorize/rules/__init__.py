"""
Prefix rules for Vendorize.

One rule per CSS feature family. Rules are grouped into modules that each
export a RULES tuple; install_rule_modules registers them into a RuleSet.
"""

from vendorize.rules.base import Declaration, PrefixedPropertyRule, PrefixRule
from vendorize.rules.registry import BUILTIN_RULE_MODULES, RuleSet, install_rule_modules

__all__ = [
    "BUILTIN_RULE_MODULES",
    "Declaration",
    "PrefixRule",
    "PrefixedPropertyRule",
    "RuleSet",
    "install_rule_modules",
]
