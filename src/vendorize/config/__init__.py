"""
Configuration module for Vendorize.

Settings come from pydantic-settings; seed tables, feature toggles and
user overrides live in a two-tier PathConfigStore.
"""

from vendorize.config.seed import get_builtin_seed_path, load_seed, seed_defaults
from vendorize.config.settings import Settings
from vendorize.config.store import PathConfigStore
from vendorize.config.types import ValueKind, kind_of, merge_values

__all__ = [
    "PathConfigStore",
    "Settings",
    "ValueKind",
    "get_builtin_seed_path",
    "kind_of",
    "load_seed",
    "merge_values",
    "seed_defaults",
]
