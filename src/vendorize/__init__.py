"""
Vendorize - vendor prefixes for CSS declarations.

Expands a property/value pair into the prefixed and spec-variant
declarations needed for a set of vendor prefixes.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("vendorize")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "Vendorize Contributors"

from vendorize.config import Settings  # noqa: E402
from vendorize.context import PrefixContext, create_context  # noqa: E402
from vendorize.driver import Autoprefixer, autoprefix  # noqa: E402
from vendorize.rules.base import Declaration  # noqa: E402

__all__ = [
    "__version__",
    "__version_info__",
    "Autoprefixer",
    "Declaration",
    "PrefixContext",
    "Settings",
    "autoprefix",
    "create_context",
]
