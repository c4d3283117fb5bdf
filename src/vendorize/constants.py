"""
Shared constants for Vendorize.

This module provides a single source of truth for prefix tokens and
default values that are used across multiple modules.
"""

# Vendor prefix tokens
WEBKIT = "-webkit-"
"""WebKit/Blink prefix (final flexbox spec for WebKit)."""

MOZ = "-moz-"
"""Gecko prefix."""

MS = "-ms-"
"""Trident/EdgeHTML prefix."""

O = "-o-"  # noqa: E741
"""Presto prefix."""

NO_PREFIX = ""
"""No prefix: the final, unprefixed syntax."""

WEBKIT_2009 = "-webkit- 2009"
"""Synthetic token selecting the 2009 flexbox syntax with the WebKit prefix."""

VENDOR_PREFIXES = (WEBKIT, MOZ, MS, O)
"""Real vendor prefixes, in conventional output order."""

# Config defaults
DEFAULT_PATH_DELIMITER = "."
"""Separator between segments of a config path string."""

FEATURES_KEY = "features"
"""Top-level config key holding feature toggles."""

REMAPS_KEY = "remaps"
"""Top-level config key holding keyword remap tables."""
