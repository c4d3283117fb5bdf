"""
Utility modules for Vendorize.

General-purpose helpers that don't belong to a specific domain.
"""

import vendorize.utils.frozen as frozen
import vendorize.utils.strings as strings
from vendorize.utils.frozen import FrozenMapping, freeze, thaw

__all__ = ["FrozenMapping", "freeze", "frozen", "strings", "thaw"]
