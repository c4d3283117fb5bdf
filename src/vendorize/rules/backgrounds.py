"""
background-size.

Old Android and iOS WebKit read a single length as "width and height
auto" instead of "both", so for -webkit- every value other than the
contain/cover keywords is written twice.
"""

from __future__ import annotations

import vendorize.constants as constants
import vendorize.rules.base as base
import vendorize.spec as spec
import vendorize.utils.strings as strings

_KEYWORDS = ("contain", "cover")


class BackgroundSize(base.PrefixRule):
    name = "background-size"
    names = ("background-size",)

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        prefix = spec.normalize_prefix(prefix)
        if prefix == constants.WEBKIT and value not in _KEYWORDS:
            value = strings.join([value, value], " ")
        return base.Declaration(prefix + "background-size", value)


RULES: tuple[type[base.PrefixRule], ...] = (BackgroundSize,)
