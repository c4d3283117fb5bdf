"""
Block-axis logical properties.

The final spec names them *-block-start / *-block-end; Gecko and WebKit
shipped them earlier as prefixed *-before / *-after.
"""

from __future__ import annotations

import vendorize.constants as constants
import vendorize.rules.base as base
import vendorize.spec as spec
import vendorize.utils.strings as strings

_BOXES = ("border", "margin", "padding")

_LEGACY_PREFIXES = (constants.WEBKIT, constants.MOZ)


def _to_legacy(prop: str) -> str:
    if "-start" in prop:
        return strings.str_replace(prop, "-block-start", "-before")
    return strings.str_replace(prop, "-block-end", "-after")


def _to_logical(prop: str) -> str:
    if "-before" in prop:
        return strings.str_replace(prop, "-before", "-block-start")
    return strings.str_replace(prop, "-after", "-block-end")


class BlockLogical(base.PrefixRule):
    name = "block-logical"
    names = tuple(
        f"{box}-{side}"
        for side in ("block-start", "block-end", "before", "after")
        for box in _BOXES
    )

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        prop = prop or self.default_property()
        prefix = spec.normalize_prefix(prefix)
        if prefix in _LEGACY_PREFIXES:
            return base.Declaration(prefix + _to_legacy(prop), value)
        return base.Declaration(prefix + _to_logical(prop), value)


RULES: tuple[type[base.PrefixRule], ...] = (BlockLogical,)
