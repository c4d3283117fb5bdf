"""
Fragmentation breaks: break-inside, break-before, break-after.

Before the unified fragmentation spec, WebKit only had column breaks
(-webkit-column-break-*) and Gecko only page breaks (page-break-*).
Neither understands the avoid-column / avoid-page values, which collapse
to plain `avoid`. Values with no legacy equivalent (avoid-region, and
avoid-page for WebKit's column breaks) stay on the unified property.
"""

from __future__ import annotations

import vendorize.constants as constants
import vendorize.rules.base as base
import vendorize.spec as spec


def canonical_break(prop: str) -> str:
    """Map any break property spelling to break-inside/before/after."""
    if "inside" in prop:
        return "break-inside"
    if "before" in prop:
        return "break-before"
    return "break-after"


class BreakProps(base.PrefixRule):
    name = "break-props"
    names = tuple(
        f"{family}break-{position}"
        for position in ("inside", "before", "after")
        for family in ("", "page-", "column-")
    )

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        prop = prop or self.default_property()
        prefix = spec.normalize_prefix(prefix)
        canonical = canonical_break(prop)
        inside = "inside" in prop

        if prefix == constants.WEBKIT:
            target = f"{prefix}column-{canonical}"
        elif prefix == constants.MOZ:
            target = f"page-{canonical}"
        else:
            target = canonical

        new_value = value
        if (prefix and inside and value == "avoid-column") or value == "avoid-page":
            new_value = "avoid"

        if (
            value == "avoid-region"
            or (value == "avoid-page" and prefix == constants.WEBKIT)
            or (inside and prefix != constants.WEBKIT)
        ):
            target = canonical

        return base.Declaration(target, new_value)


RULES: tuple[type[base.PrefixRule], ...] = (BreakProps,)
