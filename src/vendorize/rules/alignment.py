"""
Flexbox alignment rules: align-content, align-items, align-self.

Each maps the final-spec property onto the 2009 (box-*) or 2012 (flex-*)
property for the prefix's spec era, translating keywords through the
remaps.<rule> tables where the older vocabulary differs.
"""

from __future__ import annotations

import vendorize.rules.base as base
import vendorize.spec as spec


class AlignContent(base.PrefixRule):
    """align-content, which the 2009 draft has no equivalent for."""

    name = "align-content"
    names = ("align-content", "flex-line-pack")

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        era, prefix = spec.resolve_spec(prefix)
        if era is spec.SpecEra.FLEXBOX_2012:
            return base.Declaration(prefix + "flex-line-pack", self.remap(value))
        if era is spec.SpecEra.FINAL:
            return base.Declaration(prefix + "align-content", value)
        if era is spec.SpecEra.FLEXBOX_2009:
            return None
        return base.Declaration("align-content", value)


class AlignItems(base.PrefixRule):
    """align-items: box-align in 2009, flex-align in 2012."""

    name = "align-items"
    names = ("align-items", "box-align", "flex-align")

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        era, prefix = spec.resolve_spec(prefix)
        if era is spec.SpecEra.FLEXBOX_2009:
            return base.Declaration(prefix + "box-align", self.remap(value))
        if era is spec.SpecEra.FLEXBOX_2012:
            return base.Declaration(prefix + "flex-align", self.remap(value))
        return base.Declaration(prefix + "align-items", value)


class AlignSelf(base.PrefixRule):
    """align-self: flex-item-align in 2012."""

    name = "align-self"
    names = ("align-self", "flex-item-align")

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        era, prefix = spec.resolve_spec(prefix)
        if era is spec.SpecEra.FLEXBOX_2012:
            return base.Declaration(prefix + "flex-item-align", self.remap(value))
        return base.Declaration(prefix + "align-self", value)


RULES: tuple[type[base.PrefixRule], ...] = (AlignContent, AlignItems, AlignSelf)
