"""appearance: only `none` (dropping native widget chrome) gets the prefix."""

from __future__ import annotations

import vendorize.rules.base as base
import vendorize.spec as spec


class Appearance(base.PrefixRule):
    name = "appearance"
    names = ("appearance",)

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        if value == "none":
            return base.Declaration(spec.normalize_prefix(prefix) + "appearance", value)
        return base.Declaration("appearance", value)


RULES: tuple[type[base.PrefixRule], ...] = (Appearance,)
