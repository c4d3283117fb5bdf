"""
Border rules: border-image and border-radius.

Prefixed border-image implementations predate the `fill` keyword and drop
the whole declaration when they see it.

Gecko's prefixed corner radii used a different naming scheme:
border-top-left-radius was -moz-border-radius-topleft.
"""

from __future__ import annotations

import vendorize.constants as constants
import vendorize.rules.base as base
import vendorize.spec as spec
import vendorize.utils.strings as strings


class BorderImage(base.PrefixRule):
    name = "border-image"
    names = ("border-image",)

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        prefix = spec.normalize_prefix(prefix)
        if prefix:
            value = strings.collapse_spaces(strings.str_replace(value, "fill", "", all=True))
        return base.Declaration(prefix + "border-image", value)


def _corner_names() -> tuple[dict[str, str], dict[str, str]]:
    """Build the standard <-> Mozilla corner name maps."""
    to_mozilla: dict[str, str] = {}
    to_normal: dict[str, str] = {}
    for vertical in ("top", "bottom"):
        for horizontal in ("left", "right"):
            normal = f"border-{vertical}-{horizontal}-radius"
            mozilla = f"border-radius-{vertical}{horizontal}"
            to_mozilla[normal] = mozilla
            to_normal[mozilla] = normal
    return to_mozilla, to_normal


TO_MOZILLA, TO_NORMAL = _corner_names()


class BorderRadius(base.PrefixRule):
    """border-radius and the four corner longhands in both namings."""

    name = "border-radius"
    names = ("border-radius", *TO_MOZILLA, *TO_NORMAL)

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        prop = prop or self.default_property()
        prefix = spec.normalize_prefix(prefix)
        if prefix == constants.MOZ:
            return base.Declaration(prefix + TO_MOZILLA.get(prop, prop), value)
        return base.Declaration(prefix + TO_NORMAL.get(prop, prop), value)


RULES: tuple[type[base.PrefixRule], ...] = (BorderImage, BorderRadius)
