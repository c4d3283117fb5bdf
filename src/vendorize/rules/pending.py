"""
Features that are registered and toggleable but not yet specialised.

These rules follow the generic contract only: the normalized prefix is
prepended to the declared property and the value is left alone. Each is
marked complete = False so tooling can list what still needs a dedicated
transform.

Value-level features (gradient, image-set, ...) and selector features
(fullscreen, placeholder) claim no property names. They are reachable by
rule name only and emit nothing, since "<prefix>gradient: ..." is not a
CSS declaration.
"""

from __future__ import annotations

import vendorize.rules.base as base


class PendingRule(base.PrefixedPropertyRule):
    """Generic prefixing for a feature without a dedicated transform."""

    complete = False

    def transform(
        self,
        prefix: str,
        value: str,
        prop: str | None = None,
    ) -> base.Declaration | None:
        if not self.names:
            return None
        return super().transform(prefix, value, prop)


class Flex(PendingRule):
    name = "flex"
    names = ("flex", "box-flex")


class Order(PendingRule):
    name = "order"
    names = ("order", "box-ordinal-group", "flex-order")


class Filter(PendingRule):
    name = "filter"
    names = ("filter",)


class FlexFlow(PendingRule):
    name = "flex-flow"
    names = ("flex-flow", "box-orient", "box-direction")


class Gradient(PendingRule):
    name = "gradient"


class Pixelated(PendingRule):
    name = "pixelated"


class ImageRendering(PendingRule):
    name = "image-rendering"
    names = ("image-rendering", "interpolation-mode")


class JustifyContent(PendingRule):
    name = "justify-content"
    names = ("justify-content", "box-pack", "flex-pack")


class TransformDecl(PendingRule):
    name = "transform-decl"
    names = ("transform", "transform-origin")


class TransformValue(PendingRule):
    name = "transform-value"


class FillAvailable(PendingRule):
    name = "fill-available"


class DisplayFlex(PendingRule):
    name = "display-flex"


class MaskBorder(PendingRule):
    name = "mask-border"
    names = (
        "mask-border",
        "mask-border-source",
        "mask-border-slice",
        "mask-border-width",
        "mask-border-outset",
        "mask-border-repeat",
        "mask-box-image",
    )


class ImageSet(PendingRule):
    name = "image-set"


class Fullscreen(PendingRule):
    name = "fullscreen"


class Placeholder(PendingRule):
    name = "placeholder"


class FlexValues(PendingRule):
    name = "flex-values"
    names = ("transition", "transition-property")


RULES: tuple[type[base.PrefixRule], ...] = (
    Flex,
    Order,
    Filter,
    FlexFlow,
    Gradient,
    Pixelated,
    ImageRendering,
    JustifyContent,
    TransformDecl,
    TransformValue,
    FillAvailable,
    DisplayFlex,
    MaskBorder,
    ImageSet,
    Fullscreen,
    Placeholder,
    FlexValues,
)
