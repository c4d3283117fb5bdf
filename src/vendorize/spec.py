"""
Spec era resolution for vendor prefix tokens.

Flexbox went through three syntaxes: the 2009 box-* draft, the 2012
"tweener" draft shipped by IE10 and the final spec. Which one a prefix
targets is fixed per token:

    -webkit- 2009   2009    (normalized to -webkit-)
    -moz-           2009
    -ms-            2012
    -webkit-        final
    anything else   none
"""

from __future__ import annotations

import enum as _enum

import vendorize.constants as constants


class SpecEra(_enum.Enum):
    """Historical specification revision targeted by a prefix."""

    FLEXBOX_2009 = 2009
    FLEXBOX_2012 = 2012
    FINAL = "final"
    NONE = ""


_ERAS: dict[str, tuple[SpecEra, str]] = {
    constants.WEBKIT_2009: (SpecEra.FLEXBOX_2009, constants.WEBKIT),
    constants.MOZ: (SpecEra.FLEXBOX_2009, constants.MOZ),
    constants.MS: (SpecEra.FLEXBOX_2012, constants.MS),
    constants.WEBKIT: (SpecEra.FINAL, constants.WEBKIT),
}


def resolve_spec(prefix: str) -> tuple[SpecEra, str]:
    """
    Determine the spec era for a prefix token and normalize the token.

    Example:
        >>> resolve_spec("-webkit- 2009")
        (<SpecEra.FLEXBOX_2009: 2009>, '-webkit-')
        >>> resolve_spec("-o-")
        (<SpecEra.NONE: ''>, '-o-')
    """
    return _ERAS.get(prefix, (SpecEra.NONE, prefix))


def normalize_prefix(prefix: str) -> str:
    """Return the real vendor prefix for a token."""
    return resolve_spec(prefix)[1]
