"""
Glue between browser/version pairs and prefix tokens.

Version-range queries are resolved elsewhere; this module only maps the
resulting (browser, version) pairs onto the prefix tokens the driver
takes, using the seed tables in the config store:

- browserslist-aliases: alternate browser names
- browserslist-major: browsers counted as major
- browser-prefixes: vendor prefix per browser
- flexbox-2009: last version of a WebKit browser limited to 2009 flexbox
"""

from __future__ import annotations

import logging as _logging
import re as _re
import typing as _typing

import vendorize.constants as constants

if _typing.TYPE_CHECKING:
    import vendorize.config.store as _store

_logger = _logging.getLogger(__name__)

_VERSION_PART = _re.compile(r"\d+")


def _table(store: _store.PathConfigStore, key: str) -> _typing.Any:
    return store.get(key) if store.has(key) else None


def normalize_browser(store: _store.PathConfigStore, name: str) -> str:
    """
    Lower-case a browser name and resolve aliases.

    Example:
        >>> normalize_browser(store, "FF")
        'firefox'
    """
    name = name.strip().lower()
    aliases = _table(store, "browserslist-aliases") or {}
    return aliases.get(name, name)


def is_major(store: _store.PathConfigStore, name: str) -> bool:
    """Check if a browser is listed in browserslist-major."""
    major = _table(store, "browserslist-major") or []
    return normalize_browser(store, name) in major


def parse_version(version: str) -> tuple[int, ...]:
    """
    Parse the lower bound of a version or version range.

    "4.4.3-4.4.4" parses as (4, 4, 3); "TP" or "all" parse as ().
    """
    lower = version.split("-", 1)[0]
    return tuple(int(part) for part in _VERSION_PART.findall(lower))


def uses_flexbox_2009(store: _store.PathConfigStore, browser: str, version: str) -> bool:
    """Check whether a browser version only supports the 2009 flexbox syntax."""
    ceilings = _table(store, "flexbox-2009") or {}
    ceiling = ceilings.get(normalize_browser(store, browser))
    if ceiling is None:
        return False
    parsed = parse_version(version)
    return bool(parsed) and parsed <= parse_version(str(ceiling))


def prefixes_for(
    store: _store.PathConfigStore,
    browsers: _typing.Iterable[tuple[str, str]],
) -> list[str]:
    """
    Map (browser, version) pairs to prefix tokens.

    Tokens are ordered by first appearance and deduplicated. Old WebKit
    browsers add the "-webkit- 2009" token before their plain prefix.
    Unknown browsers are skipped.

    Args:
        store: Store holding the seed tables.
        browsers: Pairs such as ("chrome", "20").

    Returns:
        Prefix tokens for Autoprefixer.autoprefix.
    """
    table = _table(store, "browser-prefixes") or {}
    tokens: list[str] = []
    for browser, version in browsers:
        name = normalize_browser(store, browser)
        prefix = table.get(name)
        if prefix is None:
            _logger.debug("No prefix known for browser '%s'", browser)
            continue
        candidates = [prefix]
        if prefix == constants.WEBKIT and uses_flexbox_2009(store, name, version):
            candidates.insert(0, constants.WEBKIT_2009)
        for token in candidates:
            if token not in tokens:
                tokens.append(token)
    return tokens
