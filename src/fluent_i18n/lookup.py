"""Lookup facade: current locale + argument coercion + catalog query.

``lookup()`` never raises for a missing key or bad arguments. It always
returns something renderable:

- raw mode: the key itself
- found: the formatted message
- missing everywhere: ``Unknown localization key: "<key>"``
- arguments that cannot be converted: ``{???}``

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from fluent_i18n.catalog import builtin_catalog
from fluent_i18n.constants import FALLBACK_INVALID, FALLBACK_MISSING_KEY
from fluent_i18n.state import get_locale, is_raw_mode
from fluent_i18n.value import ArgumentMap, coerce_args

if TYPE_CHECKING:
    from fluent_i18n.catalog import Catalog

__all__ = [
    "Translator",
    "lookup",
    "render_builtin",
]

logger = logging.getLogger(__name__)


def _render(catalog: Catalog, key: str, args: ArgumentMap | None, missing: str) -> str:
    if is_raw_mode():
        return key

    locale = get_locale()
    if args is None:
        value = catalog.lookup(locale, key)
    else:
        try:
            fluent_args = coerce_args(args)
        except TypeError as e:
            logger.warning("Invalid arguments for %r: %s", key, e)
            return FALLBACK_INVALID
        value = catalog.lookup_with_args(locale, key, fluent_args)

    if value is None:
        logger.debug("Key %r not found for locale %s", key, locale)
        return missing
    return value


def lookup(catalog: Catalog, key: str, args: ArgumentMap | None = None) -> str:
    """Translate key in the current execution context's locale.

    Args:
        catalog: Catalog to query (it applies its own fallback chain)
        key: Message identifier
        args: Interpolation arguments as a mapping or (name, value) pairs.
            Values go through to_fluent_value(); duplicate names resolve
            last-write-wins.

    Returns:
        The rendered message, the key itself in raw mode, or a diagnostic
        string naming the key when it is missing everywhere.

    Example:
        >>> lookup(catalog, "welcome", {"name": "Orhun"})
        'Welcome, Orhun!'
        >>> lookup(catalog, "no-such-key")
        'Unknown localization key: "no-such-key"'
    """
    return _render(catalog, key, args, FALLBACK_MISSING_KEY.format(key=key))


def render_builtin(key: str, args: ArgumentMap | None = None, *, default: str) -> str:
    """Render one of fluent-i18n's own messages.

    Used for error texts. A missing key yields ``default`` rather than the
    missing-key diagnostic, so rendering an error can never produce a
    message about another missing message.
    """
    return _render(builtin_catalog(), key, args, default)


class Translator:
    """Lookup bound to one catalog.

    Example:
        >>> t = Translator(load_catalog("locales", fallback="en-US"))
        >>> t("greeting")
        'Hello, world!'
        >>> t("welcome", name="Orhun")
        'Welcome, Orhun!'
        >>> t("welcome", {"name": "Orhun"}, name="Ayşe")  # keywords win
        'Welcome, Ayşe!'
    """

    __slots__ = ("_catalog",)

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def __repr__(self) -> str:
        return f"Translator({self._catalog!r})"

    def __call__(
        self, key: str, args: ArgumentMap | None = None, /, **kwargs: object
    ) -> str:
        if kwargs:
            pairs = [] if args is None else list(
                args.items() if isinstance(args, Mapping) else args
            )
            pairs.extend(kwargs.items())
            return lookup(self._catalog, key, pairs)
        return lookup(self._catalog, key, args)
