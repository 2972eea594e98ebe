"""Translation catalogs: per-locale FTL bundles with a fallback chain.

A Catalog owns one ``ftllexengine.FluentBundle`` per available locale and
answers ``(locale, key)`` queries. Each query walks a chain built from the
requested locale:

1. Available locales matching the request, best match first
   (exact tag, then same tag ignoring variants, then the bare language,
   then the same language in another region or script)
2. The catalog's own fallback locale

This chain is independent of the process-wide fallback used by locale
resolution: the resolver decides WHICH locale is current, the catalog
decides where to look when that locale lacks a key.

Catalogs are built once at startup and are read-only afterwards, so
concurrent lookups need no locking.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import TYPE_CHECKING

from ftllexengine import FluentBundle

from fluent_i18n.constants import DEFAULT_LOCALE, FTL_SUFFIX
from fluent_i18n.identifier import LocaleIdentifier, parse_locale
from fluent_i18n.state import set_fallback_locale

if TYPE_CHECKING:
    from os import PathLike

    from ftllexengine import FluentValue

__all__ = [
    "Catalog",
    "builtin_catalog",
    "load_catalog",
]

logger = logging.getLogger(__name__)

_BUILTIN_LOCALES_DIR = Path(__file__).parent / "locales"


def _as_identifier(locale: str | LocaleIdentifier) -> LocaleIdentifier:
    return locale if isinstance(locale, LocaleIdentifier) else parse_locale(locale)


class Catalog:
    """Multi-locale message catalog with a per-catalog fallback locale.

    Example - Disk-based resources:
        >>> catalog = Catalog.from_directory("locales", fallback="en-US")
        >>> catalog.lookup("fr-FR", "greeting")
        'Bonjour, le monde!'

    Example - Direct resource provision:
        >>> catalog = Catalog(fallback="en")
        >>> catalog.add_resource("lv", "welcome = Sveiki, { $name }!")
        >>> catalog.add_resource("en", "welcome = Hello, { $name }!\\nbye = Bye!")
        >>> catalog.lookup_with_args("lv", "welcome", {"name": "Anna"})
        'Sveiki, Anna!'
        >>> catalog.lookup("lv", "bye")  # from the fallback locale
        'Bye!'
        >>> catalog.lookup("lv", "nope") is None
        True

    Attributes:
        fallback_locale: Locale appended to every lookup chain
        use_isolating: Whether placeables are wrapped in Unicode bidi
            isolation marks (off by default)
    """

    __slots__ = ("_bundles", "_fallback", "_use_isolating")

    def __init__(
        self,
        fallback: str | LocaleIdentifier = DEFAULT_LOCALE,
        *,
        use_isolating: bool = False,
    ) -> None:
        """Initialize an empty catalog.

        Args:
            fallback: Locale consulted after the requested locale's matches
            use_isolating: Wrap interpolated values in FSI/PDI marks. Off by
                default so Latin names inside RTL text render as typed.

        Raises:
            LocaleParseError: If fallback is a malformed string
        """
        self._fallback = _as_identifier(fallback)
        self._use_isolating = use_isolating
        self._bundles: dict[LocaleIdentifier, FluentBundle] = {}

    @classmethod
    def from_directory(
        cls,
        directory: str | PathLike[str],
        fallback: str | LocaleIdentifier = DEFAULT_LOCALE,
        *,
        use_isolating: bool = False,
    ) -> Catalog:
        """Build a catalog from a directory of per-locale FTL files.

        Layout::

            locales/
                en-US/
                    main.ftl
                    errors.ftl
                fr-FR/
                    main.ftl

        Every sub-directory name must be a locale tag. All ``*.ftl`` files
        below it (recursively, in sorted order) are added to that locale.

        Args:
            directory: Root directory holding one sub-directory per locale
            fallback: Catalog fallback locale
            use_isolating: See Catalog()

        Returns:
            Loaded Catalog

        Raises:
            FileNotFoundError: If directory does not exist
            LocaleParseError: If a sub-directory name is not a locale tag
            OSError: If a resource file cannot be read
        """
        root = Path(directory)
        if not root.is_dir():
            msg = f"Locale directory not found: '{root}'"
            raise FileNotFoundError(msg)

        catalog = cls(fallback, use_isolating=use_isolating)
        loaded = 0
        for locale_dir in sorted(path for path in root.iterdir() if path.is_dir()):
            locale = parse_locale(locale_dir.name)
            for ftl_path in sorted(locale_dir.rglob(f"*{FTL_SUFFIX}")):
                logger.debug("Loading %s for %s", ftl_path, locale)
                catalog.add_resource(locale, ftl_path.read_text(encoding="utf-8"))
                loaded += 1

        logger.info(
            "Loaded %d resource(s) for %d locale(s) from %s",
            loaded,
            len(catalog._bundles),
            root,
        )
        if catalog._fallback not in catalog._bundles:
            logger.warning(
                "Fallback locale %s has no resources in %s", catalog._fallback, root
            )
        return catalog

    @property
    def fallback_locale(self) -> LocaleIdentifier:
        """Locale appended to every lookup chain."""
        return self._fallback

    @property
    def use_isolating(self) -> bool:
        return self._use_isolating

    @property
    def locales(self) -> tuple[LocaleIdentifier, ...]:
        """Locales with at least one resource, sorted by tag."""
        return tuple(sorted(self._bundles, key=str))

    def __repr__(self) -> str:
        tags = ", ".join(str(locale) for locale in self.locales)
        return f"Catalog(locales=[{tags}], fallback={self._fallback})"

    def add_resource(self, locale: str | LocaleIdentifier, source: str) -> None:
        """Add FTL source to a locale, creating its bundle on first use.

        Meant for startup; catalogs are treated as read-only once lookups
        begin. Bundles are non-strict: formatting errors are reported
        alongside the engine's best-effort output instead of raising.

        Raises:
            LocaleParseError: If locale is a malformed string
        """
        identifier = _as_identifier(locale)
        bundle = self._bundles.get(identifier)
        if bundle is None:
            bundle = FluentBundle(
                str(identifier), use_isolating=self._use_isolating, strict=False
            )
            self._bundles[identifier] = bundle
        bundle.add_resource(source)

    def fallback_chain(self, locale: str | LocaleIdentifier) -> tuple[LocaleIdentifier, ...]:
        """Locales consulted, in order, when looking up a key for locale.

        Example:
            >>> catalog = Catalog(fallback="en-US")
            >>> for tag in ("en-US", "fr", "fr-CA"):
            ...     catalog.add_resource(tag, "x = x")
            >>> [str(loc) for loc in catalog.fallback_chain("fr-FR")]
            ['fr', 'fr-CA', 'en-US']
        """
        requested = _as_identifier(locale)
        chain = list(dict.fromkeys(self._negotiate(requested)))
        if self._fallback not in chain:
            chain.append(self._fallback)
        return tuple(chain)

    def _negotiate(self, requested: LocaleIdentifier) -> Iterator[LocaleIdentifier]:
        available = self.locales
        language = requested.language_only()
        tiers: tuple[Callable[[LocaleIdentifier], bool], ...] = (
            lambda loc: loc == requested,
            lambda loc: loc.matches(requested, ignore_variants=True),
            lambda loc: loc.region is None
            and loc.language == requested.language
            and loc.script in (None, requested.script),
            lambda loc: loc.language_only() == language,
        )
        for matches in tiers:
            yield from (loc for loc in available if matches(loc))

    def has_message(self, locale: str | LocaleIdentifier, key: str) -> bool:
        """Check whether key resolves anywhere in locale's fallback chain."""
        return self._find_bundle(_as_identifier(locale), key) is not None

    def lookup(self, locale: str | LocaleIdentifier, key: str) -> str | None:
        """Format key without arguments.

        Returns:
            Formatted message, or None if no locale in the chain has key
        """
        return self._format(locale, key, None)

    def lookup_with_args(
        self,
        locale: str | LocaleIdentifier,
        key: str,
        args: Mapping[str, FluentValue],
    ) -> str | None:
        """Format key with interpolation arguments.

        An argument referenced by the message but missing from args is
        rendered by the engine as ``{$name}``; it does not make the lookup
        fail.

        Returns:
            Formatted message, or None if no locale in the chain has key
        """
        return self._format(locale, key, args)

    def _find_bundle(
        self, locale: LocaleIdentifier, key: str
    ) -> tuple[LocaleIdentifier, FluentBundle] | None:
        for candidate in self.fallback_chain(locale):
            bundle = self._bundles.get(candidate)
            if bundle is not None and bundle.has_message(key):
                return candidate, bundle
        return None

    def _format(
        self,
        locale: str | LocaleIdentifier,
        key: str,
        args: Mapping[str, FluentValue] | None,
    ) -> str | None:
        requested = _as_identifier(locale)
        found = self._find_bundle(requested, key)
        if found is None:
            return None

        resolved, bundle = found
        value, errors = bundle.format_pattern(key, args)
        if errors:
            logger.debug(
                "Formatting %r for %s produced %d error(s): %s",
                key,
                resolved,
                len(errors),
                "; ".join(str(error) for error in errors),
            )
        if resolved != requested:
            logger.debug("Resolved %r from %s (requested %s)", key, resolved, requested)
        return value


def load_catalog(
    directory: str | PathLike[str],
    fallback: str | None = None,
) -> Catalog:
    """Load a catalog and, optionally, register the process fallback locale.

    With ``fallback`` given, the catalog falls back to it AND it becomes the
    process-wide fallback locale used by resolution (write-once: ignored if
    a fallback was already registered). Without it, the catalog falls back
    to en-US and the process fallback is left alone.

    Args:
        directory: Root directory holding one sub-directory per locale
        fallback: Fallback locale tag

    Returns:
        Loaded Catalog
    """
    catalog = Catalog.from_directory(
        directory, fallback if fallback is not None else DEFAULT_LOCALE
    )
    if fallback is not None:
        set_fallback_locale(catalog.fallback_locale)
    return catalog


@functools.cache
def builtin_catalog() -> Catalog:
    """Catalog holding fluent-i18n's own messages (error texts)."""
    return Catalog.from_directory(_BUILTIN_LOCALES_DIR, DEFAULT_LOCALE)
