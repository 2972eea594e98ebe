"""Locale state: context-local current locale and raw mode, process-wide fallback.

The current locale and the raw-mode flag live in ``contextvars.ContextVar``
cells. Every thread starts with its own empty context and every asyncio
task runs in a copy of its creator's context, so a value set in one
execution context is never visible in another. No locking is involved.

The fallback locale is the only process-wide mutable state. It is
write-once: the first successful ``set_fallback_locale()`` wins and later
calls are ignored. Writers serialize on a ``threading.Lock``; readers
do not lock.

Python 3.13+.
"""

from __future__ import annotations

import logging
import threading
from contextvars import ContextVar

from fluent_i18n.constants import DEFAULT_LOCALE
from fluent_i18n.identifier import LocaleIdentifier, parse_locale

__all__ = [
    "get_fallback_locale",
    "get_locale",
    "is_raw_mode",
    "set_fallback_locale",
    "set_raw_mode",
    "store_locale",
]

logger = logging.getLogger(__name__)

_current_locale: ContextVar[LocaleIdentifier | None] = ContextVar(
    "fluent_i18n_current_locale", default=None
)
_raw_mode: ContextVar[bool] = ContextVar("fluent_i18n_raw_mode", default=False)

_DEFAULT_LOCALE = parse_locale(DEFAULT_LOCALE)


class _FallbackLocale:
    """Write-once cell holding the process-wide fallback locale."""

    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: LocaleIdentifier | None = None

    def get(self) -> LocaleIdentifier | None:
        return self._value

    def set(self, locale: LocaleIdentifier) -> bool:
        """Store locale unless a value is already present.

        Returns:
            True if this call stored the value, False if it was ignored.
        """
        with self._lock:
            if self._value is not None:
                return False
            self._value = locale
            return True

    def _clear(self) -> None:
        """Forget the stored value. Test isolation only."""
        with self._lock:
            self._value = None


_fallback_locale = _FallbackLocale()


def set_fallback_locale(locale: str | LocaleIdentifier) -> bool:
    """Set the process-wide fallback locale (first caller wins).

    Concurrent first setters race on an internal lock; exactly one of
    them stores its value and every later call is a no-op.

    Args:
        locale: Locale string or identifier

    Returns:
        True if the fallback was stored by this call, False if a fallback
        was already set.

    Raises:
        LocaleParseError: If locale is a malformed string. The write-once
            slot stays free in that case.
    """
    identifier = locale if isinstance(locale, LocaleIdentifier) else parse_locale(locale)
    stored = _fallback_locale.set(identifier)
    if stored:
        logger.debug("Fallback locale set to %s", identifier)
    else:
        logger.debug(
            "Fallback locale already %s; ignoring %s", _fallback_locale.get(), identifier
        )
    return stored


def get_fallback_locale() -> LocaleIdentifier | None:
    """Return the process-wide fallback locale, or None if never set."""
    return _fallback_locale.get()


def store_locale(locale: LocaleIdentifier) -> None:
    """Store locale as current for this execution context only."""
    _current_locale.set(locale)


def get_locale() -> LocaleIdentifier:
    """Return the current locale.

    Lookup order:
    1. The locale stored in this execution context by set_locale()
    2. The process-wide fallback locale
    3. The default locale (en-US)

    Never fails and never blocks.
    """
    current = _current_locale.get()
    if current is not None:
        return current
    fallback = _fallback_locale.get()
    if fallback is not None:
        return fallback
    return _DEFAULT_LOCALE


def set_raw_mode(enabled: bool) -> None:
    """Enable or disable raw mode for this execution context.

    In raw mode lookups return the requested key instead of a translation,
    which makes it easy to see which keys a screen or report asks for.
    """
    _raw_mode.set(enabled)


def is_raw_mode() -> bool:
    """Return whether raw mode is enabled in this execution context."""
    return _raw_mode.get()
