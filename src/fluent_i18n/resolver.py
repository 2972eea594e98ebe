"""Locale resolution: decide the effective locale for an execution context.

Resolution order, first success wins:
1. The explicit locale passed by the caller
2. The first locale signal found in the environment
3. The process-wide fallback locale
4. The default locale (en-US)

A malformed value at step 1 or step 2 raises LocaleParseError. Step 2 in
particular does NOT skip a malformed environment value and fall through
to the fallback; callers that prefer that behaviour can catch the error
and call set_locale() again with an explicit locale.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fluent_i18n.constants import DEFAULT_LOCALE
from fluent_i18n.identifier import LocaleIdentifier, parse_locale
from fluent_i18n.locale_utils import get_system_locale
from fluent_i18n.state import get_fallback_locale, store_locale

if TYPE_CHECKING:
    from collections.abc import Mapping

__all__ = ["resolve_locale", "set_locale"]

logger = logging.getLogger(__name__)


def resolve_locale(
    explicit: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> LocaleIdentifier:
    """Resolve the effective locale without storing it.

    Pure apart from reading the environment: no caching, no retries.

    Args:
        explicit: Locale requested by the caller, or None to detect
        environ: Environment mapping to read (default: os.environ)

    Returns:
        The resolved LocaleIdentifier

    Raises:
        LocaleParseError: If the explicit locale, or the detected
            environment locale, is malformed.

    Example:
        >>> str(resolve_locale("fr_FR"))
        'fr-FR'
        >>> str(resolve_locale(environ={}))  # nothing set anywhere
        'en-US'
    """
    if explicit is not None:
        return parse_locale(explicit)

    detected = get_system_locale(environ)
    if detected is not None:
        logger.debug("Detected locale %r from environment", detected)
        return parse_locale(detected)

    fallback = get_fallback_locale()
    if fallback is not None:
        return fallback

    return parse_locale(DEFAULT_LOCALE)


def set_locale(
    explicit: str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> LocaleIdentifier:
    """Resolve a locale and make it current for this execution context.

    Other threads and asyncio tasks are unaffected. On failure nothing is
    stored and the previous locale stays current.

    Args:
        explicit: Locale requested by the caller, or None to detect
        environ: Environment mapping to read (default: os.environ)

    Returns:
        The LocaleIdentifier now current in this context

    Raises:
        LocaleParseError: See resolve_locale()
    """
    locale = resolve_locale(explicit, environ=environ)
    store_locale(locale)
    logger.debug("Current locale set to %s", locale)
    return locale
