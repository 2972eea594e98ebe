"""Shared constants for fluent-i18n.

Constants are grouped by domain:
- Locale defaults: The hard default and environment probe order
- Catalog layout: File naming for on-disk FTL resources
- Fallback strings: What a lookup renders when it cannot translate

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "LOCALE_ENV_VARS",
    "PSEUDO_LOCALES",
    "MAX_LOCALE_CACHE_SIZE",
    # Catalog layout
    "FTL_SUFFIX",
    "ERROR_LOCALE_PARSE_KEY",
    # Fallback strings
    "FALLBACK_INVALID",
    "FALLBACK_MISSING_KEY",
    "FALLBACK_LOCALE_PARSE_MESSAGE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Used when nothing was set explicitly, detected, or configured as fallback.
DEFAULT_LOCALE: str = "en-US"

# Environment variables consulted when no explicit locale is given.
# Order follows GNU gettext precedence for message catalogs.
# LANGUAGE may carry a colon-separated priority list.
LOCALE_ENV_VARS: tuple[str, ...] = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")

# POSIX pseudo-locales that carry no language information.
PSEUDO_LOCALES: frozenset[str] = frozenset({"C", "POSIX"})

# Maximum cached parse_locale() results.
# Distinct tags in a process are few (explicit input, env, catalog dirs).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# CATALOG LAYOUT
# ============================================================================

# Resource files picked up by Catalog.from_directory().
FTL_SUFFIX: str = ".ftl"

# Message id used to render LocaleParseError text. Always shipped in
# fluent_i18n/locales/en-US.
ERROR_LOCALE_PARSE_KEY: str = "error-locale-parse"

# ============================================================================
# FALLBACK STRINGS
# ============================================================================

# Arguments could not be converted to catalog values.
FALLBACK_INVALID: str = "{???}"

# Key absent from the current locale and every catalog fallback.
# Format string - use .format(key=...)
FALLBACK_MISSING_KEY: str = 'Unknown localization key: "{key}"'

# Last resort for LocaleParseError when the package's own catalog
# cannot provide ERROR_LOCALE_PARSE_KEY.
FALLBACK_LOCALE_PARSE_MESSAGE: str = 'Could not parse locale "{locale}"'
