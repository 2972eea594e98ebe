"""fluent-i18n - Locale resolution and Fluent message lookup.

Resolves the active locale for each execution context (thread or asyncio
task) and renders translation strings from FTL catalogs, with a fail-soft
lookup contract: a lookup always returns a string.

Public API:
    set_locale - Resolve (explicit > environment > fallback > en-US) and store
    get_locale - Current locale of this execution context
    set_fallback_locale - Process-wide, write-once fallback locale
    set_raw_mode - Return keys instead of translations (this context only)
    Catalog - Per-locale FTL bundles with a fallback chain
    load_catalog - Load a catalog directory, optionally registering the fallback
    lookup - Translate a key against a catalog
    Translator - lookup() bound to a catalog
    to_fluent_value - Convert host values (paths, optionals) to arguments

Exceptions:
    FluentI18nError - Base exception class
    LocaleParseError - Malformed locale string

Python 3.13+.
"""

from .catalog import Catalog, load_catalog
from .constants import DEFAULT_LOCALE
from .diagnostics import FluentI18nError, LocaleParseError
from .identifier import LocaleIdentifier, parse_locale
from .lookup import Translator, lookup
from .resolver import resolve_locale, set_locale
from .state import (
    get_fallback_locale,
    get_locale,
    is_raw_mode,
    set_fallback_locale,
    set_raw_mode,
)
from .value import to_fluent_value

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("fluent-i18n")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "DEFAULT_LOCALE",
    "Catalog",
    "FluentI18nError",
    "LocaleIdentifier",
    "LocaleParseError",
    "Translator",
    "__version__",
    "get_fallback_locale",
    "get_locale",
    "is_raw_mode",
    "load_catalog",
    "lookup",
    "parse_locale",
    "resolve_locale",
    "set_fallback_locale",
    "set_locale",
    "set_raw_mode",
    "to_fluent_value",
]
