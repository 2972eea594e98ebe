"""Locale utilities: environment detection and POSIX value cleanup.

Python 3.13+.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from fluent_i18n.constants import LOCALE_ENV_VARS, PSEUDO_LOCALES

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

__all__ = [
    "get_system_locale",
    "strip_posix_suffixes",
]


def strip_posix_suffixes(value: str) -> str:
    """Remove the codeset and modifier from a POSIX locale value.

    Example:
        >>> strip_posix_suffixes("de_DE.UTF-8@euro")
        'de_DE'
    """
    return value.split("@", 1)[0].split(".", 1)[0]


def get_system_locale(
    environ: Mapping[str, str] | None = None,
    env_vars: Sequence[str] = LOCALE_ENV_VARS,
) -> str | None:
    """Detect the user's locale from environment variables.

    Detection order (first present wins):
    1. LANGUAGE (colon-separated list; first non-empty entry)
    2. LC_ALL
    3. LC_MESSAGES
    4. LANG

    Empty values and the "C" / "POSIX" pseudo-locales count as absent.
    Codeset and modifier suffixes are stripped; the remainder is returned
    without validation so callers can report a malformed value verbatim.

    Args:
        environ: Environment mapping to read (default: os.environ)
        env_vars: Variable names in priority order

    Returns:
        Detected locale string (e.g. "ja_JP"), or None if no variable
        carries a locale.

    Example:
        >>> get_system_locale({"LANG": "de_DE.UTF-8"})
        'de_DE'
        >>> get_system_locale({"LANG": "C.UTF-8"}) is None
        True
    """
    if environ is None:
        environ = os.environ

    for var in env_vars:
        raw = environ.get(var)
        if not raw:
            continue
        # ':' never appears inside a single locale value.
        for entry in raw.split(":"):
            value = strip_posix_suffixes(entry.strip())
            if value and value not in PSEUDO_LOCALES:
                return value

    return None
