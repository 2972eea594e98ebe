"""Conversion of host values into catalog argument values.

The catalog engine accepts str, numbers, Decimal, dates and None as
interpolation arguments. This module maps the wider set of values that
application code naturally holds onto that set:

- Filesystem paths become text via lossy UTF-8 decoding. Bytes that are
  not valid UTF-8 are replaced with U+FFFD instead of being rejected.
- An absent optional (None) stays None, the engine's explicit "no value".
  It is deliberately not turned into "", because select expressions and
  placeables treat a present empty string and an absent value differently.

Python 3.13+.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ftllexengine import FluentValue

__all__ = [
    "ArgumentMap",
    "coerce_args",
    "path_to_str",
    "to_fluent_value",
]

type ArgumentMap = Mapping[str, object] | Iterable[tuple[str, object]]
"""Arguments as a mapping or as (name, value) pairs; later pairs win."""


def path_to_str(path: os.PathLike[str] | os.PathLike[bytes] | bytes) -> str:
    """Render a path as text, replacing undecodable bytes.

    Paths that came from the OS may hold bytes that are not valid UTF-8
    (kept as surrogate escapes in ``str`` paths on POSIX). They are
    re-encoded to their original bytes and decoded with replacement.

    Example:
        >>> path_to_str(b"/tmp/caf\\xe9.txt")
        '/tmp/caf\\ufffd.txt'
    """
    raw = path if isinstance(path, bytes) else os.fsencode(path)
    return raw.decode("utf-8", errors="replace")


def to_fluent_value(value: object) -> FluentValue:
    """Convert a host value to a catalog argument value.

    Args:
        value: str, bool, int, float, Decimal, date, datetime, None,
            bytes or an os.PathLike object

    Returns:
        Value accepted by the catalog engine

    Raises:
        TypeError: If the value has no catalog representation
    """
    match value:
        case None:
            return None
        case str() | bool() | int() | float() | Decimal() | datetime() | date():
            return value
        case bytes() | os.PathLike():
            return path_to_str(value)
        case _:
            msg = f"Cannot convert {type(value).__name__} to a localization argument"
            raise TypeError(msg)


def coerce_args(args: ArgumentMap) -> dict[str, FluentValue]:
    """Build a catalog argument dict, converting every value.

    Duplicate names resolve last-write-wins, in iteration order.

    Raises:
        TypeError: If any value cannot be converted
    """
    pairs = args.items() if isinstance(args, Mapping) else args
    return {name: to_fluent_value(value) for name, value in pairs}
