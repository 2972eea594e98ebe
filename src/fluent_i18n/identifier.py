"""Language identifiers: an immutable value type and its grammar.

Implements the language-identifier subset of BCP 47 that translation
catalogs care about:

    langid   = language ["-" script] ["-" region] *("-" variant)
    language = 2*3ALPHA / 5*8ALPHA
    script   = 4ALPHA
    region   = 2ALPHA / 3DIGIT
    variant  = 5*8alphanum / (DIGIT 3alphanum)

Both "-" and "_" are accepted as separators so POSIX-style values such as
"de_DE" parse without preprocessing. Parsing is case-insensitive; the
resulting identifier is always in canonical casing (language lower,
script title, region upper, variants lower and sorted).

Extensions and private-use subtags are not part of the grammar and are
rejected like any other out-of-place subtag.

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from fluent_i18n.constants import MAX_LOCALE_CACHE_SIZE
from fluent_i18n.diagnostics import Diagnostic, DiagnosticCode, LocaleParseError

__all__ = [
    "LocaleIdentifier",
    "parse_locale",
]


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """Canonical language identifier (e.g. ``en-US``, ``zh-Hant-TW``).

    Equality and hashing compare the canonical subtags exactly, so two
    identifiers are equal iff their ``str()`` forms are equal.

    Build instances with :func:`parse_locale`; the constructor does not
    validate or canonicalize its arguments.

    Attributes:
        language: Lowercase language subtag ("en")
        script: Titlecase script subtag ("Latn") or None
        region: Uppercase region subtag ("US", "419") or None
        variants: Sorted lowercase variant subtags

    Example:
        >>> tag = parse_locale("sr_latn_rs")
        >>> str(tag)
        'sr-Latn-RS'
    """

    language: str
    script: str | None = None
    region: str | None = None
    variants: tuple[str, ...] = ()

    def __str__(self) -> str:
        return "-".join(self._subtags())

    def language_only(self) -> LocaleIdentifier:
        return LocaleIdentifier(self.language)

    def matches(
        self,
        other: LocaleIdentifier,
        *,
        ignore_region: bool = False,
        ignore_variants: bool = False,
    ) -> bool:
        """Compare with other, optionally ignoring region and variants.

        Language and script are always compared.

        Example:
            >>> valencian = parse_locale("ca-ES-valencia")
            >>> valencian.matches(parse_locale("ca-ES"), ignore_variants=True)
            True
            >>> valencian.matches(parse_locale("ca"), ignore_variants=True)
            False
        """
        return (
            self.language == other.language
            and self.script == other.script
            and (ignore_region or self.region == other.region)
            and (ignore_variants or self.variants == other.variants)
        )

    def _subtags(self) -> list[str]:
        subtags = [self.language]
        if self.script is not None:
            subtags.append(self.script)
        if self.region is not None:
            subtags.append(self.region)
        subtags.extend(self.variants)
        return subtags


def _is_alpha(subtag: str) -> bool:
    return subtag.isascii() and subtag.isalpha()


def _is_alnum(subtag: str) -> bool:
    return subtag.isascii() and subtag.isalnum()


def _is_language(subtag: str) -> bool:
    return _is_alpha(subtag) and (2 <= len(subtag) <= 3 or 5 <= len(subtag) <= 8)


def _is_script(subtag: str) -> bool:
    return len(subtag) == 4 and _is_alpha(subtag)


def _is_region(subtag: str) -> bool:
    if len(subtag) == 2:
        return _is_alpha(subtag)
    return len(subtag) == 3 and subtag.isascii() and subtag.isdigit()


def _is_variant(subtag: str) -> bool:
    if 5 <= len(subtag) <= 8:
        return _is_alnum(subtag)
    return len(subtag) == 4 and subtag[0].isdigit() and _is_alnum(subtag)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def parse_locale(text: str) -> LocaleIdentifier:
    """Parse a locale string into a canonical LocaleIdentifier.

    Thread-safe via lru_cache internal locking. Failed parses are not
    cached.

    Args:
        text: Locale string ("en-US", "de_DE", "zh-Hant-TW", "ca-ES-valencia")

    Returns:
        Canonical LocaleIdentifier

    Raises:
        LocaleParseError: If text does not follow the grammar. The error
            carries the literal input and a Diagnostic naming the
            offending subtag and its position.

    Example:
        >>> parse_locale("EN_us")
        LocaleIdentifier(language='en', script=None, region='US', variants=())
        >>> parse_locale("???")
        Traceback (most recent call last):
        ...
        fluent_i18n.diagnostics.errors.LocaleParseError: ...
    """
    if not text:
        raise LocaleParseError(
            text,
            Diagnostic(
                code=DiagnosticCode.EMPTY_LOCALE,
                message="Locale string is empty",
                hint="Pass a language tag such as 'en-US'",
            ),
        )

    subtags = text.replace("_", "-").split("-")
    for position, subtag in enumerate(subtags):
        if not subtag:
            raise LocaleParseError(
                text,
                Diagnostic(
                    code=DiagnosticCode.EMPTY_SUBTAG,
                    message="Empty subtag (doubled, leading or trailing separator)",
                    subtag="",
                    position=position,
                ),
            )

    language = subtags[0]
    if not _is_language(language):
        raise LocaleParseError(
            text,
            Diagnostic(
                code=DiagnosticCode.INVALID_LANGUAGE,
                message=f"Invalid language subtag '{language}'",
                subtag=language,
                position=0,
                hint="Language subtags are 2-3 or 5-8 ASCII letters",
            ),
        )

    script: str | None = None
    region: str | None = None
    variants: list[str] = []
    position = 1

    if position < len(subtags) and _is_script(subtags[position]):
        script = subtags[position].title()
        position += 1

    if position < len(subtags) and _is_region(subtags[position]):
        region = subtags[position].upper()
        position += 1

    for position in range(position, len(subtags)):
        subtag = subtags[position]
        if not _is_variant(subtag):
            raise LocaleParseError(
                text,
                Diagnostic(
                    code=DiagnosticCode.INVALID_SUBTAG,
                    message=f"Invalid subtag '{subtag}'",
                    subtag=subtag,
                    position=position,
                    hint=(
                        "Expected script (4 letters), region (2 letters or 3 digits) "
                        "or variant (5-8 alphanumerics) in that order"
                    ),
                ),
            )
        variant = subtag.lower()
        if variant in variants:
            raise LocaleParseError(
                text,
                Diagnostic(
                    code=DiagnosticCode.DUPLICATE_VARIANT,
                    message=f"Duplicate variant subtag '{subtag}'",
                    subtag=subtag,
                    position=position,
                ),
            )
        variants.append(variant)

    return LocaleIdentifier(
        language=language.lower(),
        script=script,
        region=region,
        variants=tuple(sorted(variants)),
    )
