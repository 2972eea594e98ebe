"""fluent-i18n exception hierarchy with structured diagnostics.

Python 3.13+.
"""

from fluent_i18n.constants import ERROR_LOCALE_PARSE_KEY, FALLBACK_LOCALE_PARSE_MESSAGE

from .codes import Diagnostic

__all__ = ["FluentI18nError", "LocaleParseError"]


class FluentI18nError(Exception):
    """Base exception for all fluent-i18n errors."""


class LocaleParseError(FluentI18nError, ValueError):
    """A locale string does not follow the language identifier grammar.

    Raised for explicit input and for values detected from the environment
    alike; resolution never silently downgrades a malformed value to the
    fallback locale.

    The human-readable text is produced lazily through the package's own
    message catalog, so ``str(error)`` follows the locale that is current
    in the execution context doing the rendering.

    Attributes:
        locale: The literal string that failed to parse
        diagnostic: Structured grammar diagnostic
    """

    def __init__(self, locale: str, diagnostic: Diagnostic) -> None:
        """Initialize LocaleParseError.

        Args:
            locale: The offending input, verbatim
            diagnostic: Why the grammar rejected it
        """
        super().__init__(locale, diagnostic)
        self.locale = locale
        self.diagnostic = diagnostic

    def __str__(self) -> str:
        from fluent_i18n.lookup import render_builtin  # noqa: PLC0415 - circular

        summary = render_builtin(
            ERROR_LOCALE_PARSE_KEY,
            {"locale": self.locale},
            default=FALLBACK_LOCALE_PARSE_MESSAGE.format(locale=self.locale),
        )
        return f"{summary}\n{self.diagnostic.format_error()}"

    def __repr__(self) -> str:
        return f"LocaleParseError(locale={self.locale!r}, code={self.diagnostic.code.name})"
