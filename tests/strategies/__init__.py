"""Hypothesis strategies for fluent-i18n property-based testing.

- locale: locale strings (well-formed and malformed) and message identifiers

Usage:
    from tests.strategies.locale import locale_strings, malformed_locale_strings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_strings, malformed_locale_strings
"""

from .locale import languages, locale_strings, malformed_locale_strings, message_ids

__all__ = [
    "languages",
    "locale_strings",
    "malformed_locale_strings",
    "message_ids",
]
