"""Diagnostic codes and the fluent-i18n exception hierarchy.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import FluentI18nError, LocaleParseError

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "FluentI18nError",
    "LocaleParseError",
]
