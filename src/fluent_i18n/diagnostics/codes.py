"""Diagnostic codes and data structures for locale grammar failures.

Python 3.13+.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale grammar errors (identifier parsing)
    """

    # Locale grammar errors (1000-1999)
    EMPTY_LOCALE = 1001
    EMPTY_SUBTAG = 1002
    INVALID_LANGUAGE = 1003
    INVALID_SUBTAG = 1004
    DUPLICATE_VARIANT = 1005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured description of why a locale string was rejected.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        subtag: The offending subtag (None when the input is empty)
        position: Zero-based index of the offending subtag
        hint: Suggestion for fixing the error
    """

    code: DiagnosticCode
    message: str
    subtag: str | None = None
    position: int | None = None
    hint: str | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in compiler style.

        Example output:
            error[INVALID_LANGUAGE]: Invalid language subtag '???'
              --> subtag 0
              = help: Language subtags are 2-3 or 5-8 ASCII letters

        Control characters in the message are escaped.

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {_escape(self.message)}"]
        if self.position is not None:
            lines.append(f"  --> subtag {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)


def _escape(text: str) -> str:
    return "".join(
        ch if ch.isprintable() else ch.encode("unicode_escape").decode("ascii")
        for ch in text
    )
