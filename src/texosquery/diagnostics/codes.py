"""Diagnostic codes and data structures.

Defines diagnostic codes and the structured diagnostic message carried by
log records and exceptions.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Diagnostic codes with unique identifiers.

    Organized by category:
        1000-1999: Pattern diagnostics (macro translators)
        2000-2999: Query diagnostics (OS, file and locale lookups)
        3000-3999: Usage errors (command-line interface)
    """

    # Pattern diagnostics (1000-1999)
    PATTERN_NOT_A_STRING = 1001
    PATTERN_UNTERMINATED_QUOTE = 1002
    PATTERN_EXTRA_SUBPATTERNS = 1003
    PATTERN_FRACTION_GROUPING = 1004

    # Query diagnostics (2000-2999)
    QUERY_LOCALE_UNKNOWN = 2001
    QUERY_READ_NOT_PERMITTED = 2002
    QUERY_INVALID_REGEX = 2003
    QUERY_INVALID_NUMBER = 2004

    # Usage errors (3000-3999)
    USAGE_MISSING_ACTION = 3001
    USAGE_UNKNOWN_ACTION = 3002
    USAGE_MISSING_ARGUMENT = 3003
    USAGE_INVALID_ARGUMENT = 3004
    USAGE_INCOMPATIBLE_ACTION = 3005


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique diagnostic code
        message: Human-readable description
        hint: Suggestion for fixing the problem
        subject: The pattern, path or argument the diagnostic is about
        severity: Severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    subject: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler message.

        Example output:
            warning[PATTERN_EXTRA_SUBPATTERNS]: Pattern has 3 sub-patterns, expected at most 2
              --> #,##0;-#,##0;0
              = help: Only the positive and negative sub-patterns are used

        Returns:
            Formatted multi-line message
        """
        parts = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.subject is not None:
            parts.append(f"  --> {_escape_control(self.subject)}")
        if self.hint:
            parts.append(f"  = help: {self.hint}")
        return "\n".join(parts)


def _escape_control(text: str) -> str:
    """Make control characters visible so a subject cannot forge log lines."""
    return "".join(char if char.isprintable() else repr(char)[1:-1] for char in text)
