"""Date/time pattern translation.

Converts a locale date/time pattern into macro tokens that the TeX side
expands against the values emitted by the date-time query:

    "dd-MMM-yyyy"    -> \\dtf{2}{d}-\\dtf{3}{M}-\\dtf{4}{y}
    "h 'o''clock' a" -> \\dtf{1}{h}\\spc \\str{o\\apo clock}\\spc \\dtf{1}{a}

Each run of one field letter becomes a single \\dtf{length}{letter} token;
the run length carries the field width, exactly as in the pattern. The
letters recognised are DATETIME_FIELD_LETTERS; any other character outside
quotes is literal text.

STATE MACHINE:
    The scanner holds one RunKind at a time and looks one code point ahead:

    IDLE    -- field letter -> FIELD (run of 1)
    IDLE    -- '            -> LITERAL, emits \\str{
    FIELD   -- same letter  -> FIELD (run + 1)
    FIELD   -- other letter -> FIELD (flush, new run of 1)
    FIELD   -- '            -> LITERAL (flush, emits \\str{)
    FIELD   -- other char   -> IDLE (flush, emit literal)
    LITERAL -- '            -> IDLE, emits }
    LITERAL -- other char   -> LITERAL, emits the escaped char
    any     -- ''           -> unchanged (FIELD flushes to IDLE), emits \\apo

    At end of input a pending field run is flushed and an open literal is
    closed (with a diagnostic).

Thread-safe. Pure functions.

Python 3.13+. Zero external dependencies.
"""

import logging

from texosquery.constants import DATETIME_FIELD_LETTERS, QUOTE
from texosquery.diagnostics import ErrorTemplate
from texosquery.enums import EscapeMode, RunKind

from .escaping import escape_char
from .vocabulary import Macro, macro

__all__ = ["translate_datetime_pattern"]

logger = logging.getLogger(__name__)

_LITERAL_OPEN: str = f"\\{Macro.STRING}{{"
_LITERAL_CLOSE: str = "}"


def translate_datetime_pattern(pattern: str) -> str:
    """Translate a date/time pattern into macro tokens.

    Never raises. Malformed input is recovered from and logged.

    Args:
        pattern: Date/time pattern (e.g. "EEEE, d MMMM y")

    Returns:
        Token string; empty for an empty or non-string pattern

    Examples:
        >>> translate_datetime_pattern("dd-MMM-yyyy")
        '\\\\dtf{2}{d}-\\\\dtf{3}{M}-\\\\dtf{4}{y}'
        >>> translate_datetime_pattern("'it''s'")
        '\\\\str{it\\\\apo s}'
    """
    if not isinstance(pattern, str):
        diagnostic = ErrorTemplate.pattern_not_a_string(pattern, "translate_datetime_pattern")
        logger.warning("%s", diagnostic.format_error())
        return ""

    parts: list[str] = []
    state = RunKind.IDLE
    field_letter = ""
    field_length = 0

    def flush_field() -> None:
        nonlocal state, field_letter, field_length
        if state is RunKind.FIELD:
            parts.append(macro(Macro.DATETIME_FIELD, str(field_length), field_letter))
            state = RunKind.IDLE
            field_letter = ""
            field_length = 0

    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == QUOTE:
            flush_field()
            if i + 1 < n and pattern[i + 1] == QUOTE:
                parts.append(macro(Macro.APOSTROPHE))
                i += 2
                continue
            if state is RunKind.LITERAL:
                parts.append(_LITERAL_CLOSE)
                state = RunKind.IDLE
            else:
                parts.append(_LITERAL_OPEN)
                state = RunKind.LITERAL
            i += 1
            continue

        if state is RunKind.LITERAL:
            parts.append(escape_char(char, EscapeMode.TEXT))
        elif char in DATETIME_FIELD_LETTERS:
            if state is RunKind.FIELD and char == field_letter:
                field_length += 1
            else:
                flush_field()
                state = RunKind.FIELD
                field_letter = char
                field_length = 1
        else:
            flush_field()
            parts.append(escape_char(char, EscapeMode.TEXT))
        i += 1

    if state is RunKind.LITERAL:
        logger.warning("%s", ErrorTemplate.unterminated_quote(pattern).format_error())
        parts.append(_LITERAL_CLOSE)
    flush_field()

    return "".join(parts)
