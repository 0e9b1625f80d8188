"""Digit-run rendering for numeric patterns.

Turns the integer, fraction or exponent part of a number pattern into a
fixed-width sequence of digit macros:

    Pattern | Token
    --------|------------------------------------------------
    0       | \\dgt    mandatory digit
    #       | \\dgtnz  optional digit (hidden when a redundant zero)
    ,       | dropped; \\ngp is re-inserted at every group boundary
    -       | \\msg    minus sign
    '...'   | \\str{...} quoted literal
    ''      | \\apo    literal apostrophe
    other   | escaped as data

DIGIT BUDGET:
    The TeX side addresses digits by position and supports MAX_DIGITS of
    them. Every run is therefore normalised to exactly MAX_DIGITS digit
    macros. Each digit gets an index counted from the decimal point:

    - LEADING (integer side): placeholders are numbered from the right,
      1 = least significant. Optional-digit padding for the indices the
      pattern does not mention is inserted before the first placeholder;
      placeholders numbered above the budget are dropped from the front.
    - TRAILING (fraction side): placeholders are numbered from the left.
      Padding goes after the last placeholder; placeholders numbered above
      the budget are dropped from the back.

GROUPING:
    The grouping interval is the number of placeholders after the last ','.
    Separators are placed between index lo and lo + 1 whenever lo is a
    multiple of the interval, so padding digits are grouped too:

        "#,##0" -> d10 , d9 d8 d7 , d6 d5 d4 , d3 d2 d1

    Fractions are never grouped; a ',' in a TRAILING run is dropped and logged.

Thread-safe. Pure functions.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass

from texosquery.constants import MAX_DIGITS, QUOTE
from texosquery.diagnostics import ErrorTemplate
from texosquery.enums import EscapeMode, PadDirection

from .escaping import escape_char
from .scanner import (
    DIGIT_PLACEHOLDERS,
    GROUPING_PLACEHOLDER,
    TokenKind,
    count_placeholders,
    tokenize_pattern,
)
from .vocabulary import Macro, macro

__all__ = ["render_digits", "render_literal"]

logger = logging.getLogger(__name__)

_DIGIT_TOKENS: dict[str, str] = {
    "0": macro(Macro.DIGIT),
    "#": macro(Macro.DIGIT_NONZERO),
}

_PADDING_TOKEN: str = macro(Macro.DIGIT_NONZERO)


@dataclass(frozen=True, slots=True)
class _DigitRun:
    """Layout of the digit placeholders of one pattern part.

    Attributes:
        count: Number of 0/# placeholders in the part
        group_size: Grouping interval (0 = no grouping)
        direction: Side the run is padded on
    """

    count: int
    group_size: int
    direction: PadDirection

    @property
    def _step(self) -> int:
        """Index difference between a digit and the digit emitted after it."""
        return -1 if self.direction is PadDirection.LEADING else 1

    def index_of(self, ordinal: int) -> int:
        """Digit index of the ordinal-th placeholder (1-based, left to right)."""
        if self.direction is PadDirection.LEADING:
            return self.count + 1 - ordinal
        return ordinal

    def padding(self) -> str:
        """Optional digits for the indices above the pattern's own, in emission order."""
        indices = range(self.count + 1, MAX_DIGITS + 1)
        if self.direction is PadDirection.LEADING:
            indices = indices[::-1]
        return "".join(self.digit(index, _PADDING_TOKEN) for index in indices)

    def pads_before(self, ordinal: int) -> bool:
        """Whether padding precedes the ordinal-th placeholder."""
        return self.direction is PadDirection.LEADING and ordinal == 1

    def pads_after(self, ordinal: int) -> bool:
        """Whether padding follows the ordinal-th placeholder."""
        return self.direction is PadDirection.TRAILING and ordinal == self.count

    def digit(self, index: int, token: str) -> str:
        """Emit one digit macro followed by a separator at a group boundary.

        Indices beyond the digit budget produce nothing.
        """
        if index > MAX_DIGITS:
            return ""
        boundary = min(index, index + self._step)
        if self.group_size and 1 <= boundary < MAX_DIGITS and boundary % self.group_size == 0:
            return token + macro(Macro.GROUP_SEPARATOR)
        return token


def render_digits(pattern: str, direction: PadDirection = PadDirection.LEADING) -> str:
    """Render one integer, fraction or exponent part of a number pattern.

    Args:
        pattern: The part, without decimal point or exponent marker
        direction: LEADING for integer and exponent parts, TRAILING for fractions

    Returns:
        Digit, grouping and literal tokens; empty for an empty part

    Example:
        >>> render_digits("00", PadDirection.TRAILING).count("\\\\dgt ")
        2
    """
    if not isinstance(pattern, str):
        logger.warning(
            "%s", ErrorTemplate.pattern_not_a_string(pattern, "render_digits").format_error()
        )
        return ""

    count, group_size = count_placeholders(pattern)
    if group_size and direction is PadDirection.TRAILING:
        logger.warning("%s", ErrorTemplate.fraction_grouping(pattern).format_error())
        group_size = 0
    run = _DigitRun(count, group_size, direction)
    parts: list[str] = []
    ordinal = 0

    for token in tokenize_pattern(pattern):
        if token.kind is not TokenKind.CHAR:
            parts.append(_render_quoting(token.kind, token.text))
            continue

        char = token.text
        if char in DIGIT_PLACEHOLDERS:
            ordinal += 1
            if run.pads_before(ordinal):
                parts.append(run.padding())
            parts.append(run.digit(run.index_of(ordinal), _DIGIT_TOKENS[char]))
            if run.pads_after(ordinal):
                parts.append(run.padding())
        elif char != GROUPING_PLACEHOLDER:
            parts.append(_literal_char(char))

    return "".join(parts)


def render_literal(pattern: str) -> str:
    """Render pattern text that contains no digits of interest.

    Used for the prefix and suffix around currency and percent markers.
    Quoting, the minus sign and data escaping follow render_digits().

    Args:
        pattern: Affix text, possibly quoted

    Returns:
        Literal tokens
    """
    parts: list[str] = []
    for token in tokenize_pattern(pattern):
        if token.kind is TokenKind.CHAR:
            parts.append(_literal_char(token.text))
        else:
            parts.append(_render_quoting(token.kind, token.text))
    return "".join(parts)


def _literal_char(char: str) -> str:
    if char == "-":
        return macro(Macro.MINUS_SIGN)
    return escape_char(char, EscapeMode.DATA)


def _render_quoting(kind: TokenKind, text: str) -> str:
    if kind is TokenKind.APOSTROPHE:
        return macro(Macro.APOSTROPHE)
    content = "".join(
        macro(Macro.APOSTROPHE) if char == QUOTE else escape_char(char, EscapeMode.DATA)
        for char in text
    )
    return macro(Macro.STRING, content)
