"""Numeric pattern translation.

Converts a decimal, currency, percent or scientific pattern into macro
tokens. The pattern is decomposed top-down, each level splitting at an
unquoted marker found by the quote-aware scanner:

    pattern     -> positive[;negative]          \\pnfmt{pos}{neg}
    sub-pattern -> currency | percent | plain
    currency    -> affix ¤ number | number ¤ affix
    percent     -> affix % number | number % affix   (‰ likewise)
    plain       -> mantissa E exponent              \\sinumfmt{m}{e}
                 | integer . fraction               \\decfmt{i}{f}
                 | integer

Affix/marker placement:
    Marker | before the number | after the number
    -------|-------------------|-----------------
    ¤      | \\pcur{affix}{n}   | \\scur{n}{affix}
    ¤¤     | \\picur{affix}{n}  | \\sicur{n}{affix}
    %      | \\ppct{affix}{n}   | \\spct{n}{affix}
    ‰      | \\ppml{affix}{n}   | \\spml{n}{affix}

The number side is whichever side of the marker holds a 0 or # placeholder.

Thread-safe. Pure functions.

Python 3.13+. Zero external dependencies.
"""

import logging
from dataclasses import dataclass

from texosquery.constants import CURRENCY_SIGN, PERCENT_SIGN, PERMILLE_SIGN
from texosquery.diagnostics import ErrorTemplate
from texosquery.enums import NumberPatternKind, PadDirection

from .digits import render_digits, render_literal
from .scanner import (
    find_unquoted,
    has_placeholder,
    is_quote_balanced,
    partition_unquoted,
    split_unquoted,
)
from .vocabulary import Macro, macro

__all__ = [
    "SubPatternLayout",
    "classify_subpattern",
    "split_subpatterns",
    "translate_number_pattern",
]

logger = logging.getLogger(__name__)

SUBPATTERN_SEPARATOR: str = ";"
EXPONENT_MARKER: str = "E"
DECIMAL_POINT: str = "."

# (prefix form, suffix form) per pattern kind; currency has a local and an
# international pair.
_AFFIX_MACROS: dict[tuple[NumberPatternKind, bool], tuple[Macro, Macro]] = {
    (NumberPatternKind.CURRENCY, False): (Macro.CURRENCY_PREFIX, Macro.CURRENCY_SUFFIX),
    (NumberPatternKind.CURRENCY, True): (
        Macro.CURRENCY_PREFIX_INTL,
        Macro.CURRENCY_SUFFIX_INTL,
    ),
    (NumberPatternKind.PERCENT, False): (Macro.PERCENT_PREFIX, Macro.PERCENT_SUFFIX),
    (NumberPatternKind.PERMILLE, False): (Macro.PERMILLE_PREFIX, Macro.PERMILLE_SUFFIX),
}


@dataclass(frozen=True, slots=True)
class SubPatternLayout:
    """Structure of one positive or negative sub-pattern.

    Attributes:
        kind: Currency, percent, per-mille or plain
        international: True for a currency marker of two or more signs
        prefixed: True when the marker precedes the number
        number: Digit part of the sub-pattern (the whole sub-pattern if plain)
        affix: Literal text on the far side of the marker
    """

    kind: NumberPatternKind
    international: bool
    prefixed: bool
    number: str
    affix: str


def split_subpatterns(pattern: str) -> list[str]:
    """Split a numeric pattern into its positive and negative sub-patterns.

    Only the first unquoted ';' is honoured. Further separators are a
    malformed pattern: the segments after the second are dropped and a
    diagnostic is logged.

    Args:
        pattern: Numeric pattern

    Returns:
        One or two sub-patterns

    Example:
        >>> split_subpatterns("#,##0.00;(#,##0.00)")
        ['#,##0.00', '(#,##0.00)']
        >>> split_subpatterns("0.00")
        ['0.00']
    """
    parts = split_unquoted(pattern, SUBPATTERN_SEPARATOR)
    if len(parts) > 2:
        diagnostic = ErrorTemplate.extra_subpatterns(pattern, len(parts))
        logger.warning("%s", diagnostic.format_error())
        return parts[:2]
    return parts


def classify_subpattern(subpattern: str) -> SubPatternLayout:
    """Determine the kind and the marker placement of a sub-pattern.

    A currency marker takes precedence over percent and per-mille markers.

    Args:
        subpattern: One positive or negative sub-pattern

    Returns:
        SubPatternLayout describing the sub-pattern
    """
    index = find_unquoted(subpattern, CURRENCY_SIGN)
    if index != -1:
        end = _marker_run_end(subpattern, index)
        return _layout(
            NumberPatternKind.CURRENCY,
            subpattern[:index],
            subpattern[end:],
            international=end - index > 1,
        )

    index = find_unquoted(subpattern, PERCENT_SIGN + PERMILLE_SIGN)
    if index != -1:
        kind = (
            NumberPatternKind.PERCENT
            if subpattern[index] == PERCENT_SIGN
            else NumberPatternKind.PERMILLE
        )
        return _layout(kind, subpattern[:index], subpattern[index + 1 :], international=False)

    return SubPatternLayout(
        kind=NumberPatternKind.PLAIN,
        international=False,
        prefixed=False,
        number=subpattern,
        affix="",
    )


def translate_number_pattern(pattern: str) -> str:
    """Translate a numeric pattern into macro tokens.

    Never raises. Malformed input is recovered from and logged.

    Args:
        pattern: Decimal, currency, percent or scientific pattern

    Returns:
        Token string; empty for a non-string pattern

    Examples:
        >>> translate_number_pattern("0.00%").startswith("\\\\spct{\\\\decfmt{")
        True
        >>> translate_number_pattern("#E0").startswith("\\\\sinumfmt{")
        True
    """
    if not isinstance(pattern, str):
        logger.warning(
            "%s",
            ErrorTemplate.pattern_not_a_string(pattern, "translate_number_pattern").format_error(),
        )
        return ""

    if not is_quote_balanced(pattern):
        logger.warning("%s", ErrorTemplate.unterminated_quote(pattern).format_error())

    subpatterns = split_subpatterns(pattern)
    translated = [_translate_subpattern(subpattern) for subpattern in subpatterns]

    if len(translated) == 2:
        return macro(Macro.SIGNED, *translated)
    return translated[0]


def _marker_run_end(pattern: str, index: int) -> int:
    """Index just past the run of unquoted currency signs starting at index."""
    end = index + 1
    while end < len(pattern) and pattern[end] == CURRENCY_SIGN:
        end += 1
    return end


def _layout(
    kind: NumberPatternKind, before: str, after: str, *, international: bool
) -> SubPatternLayout:
    prefixed = has_placeholder(after) and not has_placeholder(before)
    if prefixed:
        return SubPatternLayout(kind, international, True, number=after, affix=before)
    return SubPatternLayout(kind, international, False, number=before, affix=after)


def _translate_subpattern(subpattern: str) -> str:
    layout = classify_subpattern(subpattern)
    number = _translate_plain(layout.number)

    if layout.kind is NumberPatternKind.PLAIN:
        return number

    prefix_macro, suffix_macro = _AFFIX_MACROS[(layout.kind, layout.international)]
    affix = render_literal(layout.affix)
    if layout.prefixed:
        return macro(prefix_macro, affix, number)
    return macro(suffix_macro, number, affix)


def _translate_plain(number: str) -> str:
    mantissa, marker, exponent = partition_unquoted(number, EXPONENT_MARKER)
    if marker:
        return macro(
            Macro.SCIENTIFIC,
            _translate_decimal(mantissa),
            render_digits(exponent, PadDirection.LEADING),
        )
    return _translate_decimal(number)


def _translate_decimal(number: str) -> str:
    integer, point, fraction = partition_unquoted(number, DECIMAL_POINT)
    integer_tokens = render_digits(integer, PadDirection.LEADING)
    if not point:
        return integer_tokens
    return macro(
        Macro.DECIMAL,
        integer_tokens,
        render_digits(fraction, PadDirection.TRAILING),
    )
