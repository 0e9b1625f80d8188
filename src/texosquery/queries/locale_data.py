"""Locale queries backed by Babel's CLDR data.

Values are returned as TeX-ready text. Names are escaped as natural
language, symbols and identifiers as data, and locale patterns are
translated into macro token streams.

LOCALE DATA LAYOUT:
    locale_data() returns a flat sequence of brace groups:

    #  | Group
    ---|-----------------------------------------------------------
    1  | language tag
    2  | display name, language name, territory name (3 groups)
    5  | date patterns: full, long, medium, short (4 groups)
    9  | time patterns: full, long, medium, short (4 groups)
    13 | date-time patterns: full, long, medium, short (4 groups)
    17 | month names: wide, abbreviated, stand-alone wide,
       | stand-alone abbreviated (4 groups of 12 {name} groups)
    21 | day names, Monday first, same four forms (4 groups of 7)
    25 | first day of the week (1 = Monday ... 7 = Sunday)
    26 | group sep, decimal sep, exponent, minus, percent, per-mille
    32 | currency code, currency symbol
    34 | decimal, integer, currency, percent, scientific patterns

DATE-TIME FIELDS:
    date_time_fields() returns one {value} group per field letter, in the
    order of DATETIME_FIELD_LETTERS, so that a translated \\dtf{n}{letter}
    can pick its value. Numeric fields follow java.util.Calendar
    conventions (era 1 = AD, day of week 1 = Sunday, am/pm 0 = AM).

Python 3.13+.
"""

from __future__ import annotations

import locale as locale_module
import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING

from texosquery.constants import DATETIME_FIELD_LETTERS, QUOTE
from texosquery.diagnostics import ErrorTemplate, TeXOSQueryError
from texosquery.enums import EscapeMode
from texosquery.locale_utils import get_system_locale, language_tag, parse_language_tag
from texosquery.macros import (
    escape_text,
    split_subpatterns,
    translate_datetime_pattern,
    translate_number_pattern,
)
from texosquery.macros.scanner import DIGIT_PLACEHOLDERS, partition_unquoted

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "codeset",
    "date_time_fields",
    "datetime_pattern",
    "integer_pattern",
    "locale_data",
    "locale_id",
    "locale_tag",
    "normalize_field_letters",
    "numeric",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

FORMAT_LENGTHS: tuple[str, ...] = ("full", "long", "medium", "short")

# CLDR pattern letters without a counterpart in DATETIME_FIELD_LETTERS
_CLDR_FIELD_LETTERS: dict[str, str] = {
    "L": "M",
    "c": "E",
    "e": "E",
    "b": "a",
    "B": "a",
    "v": "z",
    "V": "z",
    "O": "Z",
    "x": "X",
}

_SYMBOL_KEYS: tuple[str, ...] = (
    "group",
    "decimal",
    "exponential",
    "minusSign",
    "percentSign",
    "perMille",
)


def resolve_locale(tag: str | None = None) -> Locale:
    """Look up a locale by language tag, defaulting to the system locale.

    Raises:
        TeXOSQueryError: If Babel does not know the locale
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    code = tag if tag else get_system_locale()
    try:
        return parse_language_tag(code)
    except (UnknownLocaleError, ValueError) as e:
        raise TeXOSQueryError(ErrorTemplate.locale_unknown(code, str(e))) from e


def codeset(*, convert: bool = False) -> str:
    """Character encoding of the environment.

    Args:
        convert: Lowercase the name and strip hyphens ("UTF-8" -> "utf8")
    """
    name = locale_module.getpreferredencoding(False) or "UTF-8"
    if convert:
        name = name.lower().replace("-", "")
    return escape_text(name, EscapeMode.DATA)


def locale_id(locale: Locale, *, convert_codeset: bool = False) -> str:
    """POSIX-style locale identifier: language[-REGION].codeset[@Script].

    Example:
        >>> from texosquery.locale_utils import get_babel_locale
        >>> locale_id(get_babel_locale("en-GB"), convert_codeset=True)
        'en-GB.utf8'
    """
    identifier = locale.language
    if locale.territory:
        identifier = f"{identifier}-{locale.territory}"
    identifier = f"{identifier}.{codeset(convert=convert_codeset)}"
    if locale.script:
        identifier = f"{identifier}@{escape_text(locale.script, EscapeMode.DATA)}"
    return identifier


def locale_tag(locale: Locale) -> str:
    """BCP-47 language tag of a locale, escaped for TeX."""
    return escape_text(language_tag(locale), EscapeMode.DATA)


def numeric(value: str, locale: Locale) -> str:
    """Format a number with the locale's decimal format.

    Raises:
        TeXOSQueryError: If value is not a decimal number
    """
    from babel.numbers import format_decimal  # noqa: PLC0415

    try:
        number = Decimal(value.strip())
    except InvalidOperation as e:
        raise TeXOSQueryError(ErrorTemplate.invalid_number(value)) from e
    if not number.is_finite():
        raise TeXOSQueryError(ErrorTemplate.invalid_number(value))

    return escape_text(format_decimal(number, locale=locale), EscapeMode.DATA)


def date_time_fields(moment: datetime | None = None) -> str:
    """Values of every date-time field letter, in field-letter order.

    Args:
        moment: Moment to describe (default: now, local time)

    Returns:
        One {value} group per letter of DATETIME_FIELD_LETTERS
    """
    if moment is None:
        moment = datetime.now().astimezone()
    elif moment.tzinfo is None:
        moment = moment.astimezone()

    iso_year, iso_week, iso_day = moment.isocalendar()
    first_of_month = moment.replace(day=1)
    hour12 = moment.hour % 12
    offset = moment.strftime("%z") or "+0000"

    values: dict[str, str] = {
        "G": "1",
        "y": str(moment.year),
        "Y": str(iso_year),
        "M": str(moment.month),
        "w": str(iso_week),
        "W": str((moment.day + first_of_month.weekday() - 1) // 7 + 1),
        "D": str(moment.timetuple().tm_yday),
        "d": str(moment.day),
        "F": str((moment.day - 1) // 7 + 1),
        "E": str(iso_day % 7 + 1),
        "u": str(iso_day),
        "a": "0" if moment.hour < 12 else "1",
        "H": str(moment.hour),
        "k": str(moment.hour or 24),
        "K": str(hour12),
        "h": str(hour12 or 12),
        "m": str(moment.minute),
        "s": str(moment.second),
        "S": str(moment.microsecond // 1000),
        "z": escape_text(moment.tzname() or "", EscapeMode.DATA),
        "Z": offset[:5],
        "X": f"{offset[:3]}:{offset[3:5]}",
    }
    return "".join(_group(values[letter]) for letter in DATETIME_FIELD_LETTERS)


def normalize_field_letters(pattern: str) -> str:
    """Map CLDR-only field letters onto the letters the translator knows.

    Stand-alone month (L) becomes M, local day of week (c, e) becomes E,
    day periods (b, B) become a, and the zone variants v, V, O, x become
    z, z, Z, X. Quoted text is left alone.

    Example:
        >>> normalize_field_letters("LLLL y 'LL'")
        "MMMM y 'LL'"
    """
    chars: list[str] = []
    in_quote = False
    for char in pattern:
        if char == QUOTE:
            in_quote = not in_quote
            chars.append(char)
        elif in_quote:
            chars.append(char)
        else:
            chars.append(_CLDR_FIELD_LETTERS.get(char, char))
    return "".join(chars)


def datetime_pattern(locale: Locale, length: str) -> str:
    """Combined date-time pattern of the locale for a format length.

    CLDR stores the combination as a template such as "{1}, {0}" with the
    date pattern in {1} and the time pattern in {0}.
    """
    template = str(locale.datetime_formats[length])
    return template.replace("{1}", locale.date_formats[length].pattern).replace(
        "{0}", locale.time_formats[length].pattern
    )


def integer_pattern(decimal_pattern: str) -> str:
    """Derive an integer pattern by dropping the fraction from a decimal pattern.

    Example:
        >>> integer_pattern("#,##0.###;(#,##0.###)")
        '#,##0;(#,##0)'
    """
    parts: list[str] = []
    for subpattern in split_subpatterns(decimal_pattern):
        integer, _, fraction = partition_unquoted(subpattern, ".")
        parts.append(integer + fraction.lstrip(DIGIT_PLACEHOLDERS))
    return ";".join(parts)


def locale_data(locale: Locale) -> str:
    """All locale information the TeX side needs, as brace groups.

    See the module docstring for the group layout.
    """
    groups: list[str] = [
        locale_tag(locale),
        _text(locale.get_display_name(locale)),
        _text(locale.get_language_name(locale)),
        _text(locale.get_territory_name(locale)),
    ]

    groups.extend(_date_pattern(locale.date_formats[length].pattern) for length in FORMAT_LENGTHS)
    groups.extend(_date_pattern(locale.time_formats[length].pattern) for length in FORMAT_LENGTHS)
    groups.extend(_date_pattern(datetime_pattern(locale, length)) for length in FORMAT_LENGTHS)

    for context in ("format", "stand-alone"):
        for width in ("wide", "abbreviated"):
            names = locale.months[context][width]
            groups.append("".join(_group(_text(names[month])) for month in range(1, 13)))
    for context in ("format", "stand-alone"):
        for width in ("wide", "abbreviated"):
            names = locale.days[context][width]
            groups.append("".join(_group(_text(names[day])) for day in range(7)))

    groups.append(str(locale.first_week_day + 1))

    symbols = _number_symbols(locale)
    groups.extend(escape_text(symbols.get(key, ""), EscapeMode.DATA) for key in _SYMBOL_KEYS)

    currency = _currency_code(locale)
    groups.append(escape_text(currency, EscapeMode.DATA))
    groups.append(escape_text(_currency_symbol(currency, locale), EscapeMode.DATA))

    decimal = locale.decimal_formats[None].pattern
    groups.extend(
        translate_number_pattern(pattern)
        for pattern in (
            decimal,
            integer_pattern(decimal),
            locale.currency_formats["standard"].pattern,
            locale.percent_formats[None].pattern,
            locale.scientific_formats[None].pattern,
        )
    )

    return "".join(_group(group) for group in groups)


def _group(text: str) -> str:
    return f"{{{text}}}"


def _text(value: str | None) -> str:
    return escape_text(value or "", EscapeMode.TEXT)


def _date_pattern(pattern: str) -> str:
    return translate_datetime_pattern(normalize_field_letters(pattern))


def _number_symbols(locale: Locale) -> dict[str, str]:
    """Number symbols of the locale's default numbering system."""
    return dict(locale.number_symbols[locale.default_numbering_system])


def _currency_code(locale: Locale) -> str:
    from babel.numbers import get_territory_currencies  # noqa: PLC0415

    if not locale.territory:
        return ""
    try:
        currencies = get_territory_currencies(locale.territory)
    except LookupError as e:
        logger.debug("No currency for territory %s: %s", locale.territory, e)
        return ""
    return currencies[0] if currencies else ""


def _currency_symbol(currency: str, locale: Locale) -> str:
    from babel.numbers import get_currency_symbol  # noqa: PLC0415

    if not currency:
        return ""
    return get_currency_symbol(currency, locale=locale)
