"""Tests for queries/locale_data.py.

Covers locale resolution, identifiers and codesets, locale-aware numbers,
date-time field values and the full locale data record.

Python 3.13+.
"""

from datetime import UTC, datetime

import pytest

from texosquery.constants import DATETIME_FIELD_LETTERS
from texosquery.diagnostics import DiagnosticCode, TeXOSQueryError
from texosquery.locale_utils import get_babel_locale
from texosquery.macros import translate_number_pattern
from texosquery.queries.locale_data import (
    codeset,
    date_time_fields,
    datetime_pattern,
    integer_pattern,
    locale_data,
    locale_id,
    locale_tag,
    normalize_field_letters,
    numeric,
    resolve_locale,
)


def _top_level_groups(text: str) -> list[str]:
    """Split a sequence of brace groups into the group contents."""
    groups: list[str] = []
    depth = 0
    start = 0
    for index, char in enumerate(text):
        if char == "{":
            if depth == 0:
                start = index + 1
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                groups.append(text[start:index])
    assert depth == 0
    return groups


@pytest.fixture
def utf8(monkeypatch) -> None:
    """Report UTF-8 as the preferred encoding."""
    monkeypatch.setattr("locale.getpreferredencoding", lambda do_setlocale=True: "UTF-8")


class TestResolveLocale:
    """Test resolve_locale()."""

    def test_explicit_tag(self) -> None:
        """A tag is parsed directly."""
        assert resolve_locale("fr-CA").territory == "CA"

    def test_system_locale(self, monkeypatch) -> None:
        """Without a tag the system locale is used."""
        monkeypatch.setenv("LC_ALL", "de_AT.UTF-8")
        locale = resolve_locale()
        assert (locale.language, locale.territory) == ("de", "AT")

    def test_unknown_locale(self) -> None:
        """An unknown tag raises with a diagnostic."""
        with pytest.raises(TeXOSQueryError) as exc_info:
            resolve_locale("zz-ZZ")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.QUERY_LOCALE_UNKNOWN


class TestIdentifiers:
    """Test codeset(), locale_id() and locale_tag()."""

    def test_codeset(self, utf8) -> None:
        """The preferred encoding is reported as is."""
        assert codeset() == "UTF-8"

    def test_codeset_converted(self, utf8) -> None:
        """Conversion lowercases and strips hyphens."""
        assert codeset(convert=True) == "utf8"

    def test_codeset_follows_preferred_encoding(self, monkeypatch) -> None:
        """The encoding is read from the locale module at call time."""
        monkeypatch.setattr("locale.getpreferredencoding", lambda do_setlocale=True: "ISO-8859-1")
        assert codeset() == "ISO-8859-1"
        assert codeset(convert=True) == "iso88591"

    def test_locale_id(self, utf8) -> None:
        """Language, region and codeset are combined."""
        assert locale_id(get_babel_locale("en-GB")) == "en-GB.UTF-8"
        assert locale_id(get_babel_locale("en-GB"), convert_codeset=True) == "en-GB.utf8"

    def test_locale_id_without_region(self, utf8) -> None:
        """A language-only locale has no region part."""
        assert locale_id(get_babel_locale("de")) == "de.UTF-8"

    def test_locale_id_with_script(self, utf8) -> None:
        """The script follows the codeset."""
        assert locale_id(get_babel_locale("zh-Hant-TW")) == "zh-TW.UTF-8@Hant"

    def test_locale_tag(self) -> None:
        """The tag is BCP 47."""
        assert locale_tag(get_babel_locale("sr_Latn_RS")) == "sr-Latn-RS"


class TestNumeric:
    """Test numeric()."""

    @pytest.mark.parametrize(
        ("value", "tag", "expected"),
        [
            ("12345.6", "en-US", "12,345.6"),
            ("12345.6", "de-DE", "12.345,6"),
            ("-7", "en-US", "-7"),
            (" 42 ", "en-US", "42"),
        ],
    )
    def test_formatting(self, value: str, tag: str, expected: str) -> None:
        """Values use the locale's separators."""
        assert numeric(value, get_babel_locale(tag)) == expected

    @pytest.mark.parametrize("value", ["abc", "", "1,5", "NaN", "Infinity"])
    def test_invalid(self, value: str) -> None:
        """Non-numbers raise with a diagnostic."""
        with pytest.raises(TeXOSQueryError) as exc_info:
            numeric(value, get_babel_locale("en"))
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code is DiagnosticCode.QUERY_INVALID_NUMBER


class TestDateTimeFields:
    """Test date_time_fields()."""

    def test_known_moment(self) -> None:
        """Every field letter has its value, in field-letter order."""
        moment = datetime(2017, 6, 20, 9, 5, 7, 123456, tzinfo=UTC)
        assert date_time_fields(moment) == (
            "{1}{2017}{2017}{6}{25}{4}{171}{20}{3}{3}{2}{0}"
            "{9}{9}{9}{9}{5}{7}{123}{UTC}{+0000}{+00:00}"
        )

    def test_afternoon_and_midnight_hours(self) -> None:
        """The four hour fields follow their ranges."""
        values = dict(
            zip(
                DATETIME_FIELD_LETTERS,
                _top_level_groups(date_time_fields(datetime(2017, 6, 20, 0, 0, tzinfo=UTC))),
                strict=True,
            )
        )
        assert (values["a"], values["H"], values["k"], values["K"], values["h"]) == (
            "0", "0", "24", "0", "12",
        )
        values = dict(
            zip(
                DATETIME_FIELD_LETTERS,
                _top_level_groups(date_time_fields(datetime(2017, 6, 18, 15, 0, tzinfo=UTC))),
                strict=True,
            )
        )
        assert (values["a"], values["H"], values["k"], values["K"], values["h"]) == (
            "1", "15", "15", "3", "3",
        )
        # 2017-06-18 is a Sunday
        assert (values["E"], values["u"]) == ("1", "7")

    def test_now(self) -> None:
        """The current moment yields one group per field letter."""
        assert len(_top_level_groups(date_time_fields())) == len(DATETIME_FIELD_LETTERS)


class TestPatternHelpers:
    """Test the pattern helpers used by locale_data()."""

    def test_normalize_field_letters(self) -> None:
        """CLDR-only letters map to known ones outside quotes."""
        assert normalize_field_letters("LLLL y 'LL'") == "MMMM y 'LL'"
        assert normalize_field_letters("ccc B v O x") == "EEE a z Z X"

    def test_datetime_pattern(self) -> None:
        """The combined pattern embeds the date and time patterns."""
        locale = get_babel_locale("en-US")
        combined = datetime_pattern(locale, "short")
        assert locale.date_formats["short"].pattern in combined
        assert locale.time_formats["short"].pattern in combined
        assert "{0}" not in combined
        assert "{1}" not in combined

    @pytest.mark.parametrize(
        ("decimal", "expected"),
        [
            ("#,##0.###", "#,##0"),
            ("#,##0.00;(#,##0.00)", "#,##0;(#,##0)"),
            ("0.00 %", "0 %"),
            ("#,##0", "#,##0"),
        ],
    )
    def test_integer_pattern(self, decimal: str, expected: str) -> None:
        """The fraction is dropped, trailing text is kept."""
        assert integer_pattern(decimal) == expected


class TestLocaleData:
    """Test the full locale data record."""

    @pytest.fixture(scope="class")
    def en_us(self) -> list[str]:
        return _top_level_groups(locale_data(get_babel_locale("en-US")))

    def test_group_count(self, en_us) -> None:
        """The record has a fixed number of groups."""
        assert len(en_us) == 38

    def test_names(self, en_us) -> None:
        """Tag and names come first; names are escaped as text."""
        assert en_us[0] == "en-US"
        assert en_us[1] == "English\\spc (United\\spc States)"
        assert en_us[2] == "English"
        assert en_us[3] == "United\\spc States"

    def test_date_patterns_translated(self, en_us) -> None:
        """Date, time and date-time groups hold macro tokens."""
        assert "\\dtf{4}{M}" in en_us[4]
        assert all("\\dtf{" in group for group in en_us[4:16])

    def test_month_names(self, en_us) -> None:
        """Month groups hold twelve names each."""
        wide = _top_level_groups(en_us[16])
        assert len(wide) == 12
        assert wide[0] == "January"
        assert _top_level_groups(en_us[17])[8] == "Sep"

    def test_day_names_start_on_monday(self, en_us) -> None:
        """Day groups hold seven names, Monday first."""
        wide = _top_level_groups(en_us[20])
        assert len(wide) == 7
        assert wide[0] == "Monday"
        assert wide[6] == "Sunday"

    def test_first_day_of_week(self, en_us) -> None:
        """The first day uses 1 = Monday ... 7 = Sunday."""
        assert en_us[24] == "7"
        de = _top_level_groups(locale_data(get_babel_locale("de-DE")))
        assert de[24] == "1"

    def test_symbols(self, en_us) -> None:
        """Number symbols are escaped as data."""
        assert en_us[25:31] == [",", ".", "E", "-", "%", "\\wrp{‰}"]

    def test_currency(self, en_us) -> None:
        """Currency code and symbol of the territory."""
        assert en_us[31:33] == ["USD", "$"]

    def test_number_patterns(self, en_us) -> None:
        """Decimal and integer patterns are translated."""
        assert en_us[33] == translate_number_pattern("#,##0.###")
        assert en_us[34] == translate_number_pattern("#,##0")
        assert en_us[35].startswith("\\pcur{}{")
        assert en_us[36].startswith("\\spct{")
        assert en_us[37].startswith("\\sinumfmt{")

    def test_language_only_locale(self) -> None:
        """A locale without territory has no currency."""
        groups = _top_level_groups(locale_data(get_babel_locale("fr")))
        assert len(groups) == 38
        assert groups[31:33] == ["", ""]
