"""Tests for macros/digits.py.

Covers the digit budget (padding and truncation in both directions),
grouping of padded runs and literal rendering of affix text.

Python 3.13+.
"""

import logging
import re

from hypothesis import event, given

from texosquery.constants import MAX_DIGITS
from texosquery.enums import PadDirection
from texosquery.macros import render_digits, render_literal
from texosquery.macros.scanner import count_placeholders
from tests.strategies import digit_runs

N = "\\dgtnz "
D = "\\dgt "
G = "\\ngp "

_DIGIT_MACRO = re.compile(r"\\dgt(?:nz)? ")


class TestLeadingRuns:
    """Test integer-side rendering."""

    def test_single_mandatory_digit(self) -> None:
        """One 0 is padded to the budget with optional digits in front."""
        assert render_digits("0") == N * 9 + D

    def test_grouped_run(self) -> None:
        """Grouping repeats every interval across the padding."""
        expected = N + G + N + N + N + G + N + N + N + G + N + N + D
        assert render_digits("#,##0") == expected

    def test_exact_budget(self) -> None:
        """A run of exactly the budget needs no padding."""
        assert render_digits("0" * MAX_DIGITS) == D * MAX_DIGITS

    def test_overlong_run_truncated_at_front(self) -> None:
        """Placeholders above the budget are dropped."""
        rendered = render_digits("##00000000000")
        assert rendered == D * MAX_DIGITS

    def test_empty_run(self) -> None:
        """An empty part renders as nothing."""
        assert render_digits("") == ""


class TestTrailingRuns:
    """Test fraction-side rendering."""

    def test_padding_after_placeholders(self) -> None:
        """Mandatory fraction digits come first, optional padding after."""
        assert render_digits("00", PadDirection.TRAILING) == D + D + N * 8

    def test_optional_fraction(self) -> None:
        """An all-optional fraction is all optional digits."""
        assert render_digits("###", PadDirection.TRAILING) == N * MAX_DIGITS

    def test_overlong_run_truncated_at_back(self) -> None:
        """Placeholders above the budget are dropped from the end."""
        rendered = render_digits("0" * 10 + "##", PadDirection.TRAILING)
        assert rendered == D * MAX_DIGITS

    def test_trailing_literal_kept(self) -> None:
        """Literal text after the fraction follows the padding."""
        assert render_digits("00)", PadDirection.TRAILING) == D + D + N * 8 + ")"

    def test_fraction_grouping_ignored(self, caplog) -> None:
        """A grouping separator in a fraction is dropped with a warning."""
        with caplog.at_level(logging.WARNING, logger="texosquery.macros.digits"):
            rendered = render_digits("0,0", PadDirection.TRAILING)
        assert rendered == D + D + N * 8
        assert "PATTERN_FRACTION_GROUPING" in caplog.text


class TestLiterals:
    """Test literal text inside digit runs and affixes."""

    def test_minus_sign(self) -> None:
        """An unquoted hyphen is the locale minus sign."""
        assert render_literal("-") == "\\msg "
        assert render_digits("-0").startswith("\\msg " + N)

    def test_quoted_affix(self) -> None:
        """Quoted text becomes a \\str group."""
        assert render_literal("'kr'") == "\\str{kr}"

    def test_apostrophes(self) -> None:
        """Doubled quotes become \\apo inside and outside quotes."""
        assert render_literal("''") == "\\apo "
        assert render_literal("a'b''c'") == "a\\str{b\\apo c}"

    def test_data_escaping(self) -> None:
        """Other characters are escaped as data."""
        assert render_literal("# ") == "\\hsh \\lspc "
        assert render_literal("€") == "\\wrp{€}"

    def test_quoted_placeholders_are_literal(self) -> None:
        """A quoted 0 is not a digit."""
        assert render_digits("'0'0") == "\\str{0}" + N * 9 + D

    def test_non_string_logged(self, caplog) -> None:
        """Non-string input yields nothing and logs a warning."""
        assert render_digits(None) == ""  # type: ignore[arg-type]
        assert "expected a pattern string" in caplog.text


class TestDigitBudgetProperties:
    """Property tests for the digit budget."""

    @given(run=digit_runs())
    def test_leading_runs_have_budget_digits(self, run: str) -> None:
        """Every integer run renders exactly MAX_DIGITS digit macros."""
        rendered = render_digits(run, PadDirection.LEADING)
        assert len(_DIGIT_MACRO.findall(rendered)) == MAX_DIGITS

    @given(run=digit_runs())
    def test_trailing_runs_have_budget_digits(self, run: str) -> None:
        """Every fraction run renders exactly MAX_DIGITS digit macros."""
        rendered = render_digits(run, PadDirection.TRAILING)
        assert len(_DIGIT_MACRO.findall(rendered)) == MAX_DIGITS

    @given(run=digit_runs())
    def test_separator_count_follows_interval(self, run: str) -> None:
        """A grouped run has one separator per interval across the budget."""
        _, group_size = count_placeholders(run)
        rendered = render_digits(run)
        event(f"group_size={group_size}")
        expected = (MAX_DIGITS - 1) // group_size if group_size else 0
        assert rendered.count(G) == expected
        assert not rendered.endswith(G)

    @given(run=digit_runs())
    def test_trailing_runs_never_grouped(self, run: str) -> None:
        """Fraction runs carry no separators whatever the pattern says."""
        assert G not in render_digits(run, PadDirection.TRAILING)
