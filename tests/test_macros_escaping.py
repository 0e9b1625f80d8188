"""Tests for macros/escaping.py and the macro token builder.

Covers the full escape table in both modes, printable ASCII pass-through
and the \\wrp fallback, plus property tests that escaping is total and
never produces unbalanced braces.

Python 3.13+.
"""

import re

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from texosquery.enums import EscapeMode
from texosquery.macros import Macro, escape_char, escape_text, macro


class TestMacroBuilder:
    """Test macro() token rendering."""

    def test_control_word_has_trailing_space(self) -> None:
        """Argument-less macros end with a space."""
        assert macro(Macro.DIGIT) == "\\dgt "

    def test_single_argument(self) -> None:
        """One argument is braced."""
        assert macro(Macro.STRING, "abc") == "\\str{abc}"

    def test_two_arguments(self) -> None:
        """Arguments are braced in order."""
        assert macro(Macro.DATETIME_FIELD, "2", "d") == "\\dtf{2}{d}"

    def test_empty_argument_is_kept(self) -> None:
        """An empty argument still produces a brace group."""
        assert macro(Macro.CURRENCY_PREFIX, "", "x") == "\\pcur{}{x}"


class TestEscapeTable:
    """Test the escape table, mode by mode."""

    @pytest.mark.parametrize(
        ("char", "text", "data"),
        [
            ("\\", "\\bks ", "\\bks "),
            ("{", "\\lbr ", "\\lbr "),
            ("}", "\\rbr ", "\\rbr "),
            ("#", "\\#", "\\hsh "),
            ("_", "\\_", "_"),
            ("'", "\\csq ", "\\lcsq "),
            ("`", "\\grv ", "\\lgrv "),
            ('"', "\\dqt ", "\\ldqt "),
            (" ", "\\spc ", "\\lspc "),
        ],
    )
    def test_special_characters(self, char: str, text: str, data: str) -> None:
        """Each special character maps to its mode-specific token."""
        assert escape_char(char, EscapeMode.TEXT) == text
        assert escape_char(char, EscapeMode.DATA) == data

    @pytest.mark.parametrize("char", ["a", "Z", "0", "-", ".", ":", "%", "~", "!", "/"])
    def test_printable_ascii_passes_through(self, char: str) -> None:
        """Printable ASCII without TeX meaning is unchanged in both modes."""
        assert escape_char(char, EscapeMode.TEXT) == char
        assert escape_char(char, EscapeMode.DATA) == char

    @pytest.mark.parametrize("char", ["é", "年", "€", " ", " ", "\t", "\x7f"])
    def test_other_characters_wrapped(self, char: str) -> None:
        """Characters outside printable ASCII are wrapped in \\wrp."""
        assert escape_char(char, EscapeMode.TEXT) == f"\\wrp{{{char}}}"
        assert escape_char(char, EscapeMode.DATA) == f"\\wrp{{{char}}}"

    @pytest.mark.parametrize("text", ["", "ab", "a#", "é!"])
    @pytest.mark.parametrize("mode", list(EscapeMode))
    def test_not_one_character_rejected(self, text: str, mode: EscapeMode) -> None:
        """Only a single code point is accepted."""
        with pytest.raises(ValueError, match="expected one character"):
            escape_char(text, mode)


class TestEscapeText:
    """Test escape_text()."""

    def test_concatenates_tokens(self) -> None:
        """Every character is escaped and the tokens are joined."""
        assert escape_text("a b#", EscapeMode.TEXT) == "a\\spc b\\#"
        assert escape_text("a b#", EscapeMode.DATA) == "a\\lspc b\\hsh "

    def test_empty_text(self) -> None:
        """Empty input gives empty output."""
        assert escape_text("", EscapeMode.DATA) == ""


class TestEscapeProperties:
    """Property tests for escaping."""

    @given(
        text=st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=30),
        mode=st.sampled_from(EscapeMode),
    )
    def test_braces_balanced(self, text: str, mode: EscapeMode) -> None:
        """Escaped text never opens a group it does not close."""
        escaped = escape_text(text, mode)
        event(f"mode={mode}")
        depth = 0
        for char in escaped:
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
            assert depth >= 0
        assert depth == 0

    @given(text=st.text(alphabet=st.characters(min_codepoint=0x20, max_codepoint=0x7E)))
    def test_data_mode_has_no_raw_specials(self, text: str) -> None:
        """DATA mode output contains no raw #, quotes or spaces."""
        # Control words carry the only spaces; drop them before checking
        stripped = re.sub(r"\\[a-z]+ ", "", escape_text(text, EscapeMode.DATA))
        for special in "#'`\" \\{}":
            assert special not in stripped
