"""Character escaping for TeX output.

Every character that texosquery writes is either passed through or turned
into a macro token, depending on whether it means something to TeX and on
the context it appears in:

- TEXT mode: natural-language text (month names, quoted date literals).
  Characters are rendered the way they should be typeset.
- DATA mode: raw data (file names, numeric pattern literals, symbols).
  Characters are rendered as their literal glyphs.

Escape table:
    Char | TEXT      | DATA
    -----|-----------|-----------
    \\    | \\bks      | \\bks
    {    | \\lbr      | \\lbr
    }    | \\rbr      | \\rbr
    #    | \\#        | \\hsh
    _    | \\_        | _
    '    | \\csq      | \\lcsq
    `    | \\grv      | \\lgrv
    "    | \\dqt      | \\ldqt
    SP   | \\spc      | \\lspc

Other printable ASCII passes through unchanged; everything else is wrapped
in \\wrp{...} so the macro package can choose a font or encoding for it.

Thread-safe. Pure functions.

Python 3.13+. Zero external dependencies.
"""

from texosquery.enums import EscapeMode

from .vocabulary import Macro, macro

__all__ = ["escape_char", "escape_text"]

# Structurally significant to TeX in every context
_ALWAYS: dict[str, str] = {
    "\\": macro(Macro.BACKSLASH),
    "{": macro(Macro.LEFT_BRACE),
    "}": macro(Macro.RIGHT_BRACE),
}

_TEXT: dict[str, str] = {
    **_ALWAYS,
    "#": "\\#",
    "_": "\\_",
    "'": macro(Macro.CLOSING_QUOTE),
    "`": macro(Macro.GRAVE),
    '"': macro(Macro.DOUBLE_QUOTE),
    " ": macro(Macro.SPACE),
}

_DATA: dict[str, str] = {
    **_ALWAYS,
    "#": macro(Macro.HASH),
    "'": macro(Macro.LITERAL_CLOSING_QUOTE),
    "`": macro(Macro.LITERAL_GRAVE),
    '"': macro(Macro.LITERAL_DOUBLE_QUOTE),
    " ": macro(Macro.LITERAL_SPACE),
}

_TABLES: dict[EscapeMode, dict[str, str]] = {
    EscapeMode.TEXT: _TEXT,
    EscapeMode.DATA: _DATA,
}


def escape_char(char: str, mode: EscapeMode) -> str:
    """Escape one character.

    Args:
        char: A single character (one code point)
        mode: TEXT for natural-language text, DATA for raw data

    Returns:
        The character itself, or the macro token standing in for it

    Raises:
        ValueError: If char is not exactly one code point

    Example:
        >>> escape_char("#", EscapeMode.TEXT)
        '\\\\#'
        >>> escape_char("#", EscapeMode.DATA)
        '\\\\hsh '
        >>> escape_char("é", EscapeMode.TEXT)
        '\\\\wrp{é}'
    """
    if len(char) != 1:
        msg = f"escape_char() expected one character, got {char!r}"
        raise ValueError(msg)
    escaped = _TABLES[mode].get(char)
    if escaped is not None:
        return escaped
    if " " <= char <= "~":
        return char
    return macro(Macro.WRAP, char)


def escape_text(text: str, mode: EscapeMode) -> str:
    """Escape every character of a string.

    Args:
        text: Text to escape
        mode: TEXT for natural-language text, DATA for raw data

    Returns:
        Concatenated tokens
    """
    return "".join(escape_char(char, mode) for char in text)
