"""Macro vocabulary shared with the TeX side.

These control-sequence names are the wire contract with the macro package
that expands texosquery output. They must stay stable: renaming one breaks
every document built against an older macro package.

Python 3.13+. Zero external dependencies.
"""

from enum import StrEnum

__all__ = ["Macro", "macro"]


class Macro(StrEnum):
    """Control-sequence names (without the leading backslash)."""

    # Date/time patterns
    DATETIME_FIELD = "dtf"
    """\\dtf{length}{letter}: one date/time field run"""

    STRING = "str"
    """\\str{text}: quoted literal span"""

    APOSTROPHE = "apo"
    """Literal apostrophe written as '' in a pattern"""

    # Digits
    DIGIT = "dgt"
    """Mandatory digit (pattern character 0)"""

    DIGIT_NONZERO = "dgtnz"
    """Optional digit, hidden when a redundant zero (pattern character #)"""

    GROUP_SEPARATOR = "ngp"
    """Locale grouping separator"""

    MINUS_SIGN = "msg"
    """Locale minus sign"""

    # Numeric structure
    DECIMAL = "decfmt"
    """\\decfmt{integer}{fraction}"""

    SCIENTIFIC = "sinumfmt"
    """\\sinumfmt{mantissa}{exponent}"""

    SIGNED = "pnfmt"
    """\\pnfmt{positive}{negative}: pattern with a negative sub-pattern"""

    CURRENCY_SUFFIX = "scur"
    CURRENCY_SUFFIX_INTL = "sicur"
    CURRENCY_PREFIX = "pcur"
    CURRENCY_PREFIX_INTL = "picur"
    PERCENT_SUFFIX = "spct"
    PERCENT_PREFIX = "ppct"
    PERMILLE_SUFFIX = "spml"
    PERMILLE_PREFIX = "ppml"

    # Character escapes
    WRAP = "wrp"
    """\\wrp{c}: character outside printable ASCII"""

    BACKSLASH = "bks"
    LEFT_BRACE = "lbr"
    RIGHT_BRACE = "rbr"
    HASH = "hsh"
    GRAVE = "grv"
    LITERAL_GRAVE = "lgrv"
    SPACE = "spc"
    LITERAL_SPACE = "lspc"
    CLOSING_QUOTE = "csq"
    LITERAL_CLOSING_QUOTE = "lcsq"
    DOUBLE_QUOTE = "dqt"
    LITERAL_DOUBLE_QUOTE = "ldqt"


def macro(name: Macro, *args: str) -> str:
    """Render one macro token.

    A macro with arguments is written as ``\\name{arg1}{arg2}``. A macro
    without arguments is a TeX control word and is terminated by a space,
    so that a letter emitted next can never become part of its name.

    Args:
        name: Control-sequence name
        *args: Already-rendered argument texts

    Returns:
        The token text

    Example:
        >>> macro(Macro.DATETIME_FIELD, "2", "d")
        '\\\\dtf{2}{d}'
        >>> macro(Macro.DIGIT)
        '\\\\dgt '
    """
    if not args:
        return f"\\{name} "
    return f"\\{name}" + "".join(f"{{{arg}}}" for arg in args)
