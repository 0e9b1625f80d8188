"""Pattern-to-macro translation.

Rewrites locale formatting patterns into macro token streams that the TeX
side expands against concrete values. Nothing here formats a value or
looks up locale data; a pattern string goes in, a token string comes out.

    core <- escaping <- scanner <- digits <- numbers
                                 \\<- dates

Exports:
    translate_datetime_pattern: Date/time pattern -> \\dtf, \\str, \\apo tokens
    translate_number_pattern: Numeric pattern -> \\decfmt, \\sinumfmt, currency tokens
    split_subpatterns: Positive/negative split of a numeric pattern
    render_digits: One digit run -> fixed-width digit macros
    escape_char, escape_text: Character escaping for TeX
    Macro, macro: Macro vocabulary and token builder

Python 3.13+.
"""

from .dates import translate_datetime_pattern
from .digits import render_digits, render_literal
from .escaping import escape_char, escape_text
from .numbers import (
    SubPatternLayout,
    classify_subpattern,
    split_subpatterns,
    translate_number_pattern,
)
from .vocabulary import Macro, macro

__all__ = [
    "Macro",
    "SubPatternLayout",
    "classify_subpattern",
    "escape_char",
    "escape_text",
    "macro",
    "render_digits",
    "render_literal",
    "split_subpatterns",
    "translate_datetime_pattern",
    "translate_number_pattern",
]
