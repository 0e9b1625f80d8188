"""Quote-aware scanning of locale patterns.

Date and number patterns share one quoting convention:
    - Single quotes delimit literal text: 'at' -> "at"
    - Two consecutive single quotes produce a literal quote, both inside
      and outside a quoted section: '' -> "'"
    - A quote left open at the end of the pattern closes there

Structural markers (';', 'E', '.', ',', currency, percent, per-mille) only
count when they are outside quoted sections. Everything in this module works
on split indices found by a single left-to-right scan; no regular
expressions are involved, so markers inside quotes are never mistaken for
structure.

Thread-safe. Pure functions.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from texosquery.constants import QUOTE

__all__ = [
    "PatternToken",
    "TokenKind",
    "count_placeholders",
    "find_unquoted",
    "has_placeholder",
    "is_quote_balanced",
    "iter_unquoted",
    "partition_unquoted",
    "split_unquoted",
    "tokenize_pattern",
]

DIGIT_PLACEHOLDERS: str = "0#"
GROUPING_PLACEHOLDER: str = ","


class TokenKind(StrEnum):
    """Kind of a pattern token."""

    CHAR = "char"
    """One unquoted character"""

    QUOTED = "quoted"
    """Content of a quoted section, '' already reduced to '"""

    APOSTROPHE = "apostrophe"
    """A '' pair outside any quoted section"""


@dataclass(frozen=True, slots=True)
class PatternToken:
    """One token of a pattern.

    Attributes:
        kind: Token kind
        text: The character, the quoted content, or "'"
        closed: False only for a quoted section still open at end of input
    """

    kind: TokenKind
    text: str
    closed: bool = True


def tokenize_pattern(pattern: str) -> Iterator[PatternToken]:
    """Split a pattern into unquoted characters and quoted sections.

    Examples:
        "h 'o''clock' a" -> CHAR h, CHAR ' ', QUOTED "o'clock", CHAR ' ', CHAR a
        "h''mm" -> CHAR h, APOSTROPHE, CHAR m, CHAR m

    Args:
        pattern: Date or number pattern

    Yields:
        PatternToken in pattern order
    """
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char != QUOTE:
            yield PatternToken(TokenKind.CHAR, char)
            i += 1
            continue

        # '' outside a quoted section
        if i + 1 < n and pattern[i + 1] == QUOTE:
            yield PatternToken(TokenKind.APOSTROPHE, QUOTE)
            i += 2
            continue

        i += 1  # Skip opening quote
        literal_chars: list[str] = []
        closed = False

        while i < n:
            if pattern[i] == QUOTE:
                if i + 1 < n and pattern[i + 1] == QUOTE:
                    literal_chars.append(QUOTE)
                    i += 2
                else:
                    i += 1
                    closed = True
                    break
            else:
                literal_chars.append(pattern[i])
                i += 1

        yield PatternToken(TokenKind.QUOTED, "".join(literal_chars), closed)


def iter_unquoted(pattern: str) -> Iterator[tuple[int, str]]:
    """Yield (index, character) for every character outside quoted sections.

    Quote characters themselves are never yielded, whether they delimit a
    section or stand for a literal quote.

    Args:
        pattern: Date or number pattern

    Yields:
        Index into pattern and the character at that index
    """
    in_quote = False
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]
        if char == QUOTE:
            if i + 1 < n and pattern[i + 1] == QUOTE:
                i += 2
                continue
            in_quote = not in_quote
        elif not in_quote:
            yield i, char
        i += 1


def is_quote_balanced(pattern: str) -> bool:
    """Check that every quoted section of the pattern is closed."""
    return all(token.closed for token in tokenize_pattern(pattern))


def find_unquoted(pattern: str, targets: str, start: int = 0) -> int:
    """Find the first unquoted occurrence of any target character.

    Args:
        pattern: Pattern to search
        targets: Characters to look for
        start: Lowest index to report

    Returns:
        Index of the first match at or after start, or -1
    """
    for index, char in iter_unquoted(pattern):
        if index >= start and char in targets:
            return index
    return -1


def split_unquoted(pattern: str, separator: str) -> list[str]:
    """Split a pattern at every unquoted separator character.

    Quoting is preserved in the pieces, so each piece is itself a pattern.

    Args:
        pattern: Pattern to split
        separator: Single separator character

    Returns:
        List of pieces (one more than the number of separators)
    """
    pieces: list[str] = []
    begin = 0
    for index, char in iter_unquoted(pattern):
        if char == separator:
            pieces.append(pattern[begin:index])
            begin = index + 1
    pieces.append(pattern[begin:])
    return pieces


def partition_unquoted(pattern: str, separator: str) -> tuple[str, str, str]:
    """Partition a pattern at its first unquoted separator character.

    Behaves like str.partition() but ignores separators inside quotes.

    Args:
        pattern: Pattern to partition
        separator: Single separator character

    Returns:
        (before, separator, after), or (pattern, "", "") when absent
    """
    index = find_unquoted(pattern, separator)
    if index == -1:
        return (pattern, "", "")
    return (pattern[:index], separator, pattern[index + 1 :])


def has_placeholder(pattern: str) -> bool:
    """Check whether a pattern contains an unquoted 0 or # placeholder."""
    return find_unquoted(pattern, DIGIT_PLACEHOLDERS) != -1


def count_placeholders(pattern: str) -> tuple[int, int]:
    """Count digit placeholders and the grouping interval of a digit run.

    The grouping interval is the number of placeholders after the last
    grouping separator; it is 0 when the run has no separator.

    Example:
        >>> count_placeholders("#,##0")
        (4, 3)
        >>> count_placeholders("0.00")
        (3, 0)

    Args:
        pattern: Integer, fraction or exponent part of a number pattern

    Returns:
        (number of placeholders, grouping interval)
    """
    digits = 0
    group_size = 0
    grouped = False

    for _, char in iter_unquoted(pattern):
        if char in DIGIT_PLACEHOLDERS:
            digits += 1
            group_size += 1
        elif char == GROUPING_PLACEHOLDER:
            grouped = True
            group_size = 0

    return (digits, group_size if grouped else 0)
