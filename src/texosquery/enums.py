"""Enumerations for texosquery type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class EscapeMode(StrEnum):
    """Context in which a character is escaped for TeX.

    StrEnum provides automatic string conversion: str(EscapeMode.TEXT) == "text"
    """

    TEXT = "text"
    """Natural-language text: month names, quoted date literals"""

    DATA = "data"
    """Raw data: file names, numeric pattern literals, symbols"""


class PadDirection(StrEnum):
    """Side on which a digit run is padded up to the digit budget."""

    LEADING = "leading"
    """Integer side: padding before the placeholders, truncation at the front"""

    TRAILING = "trailing"
    """Fractional side: padding after the placeholders, truncation at the back"""


class RunKind(StrEnum):
    """Scanner state of the date/time pattern translator."""

    IDLE = "idle"
    """Between runs: nothing pending"""

    LITERAL = "literal"
    """Inside a quoted literal run"""

    FIELD = "field"
    """Accumulating a run of identical field letters"""


class NumberPatternKind(StrEnum):
    """Classification of a numeric sub-pattern."""

    CURRENCY = "currency"
    PERCENT = "percent"
    PERMILLE = "permille"
    PLAIN = "plain"


class OpeninAny(StrEnum):
    """TeX openin_any setting controlling which files may be read.

    Values match the single-letter codes used by kpathsea.
    """

    ANY = "a"
    """Any file may be read"""

    RESTRICTED = "r"
    """Dot files may not be read"""

    PARANOID = "p"
    """No dot files, no files outside the working or output directory"""


class FileSortType(StrEnum):
    """Ordering of file listings.

    Each member has up to two alternative spellings accepted on the
    command line; see FileSortType.from_name().
    """

    DEFAULT = "default"
    DATE_ASCENDING = "date-ascending"
    DATE_DESCENDING = "date-descending"
    SIZE_ASCENDING = "size-ascending"
    SIZE_DESCENDING = "size-descending"
    NAME_ASCENDING = "name-ascending"
    NAME_DESCENDING = "name-descending"
    NAME_NOCASE_ASCENDING = "iname-ascending"
    NAME_NOCASE_DESCENDING = "iname-descending"
    EXT_ASCENDING = "ext-ascending"
    EXT_DESCENDING = "ext-descending"

    @property
    def aliases(self) -> tuple[str, ...]:
        """Alternative names for this sort type."""
        return _SORT_ALIASES.get(self, ())

    @classmethod
    def from_name(cls, name: str | None) -> "FileSortType":
        """Look up a sort type by its name or one of its aliases.

        Args:
            name: Sort type as given on the command line, or None

        Returns:
            Matching FileSortType (DEFAULT when name is None)

        Raises:
            ValueError: If name matches no sort type
        """
        if name is None:
            return cls.DEFAULT
        for member in cls:
            if name == member.value or name in member.aliases:
                return member
        msg = f"Invalid sort type: {name}"
        raise ValueError(msg)

    @classmethod
    def options(cls) -> str:
        """Describe the accepted sort names for help output."""
        described: list[str] = []
        for member in cls:
            aliases = member.aliases
            if aliases:
                described.append(f"{member.value} (or {' or '.join(aliases)})")
            else:
                described.append(member.value)
        return ", ".join(described)


_SORT_ALIASES: dict[FileSortType, tuple[str, ...]] = {
    FileSortType.DATE_ASCENDING: ("date", "date-asc"),
    FileSortType.DATE_DESCENDING: ("date-des",),
    FileSortType.SIZE_ASCENDING: ("size", "size-asc"),
    FileSortType.SIZE_DESCENDING: ("size-des",),
    FileSortType.NAME_ASCENDING: ("name", "name-asc"),
    FileSortType.NAME_DESCENDING: ("name-des",),
    FileSortType.NAME_NOCASE_ASCENDING: ("iname", "iname-asc"),
    FileSortType.NAME_NOCASE_DESCENDING: ("iname-des",),
    FileSortType.EXT_ASCENDING: ("ext", "ext-asc"),
    FileSortType.EXT_DESCENDING: ("ext-des",),
}


__all__ = [
    "EscapeMode",
    "FileSortType",
    "NumberPatternKind",
    "OpeninAny",
    "PadDirection",
    "RunKind",
]
