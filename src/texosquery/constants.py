"""Shared constants for texosquery.

This module provides centralized configuration constants used across the
macro translators, the query layer and the command-line interface. Placing
constants here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Digit budget: Width limit of numbers the TeX side can represent
- Date-time fields: Field letters understood by the date/time translator
- File access: Defaults for the openin_any permission policy
- Application: Version and compatibility information

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Digit budget
    "MAX_DIGITS",
    # Date-time fields
    "DATETIME_FIELD_LETTERS",
    # Pattern syntax
    "CURRENCY_SIGN",
    "PERCENT_SIGN",
    "PERMILLE_SIGN",
    "QUOTE",
    # File access
    "DEFAULT_OPENIN_ANY",
    "TEXMFOUTPUT_ENV",
    # Application
    "APP_NAME",
    "VERSION_DATE",
    "COMPATIBILITY_LEVELS",
    "DEFAULT_COMPATIBILITY",
]

# ============================================================================
# DIGIT BUDGET
# ============================================================================
#
# TeX count registers overflow above 2^31-1, so the macro layer works on
# numbers digit by digit and supports at most ten integer digits (and ten
# fractional digits). The digit renderer pads every integer and fractional
# run to exactly this many digit macros and discards placeholders beyond it.
#
# ============================================================================

MAX_DIGITS: int = 10

# ============================================================================
# DATE-TIME FIELDS
# ============================================================================

# Field letters recognised by the date/time translator, in the order the
# date-time query emits their values:
#   G era, y year, Y week year, M month, w week in year, W week in month,
#   D day in year, d day in month, F day of week in month, E day name,
#   u ISO day number, a am/pm, H hour 0-23, k hour 1-24, K hour 0-11,
#   h hour 1-12, m minute, s second, S millisecond,
#   z zone name, Z RFC 822 offset, X ISO 8601 offset.
DATETIME_FIELD_LETTERS: str = "GyYMwWDdFEuaHkKhmsSzZX"

# ============================================================================
# PATTERN SYNTAX
# ============================================================================

QUOTE: str = "'"
CURRENCY_SIGN: str = "¤"
PERCENT_SIGN: str = "%"
PERMILLE_SIGN: str = "‰"

# ============================================================================
# FILE ACCESS
# ============================================================================

# Used when kpsewhich is unavailable or reports nothing: the most
# restrictive TeX setting.
DEFAULT_OPENIN_ANY: str = "p"

TEXMFOUTPUT_ENV: str = "TEXMFOUTPUT"

# ============================================================================
# APPLICATION
# ============================================================================

APP_NAME: str = "texosquery"
VERSION_DATE: str = "2017-06-20"

# Compatibility levels accepted by --compatible. Actions introduced at a
# later level are rejected when an earlier level is requested.
COMPATIBILITY_LEVELS: tuple[int, ...] = (0, 1, 2)
DEFAULT_COMPATIBILITY: int = 2
