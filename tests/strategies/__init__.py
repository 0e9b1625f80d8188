"""Hypothesis strategies for texosquery property-based testing.

- patterns: Date/time and numeric pattern strategies

Usage:
    from tests.strategies import datetime_patterns, digit_runs
    from tests.strategies.patterns import field_runs

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls for coverage reporting:
    - field_runs, datetime_patterns, digit_runs
"""

from .patterns import (
    arbitrary_patterns,
    datetime_patterns,
    decimal_patterns,
    digit_runs,
    field_letters,
    field_runs,
    quoted_text,
    separated_field_runs,
)

__all__ = [
    "arbitrary_patterns",
    "datetime_patterns",
    "decimal_patterns",
    "digit_runs",
    "field_letters",
    "field_runs",
    "quoted_text",
    "separated_field_runs",
]
