"""Diagnostic system for texosquery.

Provides structured diagnostics with codes and hints, message templates and
the exception hierarchy used by the query layer and the CLI.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CompatibilityError,
    PermissionDeniedError,
    QuerySyntaxError,
    TeXOSQueryError,
)
from .templates import ErrorTemplate

__all__ = [
    "CompatibilityError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "PermissionDeniedError",
    "QuerySyntaxError",
    "TeXOSQueryError",
]
