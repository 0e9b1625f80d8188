"""texosquery - OS and locale queries for TeX's shell escape.

Reports operating-system, file and locale information as text that TeX
can read, and translates locale date/time and number patterns into macro
token streams that the companion TeX package expands against values.

Public API:
    translate_datetime_pattern - Date/time pattern to macro tokens
    translate_number_pattern - Numeric pattern to macro tokens
    escape_text - Escape text for TeX
    PermissionPolicy - openin_any read-access policy for file queries

Exceptions:
    TeXOSQueryError - Base exception class
    QuerySyntaxError - Command-line usage errors
    PermissionDeniedError - File access refused by the policy

Submodules:
    texosquery.macros - Pattern-to-macro translation
    texosquery.queries - OS, file and locale queries
    texosquery.cli - Command-line interface
"""

from .diagnostics import PermissionDeniedError, QuerySyntaxError, TeXOSQueryError
from .enums import EscapeMode
from .macros import escape_text, translate_datetime_pattern, translate_number_pattern
from .queries.permissions import PermissionPolicy

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("texosquery")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "EscapeMode",
    "PermissionDeniedError",
    "PermissionPolicy",
    "QuerySyntaxError",
    "TeXOSQueryError",
    "__version__",
    "escape_text",
    "translate_datetime_pattern",
    "translate_number_pattern",
]
