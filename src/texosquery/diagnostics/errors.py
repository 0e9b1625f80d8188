"""texosquery exception hierarchy with structured diagnostics.

The macro translators never raise; these exceptions belong to the query
layer and the command-line interface. All exceptions can carry a
Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class TeXOSQueryError(Exception):
    """Base exception for all texosquery errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize TeXOSQueryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class QuerySyntaxError(TeXOSQueryError):
    """Malformed command line: unknown action or missing arguments.

    The CLI reports it on stderr and exits with status 1.
    """


class CompatibilityError(QuerySyntaxError):
    """Action requested that the chosen compatibility level does not offer."""


class PermissionDeniedError(TeXOSQueryError):
    """File access refused by the openin_any policy.

    Attributes:
        path: The refused path
    """

    def __init__(self, message: str | Diagnostic, *, path: str = "") -> None:
        """Initialize PermissionDeniedError.

        Args:
            message: Error message string OR Diagnostic object
            path: The refused path
        """
        super().__init__(message)
        self.path = path
