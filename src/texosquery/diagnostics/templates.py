"""Diagnostic message templates.

Centralized message templates for testable, consistent diagnostics.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized diagnostic templates.

    All diagnostic and exception messages are created here, so that the
    translators, the query layer and the CLI word the same condition the
    same way and tests can compare against a single source.
    """

    # ------------------------------------------------------------------
    # Pattern diagnostics
    # ------------------------------------------------------------------

    @staticmethod
    def pattern_not_a_string(value: object, translator: str) -> Diagnostic:
        """Translator called with something other than a string.

        Args:
            value: The rejected argument
            translator: Name of the translator function

        Returns:
            Diagnostic for PATTERN_NOT_A_STRING
        """
        msg = f"{translator}() expected a pattern string, got {type(value).__name__}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_A_STRING,
            message=msg,
            hint="An empty token stream is returned",
            severity="warning",
        )

    @staticmethod
    def unterminated_quote(pattern: str) -> Diagnostic:
        """Quoted literal still open at the end of a pattern.

        Args:
            pattern: The offending pattern

        Returns:
            Diagnostic for PATTERN_UNTERMINATED_QUOTE
        """
        return Diagnostic(
            code=DiagnosticCode.PATTERN_UNTERMINATED_QUOTE,
            message="Unterminated quoted literal in pattern",
            hint="The literal is treated as closed at the end of the pattern",
            subject=pattern,
            severity="warning",
        )

    @staticmethod
    def extra_subpatterns(pattern: str, count: int) -> Diagnostic:
        """Numeric pattern with more than one unescaped ';'.

        Args:
            pattern: The offending pattern
            count: Number of sub-patterns found

        Returns:
            Diagnostic for PATTERN_EXTRA_SUBPATTERNS
        """
        msg = f"Pattern has {count} sub-patterns, expected at most 2"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_EXTRA_SUBPATTERNS,
            message=msg,
            hint="Only the positive and negative sub-patterns are used",
            subject=pattern,
            severity="warning",
        )

    @staticmethod
    def fraction_grouping(pattern: str) -> Diagnostic:
        """Grouping separator in a fraction part."""
        return Diagnostic(
            code=DiagnosticCode.PATTERN_FRACTION_GROUPING,
            message="Grouping separator in fraction part ignored",
            hint="Only the integer part of a number is grouped",
            subject=pattern,
            severity="warning",
        )

    # ------------------------------------------------------------------
    # Query diagnostics
    # ------------------------------------------------------------------

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier not recognised by Babel.

        Args:
            locale_code: The identifier as given
            reason: Babel's error text

        Returns:
            Diagnostic for QUERY_LOCALE_UNKNOWN
        """
        return Diagnostic(
            code=DiagnosticCode.QUERY_LOCALE_UNKNOWN,
            message=f"Unknown locale '{locale_code}': {reason}",
            hint="Use a BCP 47 language tag such as 'en-GB' or 'de-CH'",
            subject=locale_code,
        )

    @staticmethod
    def read_not_permitted(path: str, openin_any: str) -> Diagnostic:
        """File access refused by the openin_any policy.

        Args:
            path: The refused path
            openin_any: Policy level in force

        Returns:
            Diagnostic for QUERY_READ_NOT_PERMITTED
        """
        return Diagnostic(
            code=DiagnosticCode.QUERY_READ_NOT_PERMITTED,
            message=f"Read access forbidden by openin_any={openin_any}",
            hint="Paranoid mode only allows files below the working or output directory",
            subject=path,
        )

    @staticmethod
    def invalid_regex(regex: str, reason: str) -> Diagnostic:
        """File filter is not a valid regular expression.

        Args:
            regex: The filter as given
            reason: re.error text

        Returns:
            Diagnostic for QUERY_INVALID_REGEX
        """
        return Diagnostic(
            code=DiagnosticCode.QUERY_INVALID_REGEX,
            message=f"Invalid file filter: {reason}",
            subject=regex,
        )

    @staticmethod
    def invalid_number(value: str) -> Diagnostic:
        """Value given to the numeric query is not a number.

        Args:
            value: The value as given

        Returns:
            Diagnostic for QUERY_INVALID_NUMBER
        """
        return Diagnostic(
            code=DiagnosticCode.QUERY_INVALID_NUMBER,
            message="Numeric value expected",
            hint="Use a plain decimal number such as 12345.6",
            subject=value,
        )

    # ------------------------------------------------------------------
    # Usage errors
    # ------------------------------------------------------------------

    @staticmethod
    def missing_action() -> Diagnostic:
        """Command line without any action."""
        return Diagnostic(
            code=DiagnosticCode.USAGE_MISSING_ACTION,
            message="Missing argument",
            hint="Try texosquery --help",
        )

    @staticmethod
    def unknown_action(name: str) -> Diagnostic:
        """Command line names an action that does not exist.

        Args:
            name: The unrecognised option

        Returns:
            Diagnostic for USAGE_UNKNOWN_ACTION
        """
        return Diagnostic(
            code=DiagnosticCode.USAGE_UNKNOWN_ACTION,
            message=f"Unknown option '{name}'",
            hint="Try texosquery --help",
        )

    @staticmethod
    def missing_argument(name: str, usage: str) -> Diagnostic:
        """Action given fewer arguments than it requires.

        Args:
            name: The action as invoked
            usage: Expected syntax

        Returns:
            Diagnostic for USAGE_MISSING_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.USAGE_MISSING_ARGUMENT,
            message=f"Invalid syntax for action '{name}'",
            hint=f"Expected: {usage}",
        )

    @staticmethod
    def invalid_argument(name: str, value: str, reason: str) -> Diagnostic:
        """Action argument has an unusable value.

        Args:
            name: The action or option as invoked
            value: The rejected value
            reason: Why it was rejected

        Returns:
            Diagnostic for USAGE_INVALID_ARGUMENT
        """
        return Diagnostic(
            code=DiagnosticCode.USAGE_INVALID_ARGUMENT,
            message=f"Invalid argument '{value}' for '{name}': {reason}",
        )

    @staticmethod
    def incompatible_action(name: str, level: int) -> Diagnostic:
        """Action not available at the requested compatibility level.

        Args:
            name: The action as invoked
            level: Requested compatibility level

        Returns:
            Diagnostic for USAGE_INCOMPATIBLE_ACTION
        """
        return Diagnostic(
            code=DiagnosticCode.USAGE_INCOMPATIBLE_ACTION,
            message=f"'{name}' option not available in compatibility mode {level}",
        )
