"""Command-line interface.

Usage: texosquery <action> [args] ...

Each action prints its result on its own line. When more than one action
is given, every result is wrapped in a brace group so that TeX can read
the whole output as a sequence of arguments. Information that is not
available prints an empty line (the reason is logged with --debug).

Actions are described by QueryAction entries in ACTIONS; each one is
registered with argparse through a custom Action that records the
invocation in command-line order.

Exit status:
    0: Success (including unavailable information)
    1: Usage error (unknown action, missing argument, incompatible action)

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import cached_property
from typing import NoReturn

from texosquery import __version__
from texosquery.constants import (
    APP_NAME,
    COMPATIBILITY_LEVELS,
    DEFAULT_COMPATIBILITY,
    VERSION_DATE,
)
from texosquery.diagnostics import (
    CompatibilityError,
    ErrorTemplate,
    QuerySyntaxError,
    TeXOSQueryError,
)
from texosquery.enums import FileSortType, OpeninAny
from texosquery.macros import translate_datetime_pattern, translate_number_pattern
from texosquery.queries import (
    PermissionPolicy,
    codeset,
    cwd,
    date_time_fields,
    file_date,
    file_path,
    file_size,
    file_uri,
    filter_files,
    list_files,
    locale_data,
    locale_id,
    locale_tag,
    numeric,
    os_arch,
    os_name,
    os_version,
    parent_path,
    pdf_now,
    resolve_locale,
    tmp_dir,
    user_home,
    walk_files,
)

__all__ = [
    "ACTIONS",
    "QueryAction",
    "QueryContext",
    "build_parser",
    "configure_logging",
    "execute",
    "main",
    "parse_command_line",
    "run",
]

logger = logging.getLogger(__name__)

# --debug level -> logging level
_DEBUG_LEVELS: dict[int, int] = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
}


class QueryContext:
    """Settings shared by the actions of one invocation.

    The permission policy is built on first use, so that kpsewhich is only
    consulted when a file action runs.
    """

    def __init__(
        self,
        compatibility: int = DEFAULT_COMPATIBILITY,
        openin_any: OpeninAny | None = None,
    ) -> None:
        self.compatibility = compatibility
        self.openin_any = openin_any

    @cached_property
    def policy(self) -> PermissionPolicy:
        """Read-access policy for file actions."""
        return PermissionPolicy.from_environment(self.openin_any)


@dataclass(frozen=True, slots=True)
class QueryAction:
    """One command-line action.

    Attributes:
        long_name: Long option without dashes (e.g. "filesize")
        short_name: Single-letter option without dash, if any
        required: Metavars of the required arguments
        optional: Metavars of the optional trailing arguments
        description: Help text
        handler: Computes the result from the context and the arguments
        min_compatibility: Lowest compatibility level offering the action
    """

    long_name: str
    short_name: str | None
    required: tuple[str, ...]
    optional: tuple[str, ...]
    description: str
    handler: Callable[[QueryContext, list[str]], str]
    min_compatibility: int = 0

    @property
    def flags(self) -> tuple[str, ...]:
        """Option strings accepted on the command line."""
        if self.short_name is None:
            return (f"--{self.long_name}",)
        return (f"-{self.short_name}", f"--{self.long_name}")

    @property
    def max_args(self) -> int:
        """Largest number of arguments the action accepts."""
        return len(self.required) + len(self.optional)

    @property
    def nargs(self) -> int | str:
        """argparse nargs for the action."""
        if not self.optional:
            return len(self.required)
        if not self.required:
            return "?" if len(self.optional) == 1 else "*"
        return "+"

    def usage(self, name: str) -> str:
        """Expected syntax when invoked as name."""
        words = [name, *(f"<{arg}>" for arg in self.required)]
        words.extend(f"[<{arg}>]" for arg in self.optional)
        return " ".join(words)

    def run(self, context: QueryContext, invoked_as: str, args: list[str]) -> str:
        """Compute the action's result.

        Raises:
            CompatibilityError: If the context's compatibility level is too low
        """
        if context.compatibility < self.min_compatibility:
            raise CompatibilityError(
                ErrorTemplate.incompatible_action(invoked_as, context.compatibility)
            )
        return self.handler(context, args)


@dataclass(frozen=True, slots=True)
class _Invocation:
    action: QueryAction
    invoked_as: str
    args: list[str]


class _RecordQuery(argparse.Action):
    """argparse Action that appends the invocation to namespace.queries."""

    def __init__(self, option_strings: Sequence[str], dest: str, query: QueryAction, **kwargs):
        super().__init__(option_strings, dest, nargs=query.nargs, **kwargs)
        self.query = query

    def __call__(self, parser, namespace, values, option_string=None) -> None:
        if values is None:
            args: list[str] = []
        elif isinstance(values, str):
            args = [values]
        else:
            args = list(values)

        name = option_string or self.query.flags[-1]
        if not len(self.query.required) <= len(args) <= self.query.max_args:
            raise QuerySyntaxError(
                ErrorTemplate.missing_argument(name, self.query.usage(name))
            )

        invocations = list(getattr(namespace, self.dest, None) or [])
        invocations.append(_Invocation(self.query, name, args))
        setattr(namespace, self.dest, invocations)


class _QueryParser(argparse.ArgumentParser):
    """ArgumentParser that reports errors as QuerySyntaxError."""

    def error(self, message: str) -> NoReturn:
        raise QuerySyntaxError(message)


def _sort_type(name: str, args: list[str], index: int) -> FileSortType:
    if len(args) <= index:
        return FileSortType.DEFAULT
    try:
        return FileSortType.from_name(args[index])
    except ValueError as e:
        reason = f"use one of {FileSortType.options()}"
        raise QuerySyntaxError(ErrorTemplate.invalid_argument(name, args[index], reason)) from e


def _optional(args: list[str], index: int) -> str | None:
    return args[index] if len(args) > index else None


ACTIONS: tuple[QueryAction, ...] = (
    QueryAction(
        "locale", "L", (), (),
        "Display POSIX-style locale information",
        lambda ctx, args: locale_id(resolve_locale()),
    ),
    QueryAction(
        "locale-lcs", "l", (), (),
        "As --locale but codeset in lowercase with hyphens stripped",
        lambda ctx, args: locale_id(resolve_locale(), convert_codeset=True),
    ),
    QueryAction(
        "bcp47", "b", (), (),
        "Display locale as an IETF BCP 47 language tag",
        lambda ctx, args: locale_tag(resolve_locale()),
        min_compatibility=1,
    ),
    QueryAction(
        "codeset", "C", (), (),
        "Display the codeset",
        lambda ctx, args: codeset(),
        min_compatibility=1,
    ),
    QueryAction(
        "numeric", "N", ("value",), ("locale",),
        "Display locale-dependent numerical value",
        lambda ctx, args: numeric(args[0], resolve_locale(_optional(args, 1))),
        min_compatibility=1,
    ),
    QueryAction(
        "locale-data", "D", (), ("locale",),
        "Display data for the given locale (default: system locale)",
        lambda ctx, args: locale_data(resolve_locale(_optional(args, 0))),
        min_compatibility=1,
    ),
    QueryAction(
        "date-time", "M", (), (),
        "Display all the current date-time data",
        lambda ctx, args: date_time_fields(),
        min_compatibility=1,
    ),
    QueryAction(
        "cwd", "c", (), (),
        "Display current working directory",
        lambda ctx, args: cwd(),
    ),
    QueryAction(
        "userhome", "m", (), (),
        "Display user's home directory",
        lambda ctx, args: user_home(),
    ),
    QueryAction(
        "tmpdir", "t", (), (),
        "Display temporary directory",
        lambda ctx, args: tmp_dir(),
    ),
    QueryAction(
        "osname", "o", (), (),
        "Display OS name",
        lambda ctx, args: os_name(),
    ),
    QueryAction(
        "osversion", "r", (), (),
        "Display OS version",
        lambda ctx, args: os_version(),
    ),
    QueryAction(
        "osarch", "a", (), (),
        "Display OS architecture",
        lambda ctx, args: os_arch(),
    ),
    QueryAction(
        "pdfnow", "n", (), (),
        "Display current date-time in PDF format",
        lambda ctx, args: pdf_now(),
    ),
    QueryAction(
        "pdfdate", "d", ("file",), (),
        "Display date stamp of <file> in PDF format",
        lambda ctx, args: file_date(args[0], ctx.policy),
    ),
    QueryAction(
        "filesize", "s", ("file",), (),
        "Display size of <file> in bytes",
        lambda ctx, args: file_size(args[0], ctx.policy),
    ),
    QueryAction(
        "list", "i", ("sep", "dir"), ("sort",),
        "Display list of all files in <dir> separated by <sep>",
        lambda ctx, args: list_files(
            args[0], args[1], ctx.policy, _sort_type("--list", args, 2)
        ),
    ),
    QueryAction(
        "filterlist", "f", ("sep", "regex", "dir"), ("sort",),
        "Display list of files in <dir> that fully match <regex> separated by <sep>",
        lambda ctx, args: filter_files(
            args[0], args[1], args[2], ctx.policy, _sort_type("--filterlist", args, 3)
        ),
    ),
    QueryAction(
        "walk", "w", ("sep", "regex", "dir"), ("sort",),
        "Display list of files in <dir> and its subdirectories that match <regex>",
        lambda ctx, args: walk_files(
            args[0], args[1], args[2], ctx.policy, _sort_type("--walk", args, 3)
        ),
        min_compatibility=2,
    ),
    QueryAction(
        "uri", "u", ("file",), (),
        "Display the URI of <file>",
        lambda ctx, args: file_uri(args[0], ctx.policy),
    ),
    QueryAction(
        "path", "p", ("file",), (),
        "Display the canonical path of <file>",
        lambda ctx, args: file_path(args[0], ctx.policy),
    ),
    QueryAction(
        "dirname", "e", ("file",), (),
        "Display the parent of <file>",
        lambda ctx, args: parent_path(args[0], ctx.policy),
    ),
    QueryAction(
        "date-pattern", None, ("pattern",), (),
        "Translate a date/time <pattern> into TeX macros",
        lambda ctx, args: translate_datetime_pattern(args[0]),
        min_compatibility=2,
    ),
    QueryAction(
        "number-pattern", None, ("pattern",), (),
        "Translate a numeric <pattern> into TeX macros",
        lambda ctx, args: translate_number_pattern(args[0]),
        min_compatibility=2,
    ),
)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with every action registered."""
    parser = _QueryParser(
        prog=APP_NAME,
        description=(
            "Cross-platform OS query application for use with TeX's shell escape. "
            "Each query displays the result in a single line. A blank line is "
            "printed if the requested information is unavailable."
        ),
        epilog=(
            "Paths should use / for the directory divider. "
            f"Sort options: {FileSortType.options()}."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=(
            f"{APP_NAME} {__version__} {VERSION_DATE}\n"
            "License LPPL 1.3+ (http://ctan.org/license/lppl1.3)"
        ),
    )
    parser.add_argument(
        "--debug",
        nargs="?",
        type=int,
        const=1,
        default=0,
        metavar="level",
        help="Write diagnostics to stderr (1 = warnings, 2 = info, 3 = debug)",
    )
    parser.add_argument(
        "--compatible",
        type=int,
        choices=COMPATIBILITY_LEVELS,
        default=DEFAULT_COMPATIBILITY,
        metavar="level",
        help="Only offer the actions of compatibility level 0, 1 or 2",
    )
    parser.add_argument(
        "--openin",
        type=OpeninAny,
        choices=list(OpeninAny),
        default=None,
        metavar="a|r|p",
        help="Override the openin_any setting of the TeX installation",
    )

    queries = parser.add_argument_group("queries")
    for query in ACTIONS:
        metavar: str | tuple[str, ...] | None
        if query.nargs == 0:
            metavar = None
        elif query.nargs == "?":
            metavar = query.optional[0]
        elif isinstance(query.nargs, int):
            metavar = query.required
        else:
            metavar = " ".join((*query.required, *(f"[{arg}]" for arg in query.optional)))
        queries.add_argument(
            *query.flags,
            action=_RecordQuery,
            query=query,
            dest="queries",
            metavar=metavar,
            help=query.description,
        )

    return parser


def configure_logging(level: int) -> None:
    """Route diagnostics to stderr at the verbosity of a --debug level.

    Does nothing when the root logger already has handlers.
    """
    logging.basicConfig(
        level=_DEBUG_LEVELS.get(level, logging.DEBUG),
        format=f"{APP_NAME}: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def parse_command_line(argv: Sequence[str]) -> argparse.Namespace:
    """Parse a command line into settings and the ordered action invocations.

    Args:
        argv: Arguments without the program name

    Returns:
        Namespace with debug, compatible, openin and queries

    Raises:
        QuerySyntaxError: On any usage error
    """
    if not argv:
        raise QuerySyntaxError(ErrorTemplate.missing_action())

    namespace, extras = build_parser().parse_known_args(list(argv))
    if extras:
        raise QuerySyntaxError(ErrorTemplate.unknown_action(extras[0]))
    if not namespace.queries:
        raise QuerySyntaxError(ErrorTemplate.missing_action())
    return namespace


def execute(namespace: argparse.Namespace, context: QueryContext | None = None) -> list[str]:
    """Run the parsed action invocations in command-line order.

    An action whose information is unavailable yields an empty result and
    a logged diagnostic.

    Args:
        namespace: Result of parse_command_line()
        context: Settings to use instead of those on the command line

    Returns:
        One result per action, brace-grouped when there are several

    Raises:
        QuerySyntaxError: On a usage error detected while running an action
    """
    if context is None:
        context = QueryContext(namespace.compatible, namespace.openin)

    invocations: list[_Invocation] = namespace.queries
    group = len(invocations) > 1
    results: list[str] = []

    for invocation in invocations:
        try:
            result = invocation.action.run(context, invocation.invoked_as, invocation.args)
        except QuerySyntaxError:
            raise
        except TeXOSQueryError as e:
            logger.warning("%s", e)
            result = ""
        results.append(f"{{{result}}}" if group else result)

    return results


def run(argv: Sequence[str], context: QueryContext | None = None) -> list[str]:
    """Parse a command line and compute its results.

    Raises:
        QuerySyntaxError: On any usage error
    """
    return execute(parse_command_line(argv), context)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the texosquery command.

    Returns:
        Exit status
    """
    try:
        namespace = parse_command_line(sys.argv[1:] if argv is None else argv)
        configure_logging(namespace.debug)
        results = execute(namespace)
    except QuerySyntaxError as e:
        print(f"{APP_NAME}: {e}", file=sys.stderr)
        return 1

    for line in results:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
