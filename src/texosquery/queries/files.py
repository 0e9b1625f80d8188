"""File queries.

File names given on the command line use "/" as the directory divider. A
bare file name that does not exist in the working directory is looked up
with kpsewhich, so files anywhere on the TeX search path can be queried.

Every query checks the read-access policy first and raises
PermissionDeniedError when the policy refuses the file. OS errors are not
raised: the information is reported as unavailable (empty string) and the
error is logged at DEBUG level.

Listings join escaped file names with a caller-supplied separator and can
be ordered by any FileSortType:

    Sort type     | Key
    --------------|--------------------------------
    name          | file name
    iname         | file name, case-insensitive
    ext           | extension, then file name
    date          | modification time
    size          | size in bytes
    default       | order returned by the OS

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import re
import subprocess
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from texosquery.diagnostics import ErrorTemplate, TeXOSQueryError
from texosquery.enums import EscapeMode, FileSortType
from texosquery.macros import escape_text

from .permissions import PermissionPolicy
from .system import from_tex_path, pdf_date, to_tex_path

__all__ = [
    "file_date",
    "file_path",
    "file_size",
    "file_uri",
    "filter_files",
    "list_files",
    "parent_path",
    "resolve_file",
    "sort_names",
    "walk_files",
]

logger = logging.getLogger(__name__)

_KPSEWHICH_TIMEOUT: float = 10.0


def resolve_file(name: str) -> Path:
    """Locate a file given in TeX path form.

    Args:
        name: File name with "/" dividers

    Returns:
        Path of the file; the kpsewhich result for a bare name that is not
        in the working directory, if kpsewhich finds one
    """
    path = Path(from_tex_path(name))
    if path.exists() or len(path.parts) != 1:
        return path

    try:
        result = subprocess.run(
            ["kpsewhich", os.fspath(path)],
            capture_output=True,
            text=True,
            check=False,
            timeout=_KPSEWHICH_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("kpsewhich lookup of %s failed: %s", name, e)
        return path

    found = result.stdout.strip().splitlines()
    if result.returncode == 0 and found and found[0]:
        return Path(from_tex_path(found[0]))
    return path


def file_size(name: str, policy: PermissionPolicy) -> str:
    """Size of a file in bytes; empty for an empty or missing file."""
    path = _checked(name, policy)
    if path is None:
        return ""
    try:
        size = path.stat().st_size
    except OSError as e:
        logger.debug("Size of %s unavailable: %s", name, e)
        return ""
    return str(size) if size > 0 else ""


def file_date(name: str, policy: PermissionPolicy) -> str:
    """Modification time of a file as a PDF date string."""
    path = _checked(name, policy)
    if path is None:
        return ""
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        logger.debug("Timestamp of %s unavailable: %s", name, e)
        return ""
    return pdf_date(datetime.fromtimestamp(mtime).astimezone())


def file_uri(name: str, policy: PermissionPolicy) -> str:
    """file: URI of an existing file."""
    path = _checked(name, policy)
    if path is None or not path.exists():
        return ""
    try:
        return escape_text(path.resolve().as_uri(), EscapeMode.DATA)
    except OSError as e:
        logger.debug("URI of %s unavailable: %s", name, e)
        return ""


def file_path(name: str, policy: PermissionPolicy) -> str:
    """Canonical path of an existing file."""
    path = _checked(name, policy)
    if path is None or not path.exists():
        return ""
    try:
        return to_tex_path(path.resolve(strict=True))
    except OSError as e:
        logger.debug("Canonical path of %s unavailable: %s", name, e)
        return ""


def parent_path(name: str, policy: PermissionPolicy) -> str:
    """Canonical path of the directory containing an existing file."""
    path = _checked(name, policy)
    if path is None or not path.exists():
        return ""
    try:
        return to_tex_path(path.resolve(strict=True).parent)
    except OSError as e:
        logger.debug("Parent of %s unavailable: %s", name, e)
        return ""


def sort_names(
    names: list[str], directory: Path, sort_type: FileSortType = FileSortType.DEFAULT
) -> list[str]:
    """Order file names (relative to directory) by sort type.

    Files whose timestamp or size cannot be read sort as 0.

    Args:
        names: Relative file names
        directory: Directory the names are relative to
        sort_type: Requested ordering

    Returns:
        New list in the requested order
    """
    if sort_type is FileSortType.DEFAULT:
        return list(names)

    descending = sort_type.value.endswith("-descending")
    key = _sort_key(sort_type, directory)
    return sorted(names, key=key, reverse=descending)


def list_files(
    separator: str,
    directory: str,
    policy: PermissionPolicy,
    sort_type: FileSortType = FileSortType.DEFAULT,
) -> str:
    """List every entry of a directory.

    Args:
        separator: Text placed between entries
        directory: Directory in TeX path form
        policy: Read-access policy
        sort_type: Requested ordering

    Returns:
        Escaped entry names joined by separator
    """
    return filter_files(separator, "", directory, policy, sort_type)


def filter_files(
    separator: str,
    regex: str,
    directory: str,
    policy: PermissionPolicy,
    sort_type: FileSortType = FileSortType.DEFAULT,
) -> str:
    """List the entries of a directory whose whole name matches regex.

    An empty regex matches every entry. Entries the policy refuses (dot
    files unless openin_any=a) are skipped.

    Raises:
        PermissionDeniedError: If the policy refuses the directory
        TeXOSQueryError: If regex is not a valid regular expression
    """
    path = _checked(directory, policy, lookup=False)
    if path is None or not path.is_dir():
        return ""

    matcher = _compile(regex)
    try:
        names = [
            entry.name
            for entry in os.scandir(path)
            if policy.is_read_permitted(path / entry.name)
            and (matcher is None or matcher.fullmatch(entry.name))
        ]
    except OSError as e:
        logger.debug("Listing of %s unavailable: %s", directory, e)
        return ""

    return _join(separator, sort_names(names, path, sort_type))


def walk_files(
    separator: str,
    regex: str,
    directory: str,
    policy: PermissionPolicy,
    sort_type: FileSortType = FileSortType.DEFAULT,
) -> str:
    """Recursively list the regular files below a directory.

    Names are relative to directory, with "/" dividers. Files and
    subdirectories the policy refuses (dot files unless openin_any=a) are
    skipped. An empty regex matches every file.

    Raises:
        PermissionDeniedError: If the policy refuses the directory
        TeXOSQueryError: If regex is not a valid regular expression
    """
    path = _checked(directory, policy, lookup=False)
    if path is None or not path.is_dir():
        return ""

    matcher = _compile(regex)
    names: list[str] = []

    for root, dirnames, filenames in os.walk(path, onerror=_log_walk_error):
        root_path = Path(root)
        dirnames[:] = [d for d in dirnames if policy.is_read_permitted(root_path / d)]
        for filename in filenames:
            file = root_path / filename
            if not policy.is_read_permitted(file) or not file.is_file():
                continue
            if matcher is not None and not matcher.fullmatch(filename):
                continue
            names.append(file.relative_to(path).as_posix())

    return _join(separator, sort_names(names, path, sort_type))


def _checked(name: str, policy: PermissionPolicy, *, lookup: bool = True) -> Path | None:
    """Resolve a TeX path and enforce the read policy; None for an empty name."""
    if not name:
        return None
    path = resolve_file(name) if lookup else Path(from_tex_path(name))
    policy.require_read(path)
    return path


def _compile(regex: str) -> re.Pattern[str] | None:
    if not regex:
        return None
    try:
        return re.compile(regex)
    except re.error as e:
        raise TeXOSQueryError(ErrorTemplate.invalid_regex(regex, str(e))) from e


def _join(separator: str, names: list[str]) -> str:
    return separator.join(escape_text(name, EscapeMode.DATA) for name in names)


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable directory: %s", error)


def _stat_value(path: Path, attribute: str) -> float:
    try:
        return getattr(path.stat(), attribute)
    except OSError:
        return 0


def _extension(name: str) -> str:
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""


def _sort_key(sort_type: FileSortType, directory: Path) -> Callable[[str], object]:
    match sort_type:
        case FileSortType.NAME_ASCENDING | FileSortType.NAME_DESCENDING:
            return lambda name: name
        case FileSortType.NAME_NOCASE_ASCENDING | FileSortType.NAME_NOCASE_DESCENDING:
            return lambda name: (name.casefold(), name)
        case FileSortType.EXT_ASCENDING | FileSortType.EXT_DESCENDING:
            return lambda name: (_extension(name), name)
        case FileSortType.DATE_ASCENDING | FileSortType.DATE_DESCENDING:
            return lambda name: _stat_value(directory / name, "st_mtime")
        case _:
            return lambda name: _stat_value(directory / name, "st_size")
