"""Operating-system queries.

Each query returns text ready for TeX: paths use "/" as the directory
divider and are escaped as data. Information that cannot be obtained is
returned as an empty string.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import platform
import tempfile
from datetime import datetime
from pathlib import Path

from texosquery.enums import EscapeMode
from texosquery.macros import escape_text

__all__ = [
    "cwd",
    "from_tex_path",
    "os_arch",
    "os_name",
    "os_version",
    "pdf_date",
    "pdf_now",
    "tmp_dir",
    "to_tex_path",
    "user_home",
]

logger = logging.getLogger(__name__)


def to_tex_path(path: str | os.PathLike[str]) -> str:
    """Convert a native path to TeX form.

    Backslash directory dividers become "/" and the result is escaped as
    data.

    Example:
        >>> to_tex_path("/tmp/my file.tex")
        '/tmp/my\\\\lspc file.tex'
    """
    text = os.fspath(path)
    if os.sep == "\\":
        text = text.replace("\\", "/")
    return escape_text(text, EscapeMode.DATA)


def from_tex_path(path: str) -> str:
    """Convert a path using "/" dividers to native form."""
    if os.sep != "/":
        return path.replace("/", os.sep)
    return path


def os_name() -> str:
    """Name of the operating system (e.g. Linux, Windows, Darwin)."""
    return escape_text(platform.system(), EscapeMode.DATA)


def os_arch() -> str:
    """Machine architecture (e.g. x86_64, arm64)."""
    return escape_text(platform.machine(), EscapeMode.DATA)


def os_version() -> str:
    """Operating system release."""
    return escape_text(platform.release(), EscapeMode.DATA)


def user_home() -> str:
    """User's home directory."""
    try:
        return to_tex_path(Path.home())
    except RuntimeError as e:
        logger.debug("Home directory unavailable: %s", e)
        return ""


def cwd() -> str:
    """Current working directory."""
    try:
        return to_tex_path(Path.cwd())
    except OSError as e:
        logger.debug("Working directory unavailable: %s", e)
        return ""


def tmp_dir() -> str:
    """Directory for temporary files."""
    return to_tex_path(tempfile.gettempdir())


def pdf_date(moment: datetime) -> str:
    """Format a moment as a PDF date string.

    The format is D:YYYYMMDDHHmmSS followed by the UTC offset as +HH'mm'.
    A naive datetime is taken as local time.

    Args:
        moment: Date and time to format

    Returns:
        PDF date string

    Example:
        >>> from datetime import timezone, timedelta
        >>> pdf_date(datetime(2017, 6, 20, 9, 5, 0, tzinfo=timezone(timedelta(hours=1))))
        "D:20170620090500+01'00'"
    """
    if moment.tzinfo is None:
        moment = moment.astimezone()
    offset = moment.strftime("%z") or "+0000"
    return f"{moment.strftime('D:%Y%m%d%H%M%S')}{offset[:3]}'{offset[3:5]}'"


def pdf_now() -> str:
    """Current date and time as a PDF date string."""
    return pdf_date(datetime.now().astimezone())
