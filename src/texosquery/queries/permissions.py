"""Read-access policy for file queries.

TeX distributions restrict which files a document may read through the
kpathsea variable openin_any. File queries honour the same setting so that
shell escape cannot be used to look at files TeX itself may not open:

    Level | Dot files | Absolute paths and ..
    ------|-----------|------------------------------------------
    a     | allowed   | allowed
    r     | refused   | allowed
    p     | refused   | only below the working or TEXMFOUTPUT dir

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from texosquery.constants import DEFAULT_OPENIN_ANY, TEXMFOUTPUT_ENV
from texosquery.diagnostics import ErrorTemplate, PermissionDeniedError
from texosquery.enums import OpeninAny

__all__ = ["PermissionPolicy", "parse_openin_any", "read_openin_any"]

logger = logging.getLogger(__name__)

# kpathsea accepts these spellings for each level
_OPENIN_SPELLINGS: dict[str, OpeninAny] = {
    "a": OpeninAny.ANY,
    "y": OpeninAny.ANY,
    "1": OpeninAny.ANY,
    "r": OpeninAny.RESTRICTED,
    "n": OpeninAny.RESTRICTED,
    "0": OpeninAny.RESTRICTED,
    "p": OpeninAny.PARANOID,
}

_KPSEWHICH_TIMEOUT: float = 10.0


def parse_openin_any(value: str | None) -> OpeninAny:
    """Interpret an openin_any value.

    Only the first character counts, as in kpathsea. Anything unrecognised
    falls back to the most restrictive level.

    Example:
        >>> parse_openin_any("a")
        <OpeninAny.ANY: 'a'>
        >>> parse_openin_any("")
        <OpeninAny.PARANOID: 'p'>
    """
    if value:
        level = _OPENIN_SPELLINGS.get(value.strip()[:1].lower())
        if level is not None:
            return level
    return OpeninAny(DEFAULT_OPENIN_ANY)


def read_openin_any() -> OpeninAny:
    """Ask kpsewhich for the openin_any setting of the TeX installation.

    Returns:
        The configured level, or the default when kpsewhich is unavailable
    """
    try:
        result = subprocess.run(
            ["kpsewhich", "-var-value=openin_any"],
            capture_output=True,
            text=True,
            check=False,
            timeout=_KPSEWHICH_TIMEOUT,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("kpsewhich unavailable, using openin_any=%s: %s", DEFAULT_OPENIN_ANY, e)
        return OpeninAny(DEFAULT_OPENIN_ANY)

    if result.returncode != 0:
        logger.debug("kpsewhich exited with %d, using default openin_any", result.returncode)
        return OpeninAny(DEFAULT_OPENIN_ANY)

    return parse_openin_any(result.stdout)


@dataclass(frozen=True, slots=True)
class PermissionPolicy:
    """Immutable read-access policy.

    Attributes:
        openin_any: Access level
        cwd: Working directory (paranoid mode allows files below it)
        texmfoutput: TEXMFOUTPUT directory, if set (also allowed)

    Example:
        >>> policy = PermissionPolicy(OpeninAny.RESTRICTED, cwd=Path("/work"))
        >>> policy.is_read_permitted("/etc/hostname")
        True
        >>> policy.is_read_permitted(".secret")
        False
    """

    openin_any: OpeninAny = OpeninAny.PARANOID
    cwd: Path = field(default_factory=Path.cwd)
    texmfoutput: Path | None = None

    @classmethod
    def from_environment(cls, openin_any: OpeninAny | str | None = None) -> PermissionPolicy:
        """Build the policy in force for this process.

        Args:
            openin_any: Explicit level overriding the TeX configuration

        Returns:
            PermissionPolicy for the current directory and TEXMFOUTPUT
        """
        level = parse_openin_any(openin_any) if openin_any else read_openin_any()
        output = os.environ.get(TEXMFOUTPUT_ENV)
        return cls(
            openin_any=level,
            cwd=Path.cwd(),
            texmfoutput=Path(output) if output else None,
        )

    def is_read_permitted(self, path: str | os.PathLike[str]) -> bool:
        """Check whether the policy allows reading a file or directory.

        Args:
            path: Path as given (relative paths are taken from cwd)

        Returns:
            True if reading is allowed
        """
        if self.openin_any is OpeninAny.ANY:
            return True

        candidate = Path(path)
        if candidate.name.startswith(".") and candidate.name not in (".", ".."):
            return False

        if self.openin_any is OpeninAny.RESTRICTED:
            return True

        if not candidate.is_absolute() and ".." not in candidate.parts:
            return True

        resolved = (self.cwd / candidate).resolve()
        return any(
            resolved.is_relative_to(root.resolve()) for root in self._allowed_roots()
        )

    def require_read(self, path: str | os.PathLike[str]) -> None:
        """Raise unless the policy allows reading path.

        Raises:
            PermissionDeniedError: If reading is not allowed
        """
        if not self.is_read_permitted(path):
            raise PermissionDeniedError(
                ErrorTemplate.read_not_permitted(os.fspath(path), self.openin_any),
                path=os.fspath(path),
            )

    def _allowed_roots(self) -> tuple[Path, ...]:
        if self.texmfoutput is None:
            return (self.cwd,)
        return (self.cwd, self.texmfoutput)
