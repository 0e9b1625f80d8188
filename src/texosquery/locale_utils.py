"""Locale utilities for BCP-47 and POSIX locale identifiers.

Centralizes locale format normalization and Babel lookups used by the
locale queries. Locales are normalized at the boundary (command line,
environment) and handled as babel.Locale objects from then on.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "language_tag",
    "normalize_locale",
    "parse_language_tag",
]

logger = logging.getLogger(__name__)

# Pseudo-locales that carry no language information
_NEUTRAL_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 or POSIX locale code to the form Babel parses.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Any encoding suffix (".UTF-8") and modifier ("@euro") is dropped.

    Args:
        locale_code: Locale code (e.g., "en-US", "de_DE.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "de_DE")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8@euro")
        'de_DE'
    """
    code = locale_code.split(".", 1)[0].split("@", 1)[0]
    return code.replace("-", "_")


def _resolve_numeric_region(locale_code: str) -> str:
    """Replace a UN M.49 numeric region by its ISO 3166 alpha-2 alias."""
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    parts = locale_code.split("_")
    aliases = get_global("territory_aliases")
    for index, part in enumerate(parts[1:], start=1):
        if len(part) == 3 and part.isdigit():
            replacement = aliases.get(part)
            if isinstance(replacement, (list, tuple)):
                # Babel lists the aliased territories in preference order
                replacement = replacement[0] if replacement else None
            if replacement:
                parts[index] = replacement
            break
    return "_".join(parts)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Numeric UN M.49
    regions ("es-419", "en-826") are accepted: a region that stands for a
    single country is replaced by that country's alpha-2 code.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-GB")
        >>> locale.territory
        'GB'
        >>> get_babel_locale("en-826").territory
        'GB'
    """
    from babel import Locale  # noqa: PLC0415

    normalized = _resolve_numeric_region(normalize_locale(locale_code))
    return Locale.parse(normalized)


def parse_language_tag(tag: str) -> Locale:
    """Parse a BCP-47 language tag into a Babel Locale.

    Alias of get_babel_locale() that names the command-line use.

    Args:
        tag: Language tag such as "fr-CA" or "zh-Hant-TW"

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If tag format is invalid
    """
    return get_babel_locale(tag)


def language_tag(locale: Locale) -> str:
    """Render a Babel Locale as a BCP-47 language tag.

    Example:
        >>> language_tag(get_babel_locale("zh_Hant_TW"))
        'zh-Hant-TW'
    """
    from babel.core import get_locale_identifier  # noqa: PLC0415

    return get_locale_identifier(
        (locale.language, locale.territory, locale.script, locale.variant),
        sep="-",
    )


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. LC_ALL environment variable (overrides all)
    2. LC_MESSAGES environment variable (for message catalogs)
    3. LANG environment variable (default locale)
    4. Python locale.getlocale() (OS-level locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.
        Returns "en_US" if not determinable and raise_on_failure is False.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    Example:
        >>> import os
        >>> os.environ['LC_ALL'] = 'de_DE.UTF-8'
        >>> get_system_locale()
        'de_DE'
    """
    import locale as locale_module  # noqa: PLC0415

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var, "")
        code = normalize_locale(value)
        if code not in _NEUTRAL_LOCALES:
            logger.debug("System locale %s taken from %s", code, var)
            return code

    try:
        system_locale, _ = locale_module.getlocale()
    except ValueError:
        system_locale = None

    if system_locale:
        code = normalize_locale(system_locale)
        if code not in _NEUTRAL_LOCALES:
            return code

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return "en_US"
