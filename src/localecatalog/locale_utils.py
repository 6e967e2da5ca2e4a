"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization used throughout the codebase.
Also hosts the filename heuristic used by file imports to pick a locale
when the caller does not name one.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
import re
from pathlib import PurePath
from typing import TYPE_CHECKING

from localecatalog.constants import UNDETERMINED

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "guess_locale_from_filename",
    "is_known_locale",
    "normalize_locale",
]

_NAME_TOKEN_SPLIT = re.compile(r"[-_.]")


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Surrounding whitespace is stripped.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale(" pt-BR ")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    normalized = normalize_locale(locale_code)
    return Locale.parse(normalized)


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel has CLDR data for a locale code.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        True if Babel can construct a Locale for the code
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    if not locale_code:
        return False
    try:
        get_babel_locale(locale_code)
    except (UnknownLocaleError, ValueError, TypeError):
        return False
    return True


def _name_candidates(name: str) -> list[str]:
    """Candidate locale codes hidden in one path component.

    "strings_de_DE" yields "strings_de_DE", "de_DE", "DE"; the longest
    trailing run of tokens is tried first.
    """
    tokens = [token for token in _NAME_TOKEN_SPLIT.split(name) if token]
    return ["_".join(tokens[start:]) for start in range(len(tokens))]


def guess_locale_from_filename(path: str | os.PathLike[str]) -> str:
    """Guess the locale of a translation file from its path.

    Tries the file name without extensions first ("de_DE.json",
    "messages.fr.json", "strings-pt-BR.xml"), then the parent directory
    ("locales/lv/main.json", "values-fr/strings.xml"). A candidate is
    accepted only if Babel knows the locale.

    Args:
        path: File path

    Returns:
        POSIX locale code, or "und" if no component names a known locale

    Example:
        >>> guess_locale_from_filename("i18n/strings-de-DE.json")
        'de_DE'
        >>> guess_locale_from_filename("locales/lv/main.json")
        'lv'
        >>> guess_locale_from_filename("README.md")
        'und'
    """
    pure = PurePath(path)
    # "messages.fr.json" keeps "messages.fr", so the infix locale is a trailing token
    names = [pure.name.rsplit(".", 1)[0], pure.parent.name]

    for name in names:
        for candidate in _name_candidates(name):
            # Single-token candidates shorter than two letters are never locales
            if len(candidate) < 2:
                continue
            if is_known_locale(candidate):
                return str(get_babel_locale(candidate))

    return UNDETERMINED
