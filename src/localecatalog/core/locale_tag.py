"""Locale tag value type.

A LocaleTag is the normalized, comparable form of a locale identifier.
Parsing accepts BCP-47 ("en-US", "zh-Hans-CN") and POSIX ("en_US",
"de_DE.UTF-8", "sr_RS@latin") spellings and delegates subtag recognition
to Babel, so the casing rules match the rest of the Babel ecosystem:
language lowercase, script title case, territory uppercase.

Matching happens at two granularities:
    - exact: all present subtags equal (dataclass equality)
    - language: primary subtags equal, script/territory/variant ignored

Python 3.13+.
"""

from __future__ import annotations

import functools
from dataclasses import dataclass

from babel.core import parse_locale

from localecatalog.constants import UNDETERMINED
from localecatalog.diagnostics import ErrorTemplate, InvalidLocaleError
from localecatalog.locale_utils import normalize_locale

__all__ = ["UND", "LocaleTag"]

# BCP-47 language subtags are 2-3 letters, or 5-8 for registered languages
_MIN_LANGUAGE_LENGTH = 2
_MAX_LANGUAGE_LENGTH = 8


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class LocaleTag:
    """Immutable, hashable locale identifier.

    Attributes:
        language: Primary language subtag, lowercase ("en", "und")
        script: Script subtag, title case ("Hans"), or None
        territory: Region subtag, uppercase ("US") or UN M.49 digits ("419"), or None
        variant: Variant subtag, uppercase ("POSIX"), or None

    Example:
        >>> tag = LocaleTag.parse("en-us")
        >>> str(tag)
        'en-US'
        >>> tag == LocaleTag.parse("en_US")
        True
        >>> tag.matches_language(LocaleTag.parse("en-GB"))
        True
    """

    language: str
    script: str | None = None
    territory: str | None = None
    variant: str | None = None

    @classmethod
    def parse(cls, locale: str | LocaleTag) -> LocaleTag:
        """Parse and normalize a locale identifier.

        Empty or whitespace-only input yields the undetermined tag ("und").
        Passing a LocaleTag returns it unchanged.

        Args:
            locale: Locale identifier in BCP-47 or POSIX form

        Returns:
            Normalized LocaleTag

        Raises:
            InvalidLocaleError: If the identifier is not a valid locale
        """
        if isinstance(locale, LocaleTag):
            return locale
        return _parse_cached(locale)

    @property
    def is_undetermined(self) -> bool:
        """True for the "und" default locale."""
        return self == UND

    def matches_language(self, other: LocaleTag) -> bool:
        """Compare at language granularity, ignoring script, territory and variant."""
        return self.language == other.language

    def language_tag(self) -> LocaleTag:
        """Return the language-only tag ("en-US" -> "en")."""
        return LocaleTag(self.language)

    @property
    def posix(self) -> str:
        """POSIX/Babel spelling ("zh_Hans_CN")."""
        return "_".join(self._subtags())

    def _subtags(self) -> tuple[str, ...]:
        return tuple(
            part
            for part in (self.language, self.script, self.territory, self.variant)
            if part is not None
        )

    def _sort_key(self) -> tuple[str, str, str, str]:
        return (
            self.language,
            self.script or "",
            self.territory or "",
            self.variant or "",
        )

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LocaleTag):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        """BCP-47 spelling ("zh-Hans-CN")."""
        return "-".join(self._subtags())


UND = LocaleTag(UNDETERMINED)


@functools.lru_cache(maxsize=512)
def _parse_cached(locale: str) -> LocaleTag:
    """Parse a raw locale string (cached; failures are not cached)."""
    normalized = normalize_locale(locale)
    if not normalized:
        return UND

    # Drop "@modifier"; parse_locale already drops ".encoding"
    identifier = normalized.partition("@")[0]
    try:
        language, territory, script, variant = parse_locale(identifier)
    except ValueError as e:
        raise InvalidLocaleError(
            ErrorTemplate.locale_invalid(locale, str(e)), locale=locale
        ) from e

    if not _MIN_LANGUAGE_LENGTH <= len(language) <= _MAX_LANGUAGE_LENGTH:
        reason = f"language subtag {language!r} must have 2 to 8 letters"
        raise InvalidLocaleError(ErrorTemplate.locale_invalid(locale, reason), locale=locale)

    return LocaleTag(language, script, territory, variant)
