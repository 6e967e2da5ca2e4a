"""Type aliases for the localization domain.

Semantic type aliases used throughout the localization package and by
user code when annotating catalog call sites.

Python 3.13+. Zero external dependencies.
"""

from typing import IO

__all__ = [
    "EntryId",
    "ImportSource",
    "LocaleCode",
    "TextMapping",
]

type EntryId = str
"""Identifier for a translated entry (e.g., 'greeting', 'cart.total')."""

type LocaleCode = str
"""BCP-47 or POSIX locale code (e.g., 'en', 'lv', 'zh-Hans-CN', 'pt_BR')."""

type TextMapping = dict[str, "str | TextMapping"]
"""Possibly nested ID -> text mapping; nested keys are joined with '.'."""

type ImportSource = str | bytes | bytearray | IO[str] | IO[bytes]
"""Raw source accepted by JsonImporter."""
