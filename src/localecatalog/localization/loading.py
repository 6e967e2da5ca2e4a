"""Bundled importers.

Concrete implementations of the Importer protocol. Source formats are a
collaborator concern; these two cover programmatic catalogs and the
common flat/nested JSON layout:

    MappingImporter - Python mappings ({"greeting": "Hello"})
    JsonImporter - JSON objects from text, bytes or file objects

Both flatten nested objects into dotted IDs ({"menu": {"open": "Open"}}
becomes "menu.open") and reject non-string leaves with ValueError.

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from localecatalog.constants import KEY_SEPARATOR, MAX_IMPORT_SIZE
from localecatalog.runtime.entry import TextEntry

if TYPE_CHECKING:
    from localecatalog.localization.types import ImportSource
    from localecatalog.runtime.store import ValueStore

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    "MappingImporter",
    "JsonImporter",
    "flatten_texts",
]

logger = logging.getLogger(__name__)


def flatten_texts(
    data: Mapping[str, Any],
    separator: str = KEY_SEPARATOR,
    prefix: str = "",
) -> Iterator[tuple[str, str]]:
    """Yield (entry_id, text) pairs from a possibly nested mapping.

    Args:
        data: Mapping of IDs to texts or nested mappings
        separator: Joins nested keys
        prefix: Key prefix of the current nesting level

    Yields:
        (entry_id, text) in mapping order

    Raises:
        ValueError: If a key is empty/not a string or a leaf is not a string
    """
    for key, value in data.items():
        if not isinstance(key, str) or not key:
            msg = f"Entry IDs must be non-empty strings, got {key!r}"
            raise ValueError(msg)
        entry_id = f"{prefix}{separator}{key}" if prefix else key
        match value:
            case str():
                yield entry_id, value
            case Mapping():
                yield from flatten_texts(value, separator, entry_id)
            case _:
                msg = f"Text for '{entry_id}' must be a string, got {type(value).__name__}"
                raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class MappingImporter:
    """Importer for in-memory mappings.

    Example:
        >>> registry = Registry()
        >>> result = registry.import_source(MappingImporter(), "de", {"greeting": "Hallo %s"})
        >>> result.entries
        1

    Attributes:
        separator: Joins nested keys (default: ".")
    """

    separator: str = KEY_SEPARATOR

    def import_into(self, store: ValueStore, source: Mapping[str, Any]) -> int:
        """Write every text of the mapping into store.

        Raises:
            TypeError: If source is not a mapping
            ValueError: If the mapping holds invalid IDs or texts
        """
        if not isinstance(source, Mapping):
            msg = f"MappingImporter expects a mapping, got {type(source).__name__}"
            raise TypeError(msg)
        entries = [
            TextEntry(entry_id, store.locale, text)
            for entry_id, text in flatten_texts(source, self.separator)
        ]
        return store.put_all(entries)


@dataclass(frozen=True, slots=True)
class JsonImporter:
    """Importer for JSON objects of ID -> text.

    Accepts str, bytes/bytearray, or a text/binary file object.

    Example:
        >>> registry.import_file(JsonImporter(), "locales/strings-fr.json")
        # Guesses locale "fr" from the file name

    Attributes:
        encoding: Encoding for bytes input (default: "utf-8-sig", UTF-8 with optional BOM)
        max_size: Maximum source length in characters (default: 10 MiB)
        separator: Joins nested keys (default: ".")
    """

    encoding: str = "utf-8-sig"
    max_size: int = MAX_IMPORT_SIZE
    separator: str = KEY_SEPARATOR

    def __post_init__(self) -> None:
        """Validate configuration.

        Raises:
            ValueError: If max_size is not positive
        """
        if self.max_size <= 0:
            msg = "max_size must be positive"
            raise ValueError(msg)

    def _read(self, source: ImportSource) -> str:
        match source:
            case str():
                text = source
            case bytes() | bytearray():
                text = bytes(source).decode(self.encoding)
            case _ if callable(getattr(source, "read", None)):
                # Read one character past the limit to detect oversize input
                return self._read(source.read(self.max_size + 1))
            case _:
                msg = f"JsonImporter expects text, bytes or a file object, got {type(source).__name__}"
                raise TypeError(msg)

        if len(text) > self.max_size:
            msg = f"source exceeds maximum size of {self.max_size} characters"
            raise ValueError(msg)
        return text

    def import_into(self, store: ValueStore, source: ImportSource) -> int:
        """Parse a JSON object and write its texts into store.

        Raises:
            TypeError: If source is of an unsupported type
            ValueError: If the source is not valid JSON, is not an object,
                is too large, or holds invalid IDs or texts
        """
        data = json.loads(self._read(source))
        if not isinstance(data, dict):
            msg = f"expected a JSON object at top level, got {type(data).__name__}"
            raise ValueError(msg)

        entries = [
            TextEntry(entry_id, store.locale, text)
            for entry_id, text in flatten_texts(data, self.separator)
        ]
        logger.debug("Parsed %d JSON text(s) for locale %s", len(entries), store.tag)
        return store.put_all(entries)
