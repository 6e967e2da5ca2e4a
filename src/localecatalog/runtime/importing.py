"""Import boundary between the registry and source parsers.

Importer is the structural protocol for anything that can parse a raw
source and write entries into a ValueStore. The registry owns locale
selection, store creation and error wrapping; an importer only parses.

Components:
    Importer - Protocol for populating a store from a source
    ImportResult - Immutable record of one completed import

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from localecatalog.enums import LoadStatus

if TYPE_CHECKING:
    from localecatalog.core import LocaleTag
    from localecatalog.runtime.store import ValueStore

__all__ = ["ImportResult", "Importer"]


@runtime_checkable
class Importer(Protocol):
    """Protocol for populating a value store from a raw source.

    Implementations parse ``source`` (text, bytes or a file object; the
    accepted forms are up to the importer) and write entries with
    ``store.put()``/``store.put_all()``. Parse problems are signalled by
    raising ValueError (or a subclass such as UnicodeDecodeError); the
    registry wraps them into ImportFailureError with the source identity.

    Example:
        >>> class LinesImporter:
        ...     def import_into(self, store, source):
        ...         entries = []
        ...         for line in source.splitlines():
        ...             key, _, text = line.partition("=")
        ...             entries.append(TextEntry(key.strip(), store.locale, text.strip()))
        ...         return store.put_all(entries)
    """

    def import_into(self, store: ValueStore, source: Any) -> int:
        """Parse source and write its entries into store.

        Args:
            store: Target value store
            source: Raw source

        Returns:
            Number of entries written

        Raises:
            ValueError: If the source cannot be parsed
        """
        ...


@dataclass(frozen=True, slots=True)
class ImportResult:
    """Immutable record of one completed import.

    Attributes:
        locale: Tag of the store the entries went into
        source: Source identity (file path or caller-supplied description)
        entries: Number of entries written
    """

    locale: LocaleTag
    source: str
    entries: int

    @property
    def status(self) -> LoadStatus:
        """SUCCESS if entries were written, EMPTY otherwise."""
        return LoadStatus.SUCCESS if self.entries else LoadStatus.EMPTY
