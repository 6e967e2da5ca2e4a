"""Translated entries stored in a ValueStore.

Value is the structural protocol every stored entry satisfies; anything
implementing it can be registered directly through
Registry.import_value() without going through an Importer. TextEntry is
the concrete implementation produced by the bundled importers.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from localecatalog.core import LocaleTag

__all__ = ["TextEntry", "Value"]


@runtime_checkable
class Value(Protocol):
    """Protocol for a translated entry.

    The raw ``locale`` string is whatever the producer supplied; the
    normalized tag is bound afterwards by the owning store through
    update_tag(), inside the store's write lock.
    """

    @property
    def id(self) -> str:
        """Entry identifier, unique within a store."""
        ...

    @property
    def locale(self) -> str:
        """Raw locale string the entry was created with."""
        ...

    @property
    def text(self) -> str:
        """Translated text, possibly containing substitution directives."""
        ...

    def update_tag(self, tag: LocaleTag) -> None:
        """Rebind the entry to its store's normalized locale tag."""
        ...


@dataclass(slots=True)
class TextEntry:
    """Mutable translated entry.

    Attributes:
        id: Entry identifier (e.g., "greeting", "cart.total")
        locale: Raw locale string (e.g., "en-us")
        text: Translated text (e.g., "You have %d items")
        tag: Normalized locale tag, bound when the entry is stored

    Example:
        >>> entry = TextEntry("greeting", "en-us", "Hello, %s!")
        >>> entry.tag is None
        True
    """

    id: str
    locale: str
    text: str
    tag: LocaleTag | None = None

    def update_tag(self, tag: LocaleTag) -> None:
        """Rebind to a normalized tag. Callers hold the owning store's write lock."""
        self.tag = tag
