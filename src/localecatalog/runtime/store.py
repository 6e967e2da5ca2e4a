"""Per-locale value store.

A ValueStore owns the entry ID -> entry mapping for exactly one locale tag.
Stores are created by Registry.configure() and live as long as the
registry keeps them (until pruned by set_translation_priority or clear).

Thread Safety:
    Every operation is guarded by the store's own RWLock. Lookups and
    formatting take the read lock; put and rebind take the write lock.
    Formatting substitutes arguments after the lock is released.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from localecatalog.core.directives import substitute
from localecatalog.diagnostics import (
    CatalogError,
    ErrorTemplate,
    FormattingError,
    TextNotFoundError,
)
from localecatalog.runtime.catalog_config import CatalogConfig
from localecatalog.runtime.rwlock import RWLock

if TYPE_CHECKING:
    from localecatalog.core import LocaleTag
    from localecatalog.runtime.entry import Value

__all__ = ["ValueStore"]

logger = logging.getLogger(__name__)


class ValueStore:
    """Thread-safe mapping of entry IDs to translated entries for one locale.

    Last writer wins for an ID: put() replaces, it never merges.

    Example:
        >>> from localecatalog.core import LocaleTag
        >>> from localecatalog.runtime import TextEntry
        >>> store = ValueStore(LocaleTag.parse("en"))
        >>> store.put(TextEntry("count", "en", "You have %d items"))
        >>> store.format("count", 3)
        ('You have 3 items', ())
        >>> store.get("missing") is None
        True
    """

    __slots__ = ("_config", "_lock", "_tag", "_values")

    def __init__(self, tag: LocaleTag, config: CatalogConfig | None = None) -> None:
        """Initialize an empty store.

        Args:
            tag: Normalized locale tag this store holds entries for
            config: Shared catalog configuration (default: CatalogConfig())
        """
        self._tag = tag
        self._config = config if config is not None else CatalogConfig()
        self._lock = RWLock(default_timeout=self._config.lock_timeout)
        self._values: dict[str, Value] = {}

    @property
    def tag(self) -> LocaleTag:
        """Locale tag of this store (read-only)."""
        return self._tag

    @property
    def locale(self) -> str:
        """BCP-47 spelling of the store's tag."""
        return str(self._tag)

    def get(self, entry_id: str) -> Value | None:
        """Look up an entry.

        Absence is a normal outcome in fallback flows, so it is reported
        as None rather than raised.

        Args:
            entry_id: Entry identifier

        Returns:
            The entry, or None if this store has no entry with that ID
        """
        with self._lock.read():
            return self._values.get(entry_id)

    def require(self, entry_id: str) -> Value:
        """Look up an entry that must exist.

        Args:
            entry_id: Entry identifier

        Returns:
            The entry

        Raises:
            TextNotFoundError: If the store has no entry with that ID
        """
        entry = self.get(entry_id)
        if entry is None:
            raise self._not_found(entry_id)
        return entry

    def put(self, entry: Value) -> None:
        """Insert or replace an entry.

        The entry is rebound to this store's tag inside the same write
        section, so readers never observe it with a stale tag. Directive
        consistency is not checked here; see validate_stores().

        Args:
            entry: Entry to store
        """
        with self._lock.write():
            entry.update_tag(self._tag)
            replaced = entry.id in self._values
            self._values[entry.id] = entry
        logger.debug(
            "%s text '%s' in locale %s", "Replaced" if replaced else "Added", entry.id, self._tag
        )

    def put_all(self, entries: Iterable[Value]) -> int:
        """Insert or replace several entries under one write section.

        Args:
            entries: Entries to store; later duplicates win

        Returns:
            Number of entries written
        """
        items = list(entries)
        with self._lock.write():
            for entry in items:
                entry.update_tag(self._tag)
                self._values[entry.id] = entry
        logger.debug("Stored %d texts in locale %s", len(items), self._tag)
        return len(items)

    def rebind(self, entry_id: str, tag: LocaleTag | None = None) -> bool:
        """Correct the locale tag of a stored entry.

        Args:
            entry_id: Entry identifier
            tag: Tag to bind (default: this store's tag)

        Returns:
            True if the entry exists and was rebound, False otherwise
        """
        with self._lock.write():
            entry = self._values.get(entry_id)
            if entry is None:
                return False
            entry.update_tag(tag if tag is not None else self._tag)
        logger.debug("Rebound text '%s' in locale %s", entry_id, self._tag)
        return True

    def ids(self) -> frozenset[str]:
        """Point-in-time set of entry IDs."""
        with self._lock.read():
            return frozenset(self._values)

    def entries(self) -> dict[str, Value]:
        """Point-in-time copy of the ID -> entry mapping."""
        with self._lock.read():
            return dict(self._values)

    def texts(self) -> dict[str, str]:
        """Point-in-time copy of the ID -> text mapping."""
        with self._lock.read():
            return {entry_id: entry.text for entry_id, entry in self._values.items()}

    def format(
        self,
        entry_id: str,
        /,
        *args: Any,
        **kwargs: Any,
    ) -> tuple[str, tuple[CatalogError, ...]]:
        """Format a translated text with arguments.

        Never raises in the default (non-strict) configuration: a missing
        ID yields the ID itself, a substitution failure yields the raw
        text, and the error is returned alongside.

        Args:
            entry_id: Entry identifier
            *args: Positional substitution arguments
            **kwargs: Named substitution arguments

        Returns:
            Tuple of (formatted_text, errors)

        Raises:
            TextNotFoundError: Strict mode only, if the ID is missing
            FormattingError: Strict mode only, if substitution fails
        """
        entry = self.get(entry_id)
        if entry is None:
            error = self._not_found(entry_id)
            if self._config.strict:
                raise error
            logger.warning("Text '%s' not found in locale %s", entry_id, self._tag)
            return entry_id, (error,)

        try:
            return substitute(entry.text, args, kwargs), ()
        except (TypeError, ValueError, KeyError, IndexError) as e:
            diagnostic = ErrorTemplate.formatting_failed(entry_id, self.locale, str(e))
            failure = FormattingError(diagnostic, fallback_value=entry.text)
            if self._config.strict:
                raise failure from e
            logger.warning("Failed to format text '%s' in locale %s: %s", entry_id, self._tag, e)
            return entry.text, (failure,)

    def _not_found(self, entry_id: str) -> TextNotFoundError:
        return TextNotFoundError(
            ErrorTemplate.text_not_found(entry_id, self.locale),
            entry_id=entry_id,
            locale=self.locale,
        )

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._values)

    def __contains__(self, entry_id: object) -> bool:
        with self._lock.read():
            return entry_id in self._values

    def __repr__(self) -> str:
        return f"ValueStore(tag={self._tag!s}, entries={len(self)})"
