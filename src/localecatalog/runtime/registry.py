"""Registry of value stores keyed by locale tag.

The Registry owns one ValueStore per distinct normalized locale tag plus
an operator-declared priority list. It is the single piece of shared
mutable state in a catalog; construct one at application start and pass
it to whatever needs it (localecatalog.localization.api keeps a
process-wide default for module-level convenience functions).

Lifecycle:
    - Stores are created lazily by configure() (directly or via imports)
    - Stores are never removed, except by set_translation_priority(),
      which prunes every store not in the new list (the "und" store is
      always kept), or by clear()

Thread Safety:
    The tag -> store mapping and the priority list are guarded by one
    RWLock. configure() uses double-checked locking: a read section for
    the common already-exists case, a write section for creation.
    match(), snapshot() and validate() copy a RegistrySnapshot under the
    read lock and compute after releasing it. The registry lock is always
    released before any store lock is taken, so the two scopes never nest.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from localecatalog.core import UND, LocaleTag
from localecatalog.diagnostics import (
    CatalogError,
    ErrorTemplate,
    ImportFailureError,
    InvalidLocaleError,
)
from localecatalog.locale_utils import guess_locale_from_filename
from localecatalog.runtime.catalog_config import CatalogConfig
from localecatalog.runtime.importing import ImportResult
from localecatalog.runtime.matcher import match_store
from localecatalog.runtime.rwlock import RWLock
from localecatalog.runtime.store import ValueStore
from localecatalog.validation.catalog import check_stores, validate_stores

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from localecatalog.diagnostics import ValidationResult
    from localecatalog.runtime.entry import Value
    from localecatalog.runtime.importing import Importer

__all__ = ["Registry", "RegistrySnapshot"]

logger = logging.getLogger(__name__)

# Parse problems an importer may signal; wrapped into ImportFailureError
_IMPORT_ERRORS = (ValueError, TypeError, LookupError)


@dataclass(frozen=True, slots=True)
class RegistrySnapshot:
    """Point-in-time view of a registry.

    Taken under the registry read lock, so no store appears or disappears
    halfway through. The stores themselves stay live: their entries may
    keep changing after the snapshot is taken.

    Attributes:
        stores: Read-only tag -> store mapping in store creation order
        priority: Priority list at snapshot time
    """

    stores: Mapping[LocaleTag, ValueStore]
    priority: tuple[LocaleTag, ...]

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        """Tags of all stores in creation order."""
        return tuple(self.stores)


class Registry:
    """Thread-safe collection of per-locale value stores.

    Example:
        >>> from localecatalog.runtime import TextEntry
        >>> registry = Registry()
        >>> en = registry.configure("en-US")
        >>> en is registry.configure("en_US")
        True
        >>> registry.import_value(TextEntry("greeting", "en-US", "Hello"))
        >>> registry.match("en-GB", "fr").format("greeting")
        ('Hello', ())

    Attributes:
        config: Shared configuration applied to every store
    """

    __slots__ = ("_config", "_lock", "_priority", "_stores")

    def __init__(self, config: CatalogConfig | None = None) -> None:
        """Initialize an empty registry.

        Args:
            config: Catalog configuration (default: CatalogConfig())
        """
        self._config = config if config is not None else CatalogConfig()
        self._lock = RWLock(default_timeout=self._config.lock_timeout)
        self._stores: dict[LocaleTag, ValueStore] = {}
        self._priority: tuple[LocaleTag, ...] = ()

    @property
    def config(self) -> CatalogConfig:
        """Catalog configuration (read-only)."""
        return self._config

    # ------------------------------------------------------------------
    # Store management
    # ------------------------------------------------------------------

    def configure(self, locale: str | LocaleTag) -> ValueStore:
        """Get the store for a locale, creating it on first use.

        Spellings that normalize to the same tag ("en-US", "en_us") share
        one store, also under concurrent first calls.

        Args:
            locale: Locale identifier or tag

        Returns:
            The store for the normalized tag

        Raises:
            InvalidLocaleError: If locale cannot be parsed
        """
        tag = LocaleTag.parse(locale)

        with self._lock.read():
            store = self._stores.get(tag)
            if store is not None:
                return store

        with self._lock.write():
            # Another thread may have created it between the two sections
            store = self._stores.get(tag)
            if store is not None:
                return store
            store = ValueStore(tag, self._config)
            self._stores[tag] = store

        logger.info("Created value store for locale %s", tag)
        return store

    def set_translation_priority(self, locales: Iterable[str | LocaleTag]) -> None:
        """Replace the priority list and prune stores not listed in it.

        Destructive: every store whose tag is not in ``locales`` (compared
        exactly) is removed, except the "und" store. A later configure()
        for a pruned locale creates a new, empty store.

        Args:
            locales: Locales in fallback priority order; duplicates are ignored

        Raises:
            InvalidLocaleError: If any locale cannot be parsed (nothing is changed)
        """
        # Parse everything before locking so a bad tag leaves the registry untouched
        priority = tuple(dict.fromkeys(LocaleTag.parse(locale) for locale in locales))
        keep = set(priority)

        with self._lock.write():
            pruned = [tag for tag in self._stores if tag not in keep and tag != UND]
            for tag in pruned:
                del self._stores[tag]
            self._priority = priority

        logger.info(
            "Translation priority set to [%s]; pruned %d store(s)%s",
            ", ".join(map(str, priority)),
            len(pruned),
            f": {', '.join(map(str, pruned))}" if pruned else "",
        )

    @property
    def translation_priority(self) -> tuple[LocaleTag, ...]:
        """Current priority list."""
        with self._lock.read():
            return self._priority

    def clear(self) -> None:
        """Drop every store and the priority list."""
        with self._lock.write():
            count = len(self._stores)
            self._stores.clear()
            self._priority = ()
        logger.info("Cleared registry (%d store(s) dropped)", count)

    def snapshot(self) -> RegistrySnapshot:
        """Capture the current stores and priority list atomically."""
        with self._lock.read():
            return RegistrySnapshot(
                stores=MappingProxyType(dict(self._stores)),
                priority=self._priority,
            )

    def stores(self) -> tuple[ValueStore, ...]:
        """All stores in creation order, at a single point in time."""
        return tuple(self.snapshot().stores.values())

    @property
    def locales(self) -> tuple[LocaleTag, ...]:
        """Tags of all stores in creation order."""
        return self.snapshot().locales

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def match(self, *locales: str | LocaleTag) -> ValueStore:
        """Select the best store for the client's acceptable locales.

        Never returns None. When exact, language-only and priority matching
        all fail, the "und" store is returned; if there is none, the store
        created first (the default language imported first); and on an
        empty registry a new "und" store is created.

        Args:
            *locales: Acceptable locales, most preferred first

        Returns:
            The selected store
        """
        snapshot = self.snapshot()
        store = match_store(snapshot, locales)
        if store is not None:
            return store
        if snapshot.stores:
            first = next(iter(snapshot.stores.values()))
            logger.debug("No match for %s; falling back to first store %s", locales, first.tag)
            return first
        return self.configure(UND)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> ValidationResult:
        """Check completeness and directive consistency of all stores.

        Returns:
            ValidationResult listing every defect (empty when consistent)
        """
        return validate_stores(self.stores())

    def check(self) -> None:
        """Validate and raise if any defect was found.

        Raises:
            CatalogValidationError: Carrying the full ValidationResult
        """
        check_stores(self.stores())

    # ------------------------------------------------------------------
    # Imports
    # ------------------------------------------------------------------

    def import_source(
        self,
        importer: Importer,
        locale: str | LocaleTag,
        source: Any,
        *,
        source_name: str | None = None,
    ) -> ImportResult:
        """Import a raw source into the store for a locale.

        Import order matters for fallback: when no "und" store exists,
        match() falls back to the store created first, so import the
        default language first.

        Args:
            importer: Parser for the source format
            locale: Target locale
            source: Raw source handed to the importer
            source_name: Identity used in errors and results
                (default: "<locale source>")

        Returns:
            ImportResult with the number of entries written

        Raises:
            ImportFailureError: If the importer cannot parse the source
            InvalidLocaleError: If locale cannot be parsed
        """
        store = self.configure(locale)
        name = source_name if source_name is not None else f"<{store.tag} source>"

        try:
            count = importer.import_into(store, source)
        except CatalogError:
            raise
        except _IMPORT_ERRORS as e:
            logger.error("Failed to parse %s: %s", name, e)
            raise ImportFailureError(
                ErrorTemplate.import_failed(name, str(store.tag), str(e)), source=name
            ) from e

        logger.info("Imported %d text(s) into locale %s from %s", count, store.tag, name)
        return ImportResult(locale=store.tag, source=name, entries=count)

    def import_file(
        self,
        importer: Importer,
        path: str | os.PathLike[str],
        locale: str | LocaleTag | None = None,
    ) -> ImportResult:
        """Import a file, guessing its locale from the file name if not given.

        The file is opened in binary mode and the open file object is passed
        to the importer.

        Args:
            importer: Parser for the file format
            path: File path
            locale: Target locale (default: guessed from path)

        Returns:
            ImportResult with the number of entries written

        Raises:
            ImportFailureError: If the file cannot be opened, read or parsed
        """
        name = os.fspath(path)
        target = locale if locale is not None else guess_locale_from_filename(name)

        try:
            with Path(name).open("rb") as stream:
                return self.import_source(importer, target, stream, source_name=name)
        except OSError as e:
            logger.error("Cannot open file %s: %s", name, e)
            raise ImportFailureError(
                ErrorTemplate.import_io_failed(name, str(e)), source=name
            ) from e

    def import_value(self, value: Value) -> None:
        """Add or replace a single entry, bypassing any importer.

        The entry's raw locale selects (or creates) the store, and the entry
        is rebound to the store's normalized tag when it is stored.

        Args:
            value: Entry implementing the Value protocol

        Raises:
            InvalidLocaleError: If value.locale cannot be parsed
        """
        self.configure(value.locale).put(value)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._stores)

    def __contains__(self, locale: object) -> bool:
        if not isinstance(locale, (str, LocaleTag)):
            return False
        try:
            tag = LocaleTag.parse(locale)
        except InvalidLocaleError:
            return False
        with self._lock.read():
            return tag in self._stores

    def __repr__(self) -> str:
        snapshot = self.snapshot()
        return (
            f"Registry(locales=[{', '.join(map(str, snapshot.locales))}], "
            f"priority=[{', '.join(map(str, snapshot.priority))}])"
        )
