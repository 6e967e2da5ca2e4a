"""Process-wide default registry and module-level convenience functions.

Applications that want a single global catalog use these functions;
everything else (and every test) should construct its own Registry and
pass it explicitly. The default registry is created on first use.

Example:
    >>> from localecatalog.localization import api, JsonImporter
    >>> api.import_file(JsonImporter(), "locales/en.json")  # default language first
    >>> api.import_file(JsonImporter(), "locales/de.json")
    >>> api.translation_priority("en", "de", "und")
    >>> api.check()  # raises CatalogValidationError listing every defect
    >>> text, errors = api.from_locales("de-AT", "en").format("greeting", "Anna")

Python 3.13+.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any

from localecatalog.runtime.registry import Registry

if TYPE_CHECKING:
    import os

    from localecatalog.core import LocaleTag
    from localecatalog.diagnostics import ValidationResult
    from localecatalog.runtime.catalog_config import CatalogConfig
    from localecatalog.runtime.entry import Value
    from localecatalog.runtime.importing import Importer, ImportResult
    from localecatalog.runtime.store import ValueStore

__all__ = [
    "check",
    "from_locales",
    "get_default_registry",
    "import_file",
    "import_source",
    "import_value",
    "reset_default_registry",
    "translation_priority",
    "validate",
]

_default_registry: Registry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> Registry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry  # noqa: PLW0603 - process-wide singleton
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = Registry()
            registry = _default_registry
    return registry


def reset_default_registry(config: CatalogConfig | None = None) -> Registry:
    """Replace the process-wide registry with a new, empty one.

    Args:
        config: Configuration for the new registry

    Returns:
        The new default registry
    """
    global _default_registry  # noqa: PLW0603 - process-wide singleton
    with _default_lock:
        _default_registry = Registry(config)
        return _default_registry


def import_source(
    importer: Importer,
    locale: str,
    source: Any,
    *,
    source_name: str | None = None,
) -> ImportResult:
    """Import a raw source into the default registry. Import the default language first."""
    return get_default_registry().import_source(importer, locale, source, source_name=source_name)


def import_file(
    importer: Importer,
    path: str | os.PathLike[str],
    locale: str | None = None,
) -> ImportResult:
    """Import a file into the default registry, guessing the locale from its name."""
    return get_default_registry().import_file(importer, path, locale)


def import_value(value: Value) -> None:
    """Add or replace a single entry in the default registry."""
    get_default_registry().import_value(value)


def from_locales(*locales: str | LocaleTag) -> ValueStore:
    """Return the best matching store of the default registry."""
    return get_default_registry().match(*locales)


def validate() -> ValidationResult:
    """Validate the default registry.

    An empty result guarantees that every ID is translated in every
    locale and that directives agree across translations.
    """
    return get_default_registry().validate()


def check() -> None:
    """Validate the default registry, raising CatalogValidationError on defects."""
    get_default_registry().check()


def translation_priority(*locales: str | LocaleTag) -> None:
    """Set the default registry's resolution order and drop unlisted translations.

    "und" is the undetermined default locale and is never dropped.
    """
    get_default_registry().set_translation_priority(locales)
