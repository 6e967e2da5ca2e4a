"""Import and process-wide catalog package.

Provides the bundled importers, type aliases, and the module-level API
backed by a process-wide default Registry.

Submodules:
    types   - PEP 695 type aliases (EntryId, LocaleCode, TextMapping, ImportSource)
    loading - MappingImporter, JsonImporter, flatten_texts
    api     - default registry and import/match/validate functions

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localecatalog.enums import LoadStatus
from localecatalog.locale_utils import guess_locale_from_filename
from localecatalog.runtime.importing import ImportResult, Importer

from . import api
from .api import (
    check,
    from_locales,
    get_default_registry,
    import_file,
    import_source,
    import_value,
    reset_default_registry,
    translation_priority,
    validate,
)
from .loading import JsonImporter, MappingImporter, flatten_texts
from .types import EntryId, ImportSource, LocaleCode, TextMapping

__all__ = [
    # Importer protocol and implementations
    "Importer",
    "JsonImporter",
    "MappingImporter",
    "flatten_texts",
    "guess_locale_from_filename",
    # Import tracking
    "ImportResult",
    "LoadStatus",
    # Process-wide API
    "api",
    "check",
    "from_locales",
    "get_default_registry",
    "import_file",
    "import_source",
    "import_value",
    "reset_default_registry",
    "translation_priority",
    "validate",
    # Type aliases for user code type annotations
    "EntryId",
    "ImportSource",
    "LocaleCode",
    "TextMapping",
]
