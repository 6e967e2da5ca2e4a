"""localecatalog - Thread-safe catalog of translated strings with locale negotiation.

Keeps translated texts keyed by entry ID and normalized locale tag,
selects the best locale for a client's preference list, and validates
that all locales are complete and use consistent substitution
directives before shipping.

Public API:
    Registry - Per-locale value stores, priority list, matching, imports
    ValueStore - Entries of one locale (get, put, format)
    LocaleTag - Normalized, comparable locale identifier
    TextEntry - Concrete translated entry
    CatalogConfig - Lock timeout and strict formatting
    validate_stores - Completeness and directive consistency check

Exceptions:
    CatalogError - Base exception class
    TextNotFoundError - Entry ID absent from a store
    ImportFailureError - Importer or file failure
    CatalogValidationError - Aggregated validation defects
    InvalidLocaleError - Unparseable locale identifier

Submodules:
    localecatalog.localization - Importers and the process-wide default registry
    localecatalog.diagnostics - Error types, diagnostics and validation results
    localecatalog.validation - Directive extraction and catalog validation
"""

from .core import UND, LocaleTag
from .diagnostics import (
    CatalogError,
    CatalogValidationError,
    FormattingError,
    ImportFailureError,
    InvalidLocaleError,
    TextNotFoundError,
    ValidationResult,
)
from .runtime import CatalogConfig, Registry, TextEntry, Value, ValueStore
from .validation import validate_stores

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localecatalog")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "UND",
    "CatalogConfig",
    "CatalogError",
    "CatalogValidationError",
    "FormattingError",
    "ImportFailureError",
    "InvalidLocaleError",
    "LocaleTag",
    "Registry",
    "TextEntry",
    "TextNotFoundError",
    "ValidationResult",
    "Value",
    "ValueStore",
    "__version__",
    "validate_stores",
]
