"""Catalog exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .validation import ValidationDefect, ValidationResult

__all__ = [
    "CatalogError",
    "CatalogValidationError",
    "FormattingError",
    "ImportFailureError",
    "InvalidLocaleError",
    "TextNotFoundError",
]


class CatalogError(Exception):
    """Base exception for all catalog errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CatalogError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class TextNotFoundError(CatalogError, LookupError):
    """Requested entry ID is absent from a value store.

    Recoverable and expected in normal fallback flows. Callers decide
    whether to try another store or fall back to the literal ID.

    Attributes:
        entry_id: The ID that was looked up
        locale: Locale tag of the searched store
    """

    def __init__(self, message: str | Diagnostic, *, entry_id: str = "", locale: str = "") -> None:
        super().__init__(message)
        self.entry_id = entry_id
        self.locale = locale


class FormattingError(CatalogError):
    """Raised when substituting arguments into a translated text fails.

    The error carries a fallback_value (the unformatted text) so that
    output stays usable while the error is reported.

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        super().__init__(message)
        self.fallback_value = fallback_value


class ImportFailureError(CatalogError):
    """An importer could not read or parse its source.

    Always raised with the original exception chained as __cause__.

    Attributes:
        source: Identity of the failing source (file path or description)
    """

    def __init__(self, message: str | Diagnostic, *, source: str) -> None:
        super().__init__(message)
        self.source = source


class InvalidLocaleError(CatalogError, ValueError):
    """Locale string cannot be parsed into a LocaleTag.

    Attributes:
        locale: The offending raw locale string
    """

    def __init__(self, message: str | Diagnostic, *, locale: str) -> None:
        super().__init__(message)
        self.locale = locale


class CatalogValidationError(CatalogError):
    """Aggregate of every validation defect found in one pass.

    A reporting mechanism for build-time and CI gating; never raised by
    lookups or imports.

    Attributes:
        result: The full ValidationResult
    """

    def __init__(self, message: str | Diagnostic, *, result: ValidationResult) -> None:
        super().__init__(message)
        self.result = result

    @property
    def defects(self) -> tuple[ValidationDefect, ...]:
        """Shortcut to the defects of the attached result."""
        return self.result.defects
