"""Diagnostic system for catalog errors.

Provides structured error diagnostics with codes, hints and locale/ID
context, plus the aggregated result type returned by catalog validation.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CatalogError,
    CatalogValidationError,
    FormattingError,
    ImportFailureError,
    InvalidLocaleError,
    TextNotFoundError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationDefect, ValidationResult

__all__ = [
    "CatalogError",
    "CatalogValidationError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "FormattingError",
    "ImportFailureError",
    "InvalidLocaleError",
    "OutputFormat",
    "TextNotFoundError",
    "ValidationDefect",
    "ValidationResult",
]
