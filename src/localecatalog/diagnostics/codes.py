"""Diagnostic codes and data structures.

Defines error codes and structured diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Lookup errors (missing entries)
        2000-2999: Formatting errors (directive substitution failures)
        3000-3999: Locale errors (malformed locale tags)
        4000-4999: Import errors (collaborator and I/O failures)
        5000-5999: Validation defects (cross-locale consistency)
    """

    # Lookup errors (1000-1999)
    TEXT_NOT_FOUND = 1001

    # Formatting errors (2000-2999)
    FORMATTING_FAILED = 2001

    # Locale errors (3000-3999)
    LOCALE_INVALID = 3001

    # Import errors (4000-4999)
    IMPORT_FAILED = 4001
    IMPORT_IO_FAILED = 4002

    # Validation defects (5000-5999)
    VALIDATION_MISSING_TRANSLATION = 5001
    VALIDATION_DIRECTIVE_MISMATCH = 5002
    VALIDATION_FAILED = 5099


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale: Locale tag the problem belongs to (if any)
        entry_id: Entry identifier the problem belongs to (if any)
        source: Import source identity, e.g. a file path (if any)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale: str | None = None
    entry_id: str | None = None
    source: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TEXT_NOT_FOUND]: Text 'greeting' not found in locale 'fr'
              = locale: fr
              = id: greeting
              = help: Import the entry for this locale or fall back to another store

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
