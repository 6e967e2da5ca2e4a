"""Unified validation result for catalog validation.

Consolidates every defect found by a single validation pass:
- Completeness: an entry ID missing from a locale
- Directive consistency: incompatible substitution directives across locales

Python 3.13+.
"""

from dataclasses import dataclass

from localecatalog.enums import DefectKind

from .codes import Diagnostic
from .templates import ErrorTemplate

__all__ = [
    "ValidationDefect",
    "ValidationResult",
]


@dataclass(frozen=True, slots=True)
class ValidationDefect:
    """One problem found by catalog validation.

    Attributes:
        kind: Missing translation or directive mismatch
        entry_id: The entry identifier concerned
        locale: Locale tag of the offending store
        reference_locale: Locale whose text was compared against
            (directive mismatches only)
        expected: Directive signature of the reference text
        actual: Directive signature of the offending text
    """

    kind: DefectKind
    entry_id: str
    locale: str
    reference_locale: str | None = None
    expected: tuple[str, ...] = ()
    actual: tuple[str, ...] = ()

    def to_diagnostic(self) -> Diagnostic:
        """Build the structured diagnostic describing this defect."""
        match self.kind:
            case DefectKind.MISSING_TRANSLATION:
                return ErrorTemplate.missing_translation(self.entry_id, self.locale)
            case DefectKind.DIRECTIVE_MISMATCH:
                return ErrorTemplate.directive_mismatch(
                    self.entry_id,
                    self.reference_locale or "",
                    self.expected,
                    self.locale,
                    self.actual,
                )

    @property
    def message(self) -> str:
        """Human-readable one-line description."""
        return self.to_diagnostic().message

    def format(self) -> str:
        """Format defect as ``[kind] message``."""
        return f"[{self.kind}] {self.message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating a consistent snapshot of value stores.

    Immutable result object for thread-safe validation feedback. An empty
    defect tuple means the catalog is consistent.

    Attributes:
        defects: Every defect found, in deterministic order
        locales: Locale tags of the validated stores, in snapshot order

    Example:
        >>> result = ValidationResult.valid(("en", "fr"))
        >>> result.is_valid
        True
        >>> result.defect_count
        0
    """

    defects: tuple[ValidationDefect, ...]
    locales: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True if no defects were found."""
        return not self.defects

    @property
    def defect_count(self) -> int:
        """Total number of defects."""
        return len(self.defects)

    @property
    def store_count(self) -> int:
        """Number of stores that were validated."""
        return len(self.locales)

    @property
    def missing(self) -> tuple[ValidationDefect, ...]:
        """Completeness defects only."""
        return tuple(d for d in self.defects if d.kind is DefectKind.MISSING_TRANSLATION)

    @property
    def mismatches(self) -> tuple[ValidationDefect, ...]:
        """Directive consistency defects only."""
        return tuple(d for d in self.defects if d.kind is DefectKind.DIRECTIVE_MISMATCH)

    def for_locale(self, locale: str) -> tuple[ValidationDefect, ...]:
        """Defects whose offending store has the given locale tag."""
        return tuple(d for d in self.defects if d.locale == locale)

    @staticmethod
    def valid(locales: tuple[str, ...] = ()) -> "ValidationResult":
        """Create a result with no defects."""
        return ValidationResult(defects=(), locales=locales)

    def format(self) -> str:
        """Format validation result as human-readable string.

        Returns:
            One line per defect, or a pass message
        """
        if self.is_valid:
            return "Validation passed: no defects"

        lines = [f"Defects ({self.defect_count}):"]
        lines.extend(f"  {defect.format()}" for defect in self.defects)
        return "\n".join(lines)
