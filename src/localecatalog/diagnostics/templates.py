"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistently worded across modules.
    """

    @staticmethod
    def text_not_found(entry_id: str, locale: str) -> Diagnostic:
        """Entry ID absent from a value store.

        Args:
            entry_id: The entry identifier that was not found
            locale: Locale tag of the store that was searched

        Returns:
            Diagnostic for TEXT_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.TEXT_NOT_FOUND,
            message=f"Text '{entry_id}' not found in locale '{locale}'",
            hint="Import the entry for this locale or fall back to another store",
            locale=locale,
            entry_id=entry_id,
        )

    @staticmethod
    def formatting_failed(entry_id: str, locale: str, reason: str) -> Diagnostic:
        """Substitution arguments did not fit the entry's directives.

        Args:
            entry_id: The entry being formatted
            locale: Locale tag of the store
            reason: Underlying exception text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"Failed to format text '{entry_id}': {reason}",
            hint="Check that the arguments match the directives in the translated text",
            locale=locale,
            entry_id=entry_id,
        )

    @staticmethod
    def locale_invalid(locale: str, reason: str) -> Diagnostic:
        """Locale string could not be parsed into a tag.

        Args:
            locale: The raw locale string
            reason: Parser error text

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=f"Invalid locale '{locale}': {reason}",
            hint="Use a BCP-47 tag such as 'en-US' or a POSIX code such as 'en_US'",
        )

    @staticmethod
    def import_failed(source: str, locale: str, reason: str) -> Diagnostic:
        """Importer could not parse its source.

        Args:
            source: Source identity (file path or description)
            locale: Target locale tag
            reason: Underlying exception text

        Returns:
            Diagnostic for IMPORT_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.IMPORT_FAILED,
            message=f"Failed to parse {source}: {reason}",
            locale=locale,
            source=source,
        )

    @staticmethod
    def import_io_failed(source: str, reason: str) -> Diagnostic:
        """Import source could not be opened or read.

        Args:
            source: Path of the file
            reason: Underlying OSError text

        Returns:
            Diagnostic for IMPORT_IO_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.IMPORT_IO_FAILED,
            message=f"Cannot open file {source}: {reason}",
            source=source,
        )

    @staticmethod
    def missing_translation(entry_id: str, locale: str) -> Diagnostic:
        """A store lacks an ID that other stores define.

        Args:
            entry_id: The missing entry identifier
            locale: Locale tag of the incomplete store

        Returns:
            Diagnostic for VALIDATION_MISSING_TRANSLATION
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_MISSING_TRANSLATION,
            message=f"Locale '{locale}' has no translation for '{entry_id}'",
            hint="Add the entry to this locale",
            locale=locale,
            entry_id=entry_id,
        )

    @staticmethod
    def directive_mismatch(
        entry_id: str,
        reference_locale: str,
        reference_signature: tuple[str, ...],
        locale: str,
        signature: tuple[str, ...],
    ) -> Diagnostic:
        """Translations of one ID use incompatible directives.

        Args:
            entry_id: The entry identifier
            reference_locale: Locale whose text is treated as canonical
            reference_signature: Directive signature of the reference text
            locale: Locale with the diverging text
            signature: Directive signature of the diverging text

        Returns:
            Diagnostic for VALIDATION_DIRECTIVE_MISMATCH
        """
        expected = " ".join(reference_signature) or "(none)"
        actual = " ".join(signature) or "(none)"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_DIRECTIVE_MISMATCH,
            message=(
                f"Directives of '{entry_id}' differ between "
                f"'{reference_locale}' [{expected}] and '{locale}' [{actual}]"
            ),
            hint="Translations must keep the same placeholders in the same order",
            locale=locale,
            entry_id=entry_id,
        )

    @staticmethod
    def validation_failed(defect_count: int) -> Diagnostic:
        """Summary diagnostic for an invalid catalog.

        Args:
            defect_count: Number of defects found

        Returns:
            Diagnostic for VALIDATION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_FAILED,
            message=f"Catalog validation found {defect_count} defect(s)",
            hint="Inspect the attached ValidationResult for the full list",
        )
