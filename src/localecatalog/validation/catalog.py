"""Cross-locale catalog validation.

Checks a consistent set of value stores before shipping, collecting every
defect in one pass instead of failing on the first:

    - completeness: every entry ID defined anywhere is defined in every store
    - directive consistency: all translations of an ID carry compatible
      substitution directives (same count, same type per position)

Architecture:
    - validate_stores(): Main entry point, returns a ValidationResult
    - check_stores(): Same, but raises CatalogValidationError on defects
    - _missing_translations(): Pass 1 for one ID
    - _directive_mismatches(): Pass 2 for one ID

The "und" store is the canonical source when it defines an ID: other
translations are compared against its text. Otherwise the first store in
snapshot order that defines the ID is the reference. An "und" store with
no entries at all is an implicit fallback placeholder and is exempt from
completeness.

Validation never mutates a store; each store's texts are copied under its
read lock before any comparison runs.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localecatalog.core import UND
from localecatalog.core.directives import directive_signature
from localecatalog.diagnostics import (
    CatalogValidationError,
    ErrorTemplate,
    ValidationDefect,
    ValidationResult,
)
from localecatalog.enums import DefectKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localecatalog.core import LocaleTag
    from localecatalog.runtime.store import ValueStore

__all__ = ["check_stores", "validate_stores"]

logger = logging.getLogger(__name__)

type _StoreTexts = tuple[LocaleTag, dict[str, str]]


def _missing_translations(
    entry_id: str,
    texts: list[_StoreTexts],
) -> list[ValidationDefect]:
    """Report each store that lacks entry_id."""
    return [
        ValidationDefect(
            kind=DefectKind.MISSING_TRANSLATION,
            entry_id=entry_id,
            locale=str(tag),
        )
        for tag, store_texts in texts
        if entry_id not in store_texts
    ]


def _directive_mismatches(
    entry_id: str,
    texts: list[_StoreTexts],
) -> list[ValidationDefect]:
    """Compare every translation of entry_id against the reference translation."""
    present = [(tag, store_texts[entry_id]) for tag, store_texts in texts if entry_id in store_texts]
    reference_tag, reference_text = next(
        ((tag, text) for tag, text in present if tag == UND),
        present[0],
    )
    expected = directive_signature(reference_text)

    defects: list[ValidationDefect] = []
    for tag, text in present:
        if tag == reference_tag:
            continue
        actual = directive_signature(text)
        if actual != expected:
            defects.append(
                ValidationDefect(
                    kind=DefectKind.DIRECTIVE_MISMATCH,
                    entry_id=entry_id,
                    locale=str(tag),
                    reference_locale=str(reference_tag),
                    expected=expected,
                    actual=actual,
                )
            )
    return defects


def validate_stores(stores: Iterable[ValueStore]) -> ValidationResult:
    """Validate a consistent snapshot of value stores.

    Args:
        stores: Stores to compare, typically Registry.stores()

    Returns:
        ValidationResult with every defect, ordered by entry ID and then
        by store order

    Example:
        >>> result = validate_stores(registry.stores())
        >>> if not result.is_valid:
        ...     print(result.format())
    """
    texts: list[_StoreTexts] = [(store.tag, store.texts()) for store in stores]
    locales = tuple(str(tag) for tag, _ in texts)

    # An empty "und" store is the implicit fallback, not a translation
    required = [(tag, store_texts) for tag, store_texts in texts if store_texts or tag != UND]

    entry_ids = sorted(set().union(*(store_texts.keys() for _, store_texts in texts)))

    defects: list[ValidationDefect] = []
    for entry_id in entry_ids:
        defects.extend(_missing_translations(entry_id, required))
        defects.extend(_directive_mismatches(entry_id, texts))

    logger.debug(
        "Validated %d store(s), %d entry ID(s): %d defect(s)",
        len(texts),
        len(entry_ids),
        len(defects),
    )
    return ValidationResult(defects=tuple(defects), locales=locales)


def check_stores(stores: Iterable[ValueStore]) -> None:
    """Validate stores and raise if any defect was found.

    Args:
        stores: Stores to compare

    Raises:
        CatalogValidationError: Carrying the full ValidationResult
    """
    result = validate_stores(stores)
    if not result.is_valid:
        logger.warning("Catalog validation failed with %d defect(s)", result.defect_count)
        raise CatalogValidationError(
            ErrorTemplate.validation_failed(result.defect_count), result=result
        )
