"""Hypothesis strategies for localecatalog property-based testing.

Usage:
    from tests.strategies import locale_codes, entry_ids, catalogs

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - locale_codes, locale_spellings, entry_ids, directive_texts, catalogs
"""

from .catalog import (
    LOCALE_POOL,
    catalogs,
    directive_texts,
    entry_ids,
    locale_chains,
    locale_codes,
    locale_spellings,
)

__all__ = [
    "LOCALE_POOL",
    "catalogs",
    "directive_texts",
    "entry_ids",
    "locale_chains",
    "locale_codes",
    "locale_spellings",
]
