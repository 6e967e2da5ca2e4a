"""Enumerations for localecatalog type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class DefectKind(StrEnum):
    """Kind of problem reported by catalog validation.

    StrEnum provides automatic string conversion: str(DefectKind.MISSING_TRANSLATION) == "missing"
    """

    MISSING_TRANSLATION = "missing"
    """A store lacks an entry ID that another store defines."""

    DIRECTIVE_MISMATCH = "directive-mismatch"
    """Two stores use incompatible substitution directives for the same ID."""


class DirectiveStyle(StrEnum):
    """Substitution syntax a directive was written in."""

    PRINTF = "printf"
    """printf style: %s, %d, %(name)s"""

    BRACE = "brace"
    """str.format style: {}, {0}, {name}"""


class LoadStatus(StrEnum):
    """Outcome of a single import call.

    StrEnum provides automatic string conversion: str(LoadStatus.SUCCESS) == "success"
    """

    SUCCESS = "success"
    """Source parsed and all entries written."""

    EMPTY = "empty"
    """Source parsed but contained no entries."""


__all__ = [
    "DefectKind",
    "DirectiveStyle",
    "LoadStatus",
]
