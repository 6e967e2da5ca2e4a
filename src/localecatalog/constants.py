"""Shared constants for localecatalog.

Single source of truth for values used across the core, runtime and
validation packages. Placing them here avoids circular imports.

Constants are grouped by domain:
- Locale tags: the undetermined default locale
- Directives: regular expressions for substitution placeholders
- Import limits: size bound for a single import source

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale tags
    "UNDETERMINED",
    # Directives
    "PRINTF_DIRECTIVE_PATTERN",
    "BRACE_DIRECTIVE_PATTERN",
    "INTEGER_CONVERSIONS",
    # Import limits
    "MAX_IMPORT_SIZE",
    "KEY_SEPARATOR",
]

# ============================================================================
# LOCALE TAGS
# ============================================================================

# BCP-47 "undetermined" language subtag. The store registered under this tag
# is the default fallback and survives priority pruning.
UNDETERMINED: str = "und"


# ============================================================================
# DIRECTIVES
# ============================================================================

# printf-style conversion: %[(key)][flags][width][.precision][length]conversion
# "%%" is matched as well so callers can skip it as a literal percent sign.
PRINTF_DIRECTIVE_PATTERN: re.Pattern[str] = re.compile(
    r"""
    %
    (?:
        (?P<escape>%)
      |
        (?:\((?P<key>[^)]*)\))?
        (?P<flags>[-+ #0]*)
        (?P<width>\*|\d+)?
        (?:\.(?P<precision>\*|\d+))?
        (?P<length>[hlL])?
        (?P<conversion>[diouxXeEfFgGcrsab])
    )
    """,
    re.VERBOSE,
)

# str.format replacement field: {[field][!conversion][:spec]}
# "{{" and "}}" are matched as escapes.
BRACE_DIRECTIVE_PATTERN: re.Pattern[str] = re.compile(
    r"""
    (?P<escape>\{\{|\}\})
  |
    \{
        (?P<field>[^{}!:]*)
        (?:!(?P<conversion>[rsa]))?
        (?::(?P<spec>[^{}]*))?
    \}
    """,
    re.VERBOSE,
)

# Integer conversions that are interchangeable across translations.
INTEGER_CONVERSIONS: frozenset[str] = frozenset({"d", "i", "u"})

# ============================================================================
# IMPORT LIMITS
# ============================================================================

# 10 MiB of source text per import call
MAX_IMPORT_SIZE: int = 10 * 1024 * 1024

# Joins nested keys when flattening structured import sources ("menu.file.open").
KEY_SEPARATOR: str = "."
