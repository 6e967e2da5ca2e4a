"""Catalog validation.

Provides cross-locale validation of value stores for CI/CD pipelines and
pre-release checks, plus the directive helpers it is built on.

Python 3.13+.
"""

from localecatalog.core.directives import Directive, directive_signature, extract_directives

from .catalog import check_stores, validate_stores

__all__ = [
    "Directive",
    "check_stores",
    "directive_signature",
    "extract_directives",
    "validate_stores",
]
