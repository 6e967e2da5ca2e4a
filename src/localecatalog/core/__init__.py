"""Core value types shared by the runtime and validation layers.

Exports:
    LocaleTag: Normalized, comparable locale identifier
    UND: The undetermined default locale tag

Python 3.13+.
"""

from .locale_tag import UND, LocaleTag

__all__ = ["UND", "LocaleTag"]
