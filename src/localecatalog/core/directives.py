"""Substitution directive extraction and application.

Translated texts embed placeholders that are filled at runtime. Two
syntaxes are recognized:

    printf  "You have %d items", "Hello %(name)s", "100%%"
    brace   "You have {0} items", "Hello {name}", "{{literal}}"

A text without replacement fields is printf style if it contains a printf
directive or a "%%" escape. A text with replacement fields is printf style
only if it also holds a printf directive that cannot be a literal percent
sign followed by a word ("%d", "%(name)s", but not "20% off"); otherwise it
is brace style. Texts with neither are plain text.

The directive *signature* is what must agree across translations of the
same entry: the count of directives and the type at each position. Flags,
fixed width, fixed precision and the surrounding literal text may differ
freely; a "*" width or precision consumes an argument and is part of the
signature.
When every directive names its argument explicitly ("%(count)d",
"{count}", "{0}") translators may reorder them, so keyed signatures are
compared sorted by key.

Python 3.13+.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from localecatalog.constants import (
    BRACE_DIRECTIVE_PATTERN,
    INTEGER_CONVERSIONS,
    PRINTF_DIRECTIVE_PATTERN,
)
from localecatalog.enums import DirectiveStyle

__all__ = [
    "Directive",
    "detect_style",
    "directive_signature",
    "extract_directives",
    "substitute",
]

# Type of a brace field without a conversion or a format type
_BRACE_DEFAULT_TYPE = "s"


@dataclass(frozen=True, slots=True)
class Directive:
    """One substitution placeholder.

    Attributes:
        style: printf or brace syntax
        key: Explicit argument name or index, None for positional
        conversion: Normalized type character ("d", "s", "f", "r", ...)
        position: Offset of the directive in its text
        star_args: Arguments consumed by "*" width and precision (printf only)
    """

    style: DirectiveStyle
    key: str | None
    conversion: str
    position: int = 0
    star_args: int = 0

    @property
    def signature(self) -> str:
        """Canonical form used for cross-locale comparison."""
        match self.style:
            case DirectiveStyle.PRINTF:
                stars = "*" * self.star_args
                if self.key:
                    return f"%({self.key}){stars}{self.conversion}"
                return f"%{stars}{self.conversion}"
            case DirectiveStyle.BRACE:
                return f"{{{self.key or ''}:{self.conversion}}}"


def detect_style(text: str) -> DirectiveStyle | None:
    """Classify the substitution syntax of a text.

    Args:
        text: Translated text

    Returns:
        DirectiveStyle.PRINTF, DirectiveStyle.BRACE, or None for plain text
    """
    has_fields = any(
        m.group("escape") is None for m in BRACE_DIRECTIVE_PATTERN.finditer(text)
    )
    if not has_fields:
        if PRINTF_DIRECTIVE_PATTERN.search(text):
            return DirectiveStyle.PRINTF
        return DirectiveStyle.BRACE if BRACE_DIRECTIVE_PATTERN.search(text) else None
    if any(_is_unambiguous_printf(m) for m in PRINTF_DIRECTIVE_PATTERN.finditer(text)):
        return DirectiveStyle.PRINTF
    return DirectiveStyle.BRACE


def _is_unambiguous_printf(match: re.Match[str]) -> bool:
    """True for a directive that cannot be prose such as "20% off" or "5% de"."""
    if match.group("escape") is not None:
        return False
    return match.group("key") is not None or " " not in match.group("flags")


def _star_count(match: re.Match[str]) -> int:
    return (match.group("width") == "*") + (match.group("precision") == "*")


def _normalize_conversion(conversion: str) -> str:
    return "d" if conversion in INTEGER_CONVERSIONS else conversion


def _brace_type(conversion: str | None, spec: str | None) -> str:
    """Type of a brace field: explicit "!r"/"!a", else trailing spec letter, else "s"."""
    if conversion in ("r", "a"):
        return conversion
    if spec and spec[-1].isalpha():
        return _normalize_conversion(spec[-1])
    if spec and spec[-1] == "%":
        return "%"
    return _BRACE_DEFAULT_TYPE


def extract_directives(text: str) -> tuple[Directive, ...]:
    """Extract the ordered directives embedded in a text.

    Escapes ("%%", "{{", "}}") are not directives.

    Args:
        text: Translated text

    Returns:
        Directives in order of appearance

    Example:
        >>> [d.signature for d in extract_directives("%d of %(total)s")]
        ['%d', '%(total)s']
        >>> [d.signature for d in extract_directives("{0} of {total:>5d}")]
        ['{0:s}', '{total:d}']
    """
    match detect_style(text):
        case DirectiveStyle.PRINTF:
            return tuple(
                Directive(
                    style=DirectiveStyle.PRINTF,
                    key=m.group("key"),
                    conversion=_normalize_conversion(m.group("conversion")),
                    position=m.start(),
                    star_args=_star_count(m),
                )
                for m in PRINTF_DIRECTIVE_PATTERN.finditer(text)
                if m.group("escape") is None
            )
        case DirectiveStyle.BRACE:
            return tuple(
                Directive(
                    style=DirectiveStyle.BRACE,
                    key=m.group("field") or None,
                    conversion=_brace_type(m.group("conversion"), m.group("spec")),
                    position=m.start(),
                )
                for m in BRACE_DIRECTIVE_PATTERN.finditer(text)
                if m.group("escape") is None
            )
        case _:
            return ()


def directive_signature(text: str) -> tuple[str, ...]:
    """Compute the comparable directive signature of a text.

    Args:
        text: Translated text

    Returns:
        Tuple of directive signatures; sorted by key when every directive
        is keyed, in order of appearance otherwise

    Example:
        >>> directive_signature("You have %d items")
        ('%d',)
        >>> directive_signature("{b} and {a}") == directive_signature("{a} and {b}")
        True
    """
    directives = extract_directives(text)
    if directives and all(d.key is not None for d in directives):
        directives = tuple(sorted(directives, key=lambda d: (d.key or "", d.conversion)))
    return tuple(d.signature for d in directives)


def substitute(text: str, args: tuple[Any, ...], kwargs: Mapping[str, Any]) -> str:
    """Fill a text's directives with arguments.

    printf texts take either positional args or keyword args (mapping
    form); brace texts take both. Plain text is returned unchanged when no
    arguments are given.

    Args:
        text: Translated text
        args: Positional arguments
        kwargs: Keyword arguments

    Returns:
        Formatted text

    Raises:
        TypeError, ValueError, KeyError, IndexError: If the arguments do
            not fit the directives
    """
    match detect_style(text):
        case DirectiveStyle.PRINTF:
            if args and kwargs:
                msg = "printf-style text takes positional or keyword arguments, not both"
                raise TypeError(msg)
            return text % (dict(kwargs) if kwargs else args)
        case DirectiveStyle.BRACE:
            return text.format(*args, **kwargs)
        case _:
            if args or kwargs:
                msg = "text has no directives but arguments were given"
                raise TypeError(msg)
            return text
