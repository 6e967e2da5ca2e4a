"""Locale negotiation over a registry snapshot.

Selects the single best value store for a client's ordered list of
acceptable locales:

    1. exact tag match, in client order
    2. language-only match, in client order; among several stores sharing
       the language, the one listed earliest in the priority list wins,
       then the one created first
    3. first store named by the priority list
    4. the "und" store

Operates on an immutable RegistrySnapshot, so it runs without holding
any lock.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from localecatalog.core import UND, LocaleTag
from localecatalog.diagnostics import InvalidLocaleError

if TYPE_CHECKING:
    from localecatalog.runtime.registry import RegistrySnapshot
    from localecatalog.runtime.store import ValueStore

__all__ = ["match_store", "parse_requested"]

logger = logging.getLogger(__name__)


def parse_requested(locales: Iterable[str | LocaleTag]) -> tuple[LocaleTag, ...]:
    """Normalize client-supplied locales, dropping duplicates and invalid entries.

    Client lists often come from headers or user settings, so a malformed
    entry is skipped rather than failing the whole negotiation.

    Args:
        locales: Locale identifiers, most preferred first

    Returns:
        Distinct tags in client order
    """
    tags: dict[LocaleTag, None] = {}
    for locale in locales:
        try:
            tags.setdefault(LocaleTag.parse(locale), None)
        except InvalidLocaleError as e:
            logger.debug("Ignoring requested locale %r: %s", locale, e)
    return tuple(tags)


def _language_candidates(snapshot: RegistrySnapshot) -> list[ValueStore]:
    """Stores ordered for language-only matching: priority rank, then creation order."""
    rank = {tag: index for index, tag in enumerate(snapshot.priority)}
    unranked = len(rank)
    # sorted() is stable, so creation order breaks ties
    return sorted(snapshot.stores.values(), key=lambda store: rank.get(store.tag, unranked))


def match_store(
    snapshot: RegistrySnapshot,
    locales: Iterable[str | LocaleTag],
) -> ValueStore | None:
    """Select the best store for a client's acceptable locales.

    Args:
        snapshot: Consistent view of the registry's stores and priority list
        locales: Acceptable locales, most preferred first (may be empty)

    Returns:
        The selected store, or None if no step matched and the snapshot
        has no "und" store

    Example:
        >>> registry = Registry()
        >>> for locale in ("en-US", "en-GB", "und"):
        ...     _ = registry.configure(locale)
        >>> str(match_store(registry.snapshot(), ["en-CA"]).tag)
        'en-US'
    """
    stores = snapshot.stores
    requested = parse_requested(locales)

    for tag in requested:
        store = stores.get(tag)
        if store is not None:
            logger.debug("Matched locale %s exactly", tag)
            return store

    if requested:
        candidates = _language_candidates(snapshot)
        for tag in requested:
            for store in candidates:
                if store.tag.matches_language(tag):
                    logger.debug("Matched locale %s by language as %s", tag, store.tag)
                    return store

    for tag in snapshot.priority:
        store = stores.get(tag)
        if store is not None:
            logger.debug("No match for %s; using priority locale %s", requested, tag)
            return store

    return stores.get(UND)
