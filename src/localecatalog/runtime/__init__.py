"""Runtime catalog: value stores, registry and locale matching.

Exports:
    Registry - Process-wide collection of per-locale stores
    RegistrySnapshot - Point-in-time view used by matching and validation
    ValueStore - Thread-safe entries of one locale
    TextEntry / Value - Concrete entry and the entry protocol
    Importer / ImportResult - Import boundary
    CatalogConfig - Shared configuration
    match_store - Locale negotiation over a snapshot

Python 3.13+.
"""

from .catalog_config import CatalogConfig
from .entry import TextEntry, Value
from .importing import ImportResult, Importer
from .matcher import match_store
from .registry import Registry, RegistrySnapshot
from .store import ValueStore

__all__ = [
    "CatalogConfig",
    "ImportResult",
    "Importer",
    "Registry",
    "RegistrySnapshot",
    "TextEntry",
    "Value",
    "ValueStore",
    "match_store",
]
