"""Configuration for Registry and ValueStore instances.

Provides a single frozen dataclass that encapsulates the tunables shared
by a registry and every store it creates.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["CatalogConfig"]


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    """Immutable configuration for a Registry and its value stores.

    All fields have defaults; ``CatalogConfig()`` is the configuration used
    when none is passed.

    Attributes:
        lock_timeout: Seconds to wait for a registry or store lock before
            raising TimeoutError (default: None, wait indefinitely).
        strict: If True, ValueStore.format() raises TextNotFoundError and
            FormattingError instead of returning them alongside a fallback
            string (default: False).

    Example:
        >>> from localecatalog.runtime import Registry
        >>> registry = Registry(CatalogConfig(lock_timeout=2.0, strict=True))
        >>> registry.config.strict
        True
    """

    lock_timeout: float | None = None
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If lock_timeout is negative.
        """
        if self.lock_timeout is not None and self.lock_timeout < 0:
            msg = "lock_timeout must be non-negative"
            raise ValueError(msg)
