"""Cache errors and configuration options."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ITEM_TTL = 120.0
DEFAULT_GC_INTERVAL = 30.0


class CacheError(Exception):
    """Base class for cache errors."""


class NotFoundError(CacheError, LookupError):
    """Raised when no entry exists for a key."""


class ExpiredItemError(CacheError, LookupError):
    """Raised when the entry for a key has expired."""


class InvalidConfigError(CacheError, ValueError):
    """Raised when cache options are invalid."""


@dataclass
class Options:
    """Cache configuration; durations are in seconds.

    A value of zero is replaced by its default when validated.
    """

    item_ttl: float = DEFAULT_ITEM_TTL
    gc_interval: float = DEFAULT_GC_INTERVAL

    def validate(self) -> None:
        """Check the values and fill in defaults for zero ones."""
        if self.item_ttl < 0:
            raise InvalidConfigError(
                f"invalid config value: item TTL must be positive: {self.item_ttl}"
            )
        if self.gc_interval < 0:
            raise InvalidConfigError(
                f"invalid config value: GC interval must be positive: {self.gc_interval}"
            )
        if self.item_ttl == 0:
            self.item_ttl = DEFAULT_ITEM_TTL
        if self.gc_interval == 0:
            self.gc_interval = DEFAULT_GC_INTERVAL