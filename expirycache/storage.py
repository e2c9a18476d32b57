"""In-memory key/value cache whose entries expire."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from typing import Any, Generic, Hashable, TypeVar

from .eviction import GarbageCollector
from .model import ExpiredItemError, NotFoundError, Options

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


@dataclass(frozen=True)
class _Entry(Generic[V]):
    value: V
    expires_at: float

    def is_expired(self, now: float | None = None) -> bool:
        return (time.monotonic() if now is None else now) > self.expires_at


class Cache(Generic[K, V]):
    """Thread-safe cache with per-entry expiry and background purging.

    Durations are in seconds. Use as a context manager, or call
    :meth:`close`, to stop the background collector.
    """

    def __init__(self, options: Options | None = None) -> None:
        options = Options() if options is None else options
        options.validate()
        self._options = options
        self._entries: dict[K, _Entry[V]] = {}
        self._lock = threading.Lock()
        self._gc = GarbageCollector(options.gc_interval, self._run_cleanup)
        self._gc.start()

    def set(self, key: K, value: V) -> None:
        """Store a value with the configured default TTL."""
        self.set_with_ttl(key, value, self._options.item_ttl)

    def set_with_ttl(self, key: K, value: V, ttl: float) -> None:
        """Store a value that expires after ``ttl`` seconds."""
        entry = _Entry(value, time.monotonic() + ttl)
        with self._lock:
            self._entries[key] = entry

    def get(self, key: K) -> V:
        """Return the value for ``key``.

        Raises NotFoundError if absent and ExpiredItemError (after removing
        the entry) if it has expired.
        """
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                raise NotFoundError(f"no cached entry: key: {key}")
            if entry.is_expired():
                del self._entries[key]
                raise ExpiredItemError(f"entry has expired: key: {key}")
            return entry.value

    def delete(self, key: K) -> None:
        """Remove the entry for ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)

    def clear(self) -> None:
        """Remove all entries."""
        with self._lock:
            self._entries = {}

    def keys(self) -> list[K]:
        """Return all keys whose entries have not expired."""
        now = time.monotonic()
        with self._lock:
            return [k for k, e in self._entries.items() if not e.is_expired(now)]

    def contains_key(self, key: K) -> bool:
        """Report whether a non-expired entry exists for ``key``."""
        try:
            self.get(key)
        except (NotFoundError, ExpiredItemError):
            return False
        return True

    def size(self) -> int:
        """Return the number of stored entries, expired ones included."""
        with self._lock:
            return len(self._entries)

    def close(self) -> None:
        """Stop the background garbage collector."""
        self._gc.stop()

    def __enter__(self) -> Cache[K, V]:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, key: object) -> bool:
        return self.contains_key(key)  # type: ignore[arg-type]

    def _run_cleanup(self) -> int:
        now = time.monotonic()
        with self._lock:
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
        return len(expired)