"""In-process key/value cache with expiry."""

import threading
import time
from collections.abc import Callable
from typing import Any

from cachetools import TTLCache


class TTLKeyValueCache:
    """Thread-safe key/value cache whose entries expire after a fixed TTL."""

    def __init__(
        self,
        max_entries: int = 10000,
        ttl_seconds: float = 86400,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the cache.

        Args:
            max_entries: Maximum number of entries before the oldest are evicted.
            ttl_seconds: Lifetime of each entry in seconds.
            timer: Clock used to expire entries.
        """
        self._cache: TTLCache[str, Any] = TTLCache(
            maxsize=max_entries, ttl=ttl_seconds, timer=timer
        )
        self._lock = threading.RLock()

    def get(self, key: str) -> Any | None:
        """Get a cached value, or None on a miss or after expiry."""
        with self._lock:
            return self._cache.get(key)

    def set(self, key: str, value: Any) -> None:
        """Store a value, replacing any previous one."""
        with self._lock:
            self._cache[key] = value

    def clear(self) -> None:
        """Drop all entries."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)
