"""Key/value cache port."""

from typing import Any, Protocol


class KeyValueCache(Protocol):
    """Port for an opaque key/value store shared between requests."""

    def get(self, key: str) -> Any | None:
        """Get a cached value, or None on a miss."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a value under a key, replacing any previous value."""
        ...
