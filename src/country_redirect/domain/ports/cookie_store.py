"""Cookie store port."""

from datetime import datetime
from typing import Protocol


class CookieStore(Protocol):
    """Port for the visitor's cookies within the current request."""

    def get(self, name: str) -> str | None:
        """Get a cookie value, or None if it is not set."""
        ...

    def set(self, name: str, value: str, expires_at: datetime) -> None:
        """Set a cookie. The new value is visible to later reads in the same request."""
        ...

    def clear(self, name: str) -> None:
        """Remove a cookie."""
        ...
