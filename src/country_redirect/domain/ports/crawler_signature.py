"""Crawler signature port."""

from typing import Protocol


class CrawlerSignature(Protocol):
    """Port for recognising crawlers by their user agent."""

    def is_bot(self, user_agent: str) -> bool:
        """Return True when the user agent belongs to a known crawler."""
        ...
