"""Visitor classification adapters."""

from country_redirect.adapters.detection.user_agent_crawler_signature import (
    DEFAULT_CRAWLER_PATTERNS,
    UserAgentCrawlerSignature,
)

__all__ = ["DEFAULT_CRAWLER_PATTERNS", "UserAgentCrawlerSignature"]
