"""Crawler detection by user agent substrings."""

import re
from collections.abc import Iterable

# Common crawler and HTTP client user agent fragments, matched case-insensitively.
DEFAULT_CRAWLER_PATTERNS: tuple[str, ...] = (
    "bot",
    "crawler",
    "spider",
    "scraper",
    "slurp",
    "wget",
    "curl",
    "python-requests",
    "go-http-client",
    "java/",
    "libwww",
    "httpclient",
    "headlesschrome",
    "lighthouse",
    "baiduspider",
    "bytespider",
    "facebookexternalhit",
    "embedly",
    "quora link preview",
    "outbrain",
    "pinterest",
    "vkshare",
    "w3c_validator",
    "whatsapp",
    "ia_archiver",
    "mediapartners-google",
    "adsbot-google",
    "feedfetcher",
    "google-inspectiontool",
    "yahoo! slurp",
)


class UserAgentCrawlerSignature:
    """Recognises crawlers from a list of user agent substrings."""

    def __init__(self, patterns: Iterable[str] = DEFAULT_CRAWLER_PATTERNS) -> None:
        escaped = [re.escape(p.lower()) for p in patterns if p]
        self._regex = re.compile("|".join(escaped)) if escaped else None

    def is_bot(self, user_agent: str) -> bool:
        """Return True when the user agent matches a crawler pattern.

        An empty user agent is treated as a bot; browsers always send one.
        """
        if not user_agent or not user_agent.strip():
            return True
        if self._regex is None:
            return False
        return self._regex.search(user_agent.lower()) is not None
