"""Halts for crawlers so they always see canonical content."""

from country_redirect.domain.models import CheckResult, RedirectRequest
from country_redirect.domain.ports import CrawlerSignature


class BotCheck:
    """Skips redirects for known crawler user agents."""

    name = "bot"

    def __init__(self, crawler_signature: CrawlerSignature) -> None:
        self._crawler_signature = crawler_signature

    def execute(self, request: RedirectRequest) -> CheckResult:
        if self._crawler_signature.is_bot(request.context.user_agent):
            return CheckResult.HALT
        return CheckResult.CONTINUE
