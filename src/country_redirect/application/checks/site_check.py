"""Verifies the candidate site is a real, different site."""

import logging

from country_redirect.application.services.redirect_url_builder import (
    RedirectUrlBuilder,
    is_absolute_url,
)
from country_redirect.domain.models import CheckResult, RedirectRequest

logger = logging.getLogger(__name__)


class SiteCheck:
    """Halts for self-redirects and sites without a base URL.

    Absolute URL targets are passed through untouched. Requests whose URL
    belongs to no configured site are never redirected.
    """

    name = "site"

    def __init__(self, url_builder: RedirectUrlBuilder) -> None:
        self._url_builder = url_builder

    def execute(self, request: RedirectRequest) -> CheckResult:
        if not request.site_handle:
            return CheckResult.HALT

        if not request.context.current_site_handle:
            logger.debug(f"No configured site serves {request.context.current_url}")
            return CheckResult.HALT

        if is_absolute_url(request.site_handle):
            return CheckResult.CONTINUE

        site = self._url_builder.target_site(
            request.site_handle, request.context.current_site_handle
        )
        if site is None:
            return CheckResult.HALT

        request.target_site = site
        return CheckResult.CONTINUE
