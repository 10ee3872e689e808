"""Ordered, short-circuiting chain of redirect checks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from country_redirect.application.checks.bot_check import BotCheck
from country_redirect.application.checks.element_check import ElementCheck
from country_redirect.application.checks.enabled_check import EnabledCheck
from country_redirect.application.checks.geo_check import GeoCheck
from country_redirect.application.checks.ignored_segment_check import IgnoredSegmentCheck
from country_redirect.application.checks.language_check import LanguageCheck
from country_redirect.application.checks.site_check import SiteCheck
from country_redirect.domain.models import CheckResult, RedirectRequest, RedirectSettings

if TYPE_CHECKING:
    from country_redirect.application.services.country_map_resolver import CountryMapResolver
    from country_redirect.application.services.override_resolver import OverrideResolver
    from country_redirect.application.services.redirect_url_builder import RedirectUrlBuilder
    from country_redirect.domain.contracts import RedirectCheck
    from country_redirect.domain.ports import CrawlerSignature, SiteCatalogue

logger = logging.getLogger(__name__)


class CheckPipeline:
    """Runs checks in order and builds the redirect URL if none of them halted."""

    def __init__(self, checks: Sequence[RedirectCheck], url_builder: RedirectUrlBuilder) -> None:
        self._checks = tuple(checks)
        self._url_builder = url_builder

    @property
    def checks(self) -> tuple[RedirectCheck, ...]:
        return self._checks

    def run(self, request: RedirectRequest) -> None:
        """Run the chain, setting ``request.redirect_url`` when a redirect is warranted."""
        for check in self._checks:
            if check.execute(request) is CheckResult.HALT:
                request.halted_by = check.name
                request.redirect_url = None
                logger.debug(f"Redirect check '{check.name}' halted for {request.current_uri}")
                return

        url = self._url_builder.build_url(
            request.context, request.site_handle, variant=request.matched_element
        )
        request.redirect_url = url or None


def build_check_pipeline(
    settings: RedirectSettings,
    override_resolver: OverrideResolver,
    country_map_resolver: CountryMapResolver,
    url_builder: RedirectUrlBuilder,
    crawler_signature: CrawlerSignature,
    sites: SiteCatalogue,
) -> CheckPipeline:
    """Create the pipeline with the standard check order."""
    checks: list[RedirectCheck] = [
        EnabledCheck(settings.enabled),
        IgnoredSegmentCheck(settings.ignored_segments),
        BotCheck(crawler_signature),
        GeoCheck(override_resolver),
        LanguageCheck(country_map_resolver, sites),
        SiteCheck(url_builder),
        ElementCheck(url_builder),
    ]
    return CheckPipeline(checks, url_builder)
