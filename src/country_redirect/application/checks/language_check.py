"""Picks the candidate site for the country, honouring browser languages."""

import logging

from country_redirect.application.services.country_map_resolver import (
    CountryMapResolver,
    primary_language_subtag,
)
from country_redirect.application.services.redirect_url_builder import is_absolute_url
from country_redirect.domain.models import WILDCARD, CheckResult, RedirectRequest
from country_redirect.domain.ports import SiteCatalogue

logger = logging.getLogger(__name__)


class LanguageCheck:
    """Resolves the candidate site handle and halts when there is none.

    Multi-language countries are narrowed down by the visitor's accepted
    languages, in preference order. A visitor already reading the current site
    in their most preferred language stays there unless the candidate site
    speaks that language too.
    """

    name = "language"

    def __init__(self, country_map_resolver: CountryMapResolver, sites: SiteCatalogue) -> None:
        self._country_map_resolver = country_map_resolver
        self._sites = sites

    def execute(self, request: RedirectRequest) -> CheckResult:
        site_handle = self._country_map_resolver.resolve_site_handle(
            request.country_code or WILDCARD, request.context.browser_languages
        )
        if not site_handle:
            logger.debug(f"No site mapped for country '{request.country_code}'")
            return CheckResult.HALT

        if not is_absolute_url(site_handle) and self._prefers_current_site(request, site_handle):
            logger.debug(f"Visitor already reads '{request.context.current_site_handle}' natively")
            return CheckResult.HALT

        request.site_handle = site_handle
        return CheckResult.CONTINUE

    def _prefers_current_site(self, request: RedirectRequest, site_handle: str) -> bool:
        languages = request.context.browser_languages
        preferred = primary_language_subtag(languages[0]) if languages else None
        if preferred is None:
            return False

        current = self._sites.get_site_by_handle(request.context.current_site_handle)
        candidate = self._sites.get_site_by_handle(site_handle)
        if current is None or candidate is None:
            return False

        current_language = primary_language_subtag(current.language)
        candidate_language = primary_language_subtag(candidate.language)
        if current_language is None or candidate_language is None:
            return False

        return current_language == preferred and candidate_language != preferred
