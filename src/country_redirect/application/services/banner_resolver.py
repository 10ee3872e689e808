"""Opt-in banner offering a manual switch when no automatic redirect happened."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from country_redirect.application.services.redirect_url_builder import append_marker_param
from country_redirect.domain.models import Banner, RedirectSettings, RequestContext

if TYPE_CHECKING:
    from country_redirect.application.services.country_map_resolver import CountryMapResolver
    from country_redirect.application.services.geo_lookup_cache import GeoLookupCache
    from country_redirect.application.services.override_resolver import OverrideResolver
    from country_redirect.application.services.redirect_url_builder import RedirectUrlBuilder
    from country_redirect.domain.ports import SiteCatalogue

logger = logging.getLogger(__name__)


class BannerResolver:
    """Decides whether to show a banner, independently of the check pipeline."""

    def __init__(
        self,
        settings: RedirectSettings,
        override_resolver: OverrideResolver,
        country_map_resolver: CountryMapResolver,
        url_builder: RedirectUrlBuilder,
        geo_lookup: GeoLookupCache,
        sites: SiteCatalogue,
    ) -> None:
        self._settings = settings
        self._override_resolver = override_resolver
        self._country_map_resolver = country_map_resolver
        self._url_builder = url_builder
        self._geo_lookup = geo_lookup
        self._sites = sites
        self._banners_by_country = {code.lower(): text for code, text in settings.banners.items()}

    def resolve_banner(
        self,
        context: RequestContext,
        current_url: str | None = None,
        current_site_handle: str | None = None,
    ) -> Banner | None:
        """Get the banner for the current visitor, or None.

        A banner needs a computable redirect URL, a configured banner text for
        the visitor's country (or, failing that, the target site handle) and no
        banner-dismissal cookie.
        """
        country_code = self._override_resolver.resolve_country_code(context)
        site_handle = self._country_map_resolver.resolve_site_handle(
            country_code, context.browser_languages
        )
        redirect_url = self._url_builder.build_url(
            context, site_handle, current_url, current_site_handle
        )
        text = self.banner_text(country_code, site_handle or None)

        if not redirect_url or not text or not site_handle:
            return None

        if context.cookies.get(self._settings.cookie_name_banner):
            logger.debug("Banner suppressed by dismissal cookie")
            return None

        record = self._geo_lookup.country_record_for_ip(context.ip_address)
        site = self._sites.get_site_by_handle(site_handle)

        return Banner(
            text=text,
            url=append_marker_param(redirect_url, self._settings.banner_param),
            country_name=record.name if record else None,
            site_handle=site_handle,
            site_name=site.name if site else None,
        )

    def banner_text(self, country_code: str, site_handle: str | None) -> str | None:
        """Find the banner text for a country code, falling back to the site handle."""
        code = country_code.lower()
        if code in self._banners_by_country:
            return self._banners_by_country[code] or None
        if site_handle and site_handle in self._settings.banners:
            return self._settings.banners[site_handle] or None
        return None
