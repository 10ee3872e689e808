"""Country redirect use cases exposed to the host application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING

from country_redirect.application.checks import CheckPipeline, build_check_pipeline
from country_redirect.application.services import (
    BannerResolver,
    CountryMapResolver,
    GeoLookupCache,
    LinkBuilder,
    OverrideResolver,
    RedirectUrlBuilder,
)
from country_redirect.application.services.override_resolver import utc_now
from country_redirect.domain.models import (
    Banner,
    Link,
    RedirectOutcome,
    RedirectRequest,
    RedirectSettings,
    RequestContext,
)

if TYPE_CHECKING:
    from country_redirect.domain.contracts import RedirectLog
    from country_redirect.domain.ports import (
        CrawlerSignature,
        ElementCatalogue,
        SiteCatalogue,
    )

logger = logging.getLogger(__name__)


class CountryRedirectService:
    """Facade over the redirect pipeline, banner and link resolution.

    One instance serves all requests; everything request-specific travels in the
    RequestContext passed to each call.
    """

    def __init__(
        self,
        settings: RedirectSettings,
        geo_lookup: GeoLookupCache,
        sites: SiteCatalogue,
        crawler_signature: CrawlerSignature,
        elements: ElementCatalogue | None = None,
        redirect_log: RedirectLog | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._settings = settings
        self._geo_lookup = geo_lookup
        self._redirect_log = redirect_log

        self.country_map_resolver = CountryMapResolver(settings.country_map)
        self.override_resolver = OverrideResolver(
            settings, self.country_map_resolver, geo_lookup, clock=clock
        )
        self.url_builder = RedirectUrlBuilder(
            sites, elements, self.override_resolver, settings.redirected_param
        )
        self.banner_resolver = BannerResolver(
            settings,
            self.override_resolver,
            self.country_map_resolver,
            self.url_builder,
            geo_lookup,
            sites,
        )
        self.link_builder = LinkBuilder(sites, settings.override_locale_param)
        self.pipeline: CheckPipeline = build_check_pipeline(
            settings,
            self.override_resolver,
            self.country_map_resolver,
            self.url_builder,
            crawler_signature,
            sites,
        )

    @property
    def settings(self) -> RedirectSettings:
        return self._settings

    def on_request(self, context: RequestContext) -> RedirectOutcome:
        """Decide whether the visitor is redirected and whether to dismiss banners."""
        request = RedirectRequest(context=context)
        self.pipeline.run(request)

        should_set_banner_cookie = self.was_redirected_from_banner(context)
        if should_set_banner_cookie:
            context.cookies.set(
                self._settings.cookie_name_banner, "1", self.override_resolver.cookie_expiry()
            )

        if request.redirect_url:
            logger.debug(f"Redirecting {context.current_uri} to {request.redirect_url}")
            if self._settings.enable_logging and self._redirect_log is not None:
                self._redirect_log.log_redirect(request.redirect_url)

        return RedirectOutcome(
            redirect_to=request.redirect_url,
            should_set_banner_cookie=should_set_banner_cookie,
        )

    def get_links(self) -> list[Link]:
        """Get manual-switch links for all sites."""
        return self.link_builder.get_links()

    def get_banner(
        self,
        context: RequestContext,
        current_url: str | None = None,
        current_site_handle: str | None = None,
    ) -> Banner | None:
        """Get the banner to show the visitor, if any."""
        return self.banner_resolver.resolve_banner(context, current_url, current_site_handle)

    def get_country_code(self, context: RequestContext) -> str:
        """Get the visitor's effective country code (``"*"`` when unknown)."""
        return self.override_resolver.resolve_country_code(context)

    def get_country_name(self, context: RequestContext) -> str | None:
        """Get the geolocated country name for the visitor's IP address."""
        record = self._geo_lookup.country_record_for_ip(context.ip_address)
        return record.name if record else None

    def was_redirected(self, context: RequestContext) -> bool:
        """Whether the visitor arrived through an automatic redirect."""
        return self._has_param(context, self._settings.redirected_param)

    def was_redirected_from_banner(self, context: RequestContext) -> bool:
        """Whether the visitor arrived by following a banner."""
        return self._has_param(context, self._settings.banner_param)

    def was_overridden(self, context: RequestContext) -> bool:
        """Whether the visitor picked a site explicitly on this request."""
        return self._has_param(context, self._settings.override_locale_param)

    def close(self) -> None:
        """Release resources held by the geo lookup."""
        self._geo_lookup.close()

    @staticmethod
    def _has_param(context: RequestContext, param: str | None) -> bool:
        return bool(param) and bool(context.query_params.get(param))
