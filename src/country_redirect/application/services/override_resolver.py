"""Effective country code for a request: override parameter, cookie, then geo lookup."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from country_redirect.domain.models import RedirectSettings, RequestContext

if TYPE_CHECKING:
    from country_redirect.application.services.country_map_resolver import CountryMapResolver
    from country_redirect.application.services.geo_lookup_cache import GeoLookupCache

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current UTC time."""
    return datetime.now(UTC)


class OverrideResolver:
    """Determines and persists the visitor's country code."""

    def __init__(
        self,
        settings: RedirectSettings,
        country_map_resolver: CountryMapResolver,
        geo_lookup: GeoLookupCache,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the resolver.

        Args:
            settings: Redirect settings (cookie and parameter names, lifetime).
            country_map_resolver: Resolver used to match override values to countries.
            geo_lookup: Cached geo lookup used when no override or cookie exists.
            clock: Source of the current time for cookie expiry.
        """
        self._settings = settings
        self._country_map_resolver = country_map_resolver
        self._geo_lookup = geo_lookup
        self._clock = clock

    def resolve_country_code(self, context: RequestContext) -> str:
        """Resolve the effective country code, persisting it to the country cookie.

        Returns ``"*"`` when the country cannot be determined.
        """
        override = context.query_params.get(self._settings.override_locale_param)
        if override:
            country_code = self._country_map_resolver.country_code_for_locale(override)
            if country_code is not None:
                logger.debug(f"Country overridden to '{country_code}' via site '{override}'")
                self.set_country_cookie(context, country_code)

        country_code = context.cookies.get(self._settings.cookie_name)
        if country_code:
            return country_code

        country_code = self._geo_lookup.country_code_for_ip(context.ip_address)
        self.set_country_cookie(context, country_code)
        return country_code

    def set_country_cookie(self, context: RequestContext, country_code: str) -> None:
        """Persist a country code for the configured cookie lifetime."""
        context.cookies.set(self._settings.cookie_name, country_code, self.cookie_expiry())

    def remove_country_cookie(self, context: RequestContext) -> None:
        """Forget the persisted country code."""
        context.cookies.clear(self._settings.cookie_name)

    def cookie_expiry(self) -> datetime:
        """Expiry for cookies written now."""
        return self._clock() + timedelta(days=self._settings.cookie_lifetime_days)
