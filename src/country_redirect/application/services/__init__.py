"""Application services for country/site resolution."""

from country_redirect.application.services.banner_resolver import BannerResolver
from country_redirect.application.services.country_map_resolver import (
    CountryMapResolver,
    primary_language_subtag,
)
from country_redirect.application.services.geo_lookup_cache import GeoLookupCache
from country_redirect.application.services.ip_address import normalize_ip_address
from country_redirect.application.services.link_builder import LinkBuilder
from country_redirect.application.services.override_resolver import OverrideResolver
from country_redirect.application.services.redirect_url_builder import (
    RedirectUrlBuilder,
    append_marker_param,
    is_absolute_url,
)

__all__ = [
    "BannerResolver",
    "CountryMapResolver",
    "GeoLookupCache",
    "LinkBuilder",
    "OverrideResolver",
    "RedirectUrlBuilder",
    "append_marker_param",
    "is_absolute_url",
    "normalize_ip_address",
    "primary_language_subtag",
]
