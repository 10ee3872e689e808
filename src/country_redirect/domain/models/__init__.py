"""Domain models for country redirects."""

from country_redirect.domain.models.banner import Banner
from country_redirect.domain.models.check_result import CheckResult
from country_redirect.domain.models.content_element import ContentElement
from country_redirect.domain.models.country_record import CountryRecord
from country_redirect.domain.models.ignore_segment import IgnoreSegment
from country_redirect.domain.models.link import Link
from country_redirect.domain.models.redirect_outcome import RedirectOutcome
from country_redirect.domain.models.redirect_settings import (
    WILDCARD,
    CountryMapValue,
    RedirectSettings,
)
from country_redirect.domain.models.request_context import RedirectRequest, RequestContext
from country_redirect.domain.models.site import Site

__all__ = [
    "WILDCARD",
    "Banner",
    "CheckResult",
    "ContentElement",
    "CountryMapValue",
    "CountryRecord",
    "IgnoreSegment",
    "Link",
    "RedirectOutcome",
    "RedirectRequest",
    "RedirectSettings",
    "RequestContext",
    "Site",
]
