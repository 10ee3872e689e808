"""Domain layer - core redirect models and ports."""

from country_redirect.domain.models import (
    Banner,
    CountryRecord,
    Link,
    RedirectRequest,
    RedirectSettings,
    RequestContext,
    Site,
)
from country_redirect.domain.ports import (
    CookieStore,
    ElementCatalogue,
    GeoDatabase,
    KeyValueCache,
    SiteCatalogue,
)

__all__ = [
    "Banner",
    "CookieStore",
    "CountryRecord",
    "ElementCatalogue",
    "GeoDatabase",
    "KeyValueCache",
    "Link",
    "RedirectRequest",
    "RedirectSettings",
    "RequestContext",
    "Site",
    "SiteCatalogue",
]
