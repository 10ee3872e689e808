"""Ports (interfaces) for the ports-and-adapters architecture."""

from country_redirect.domain.ports.cookie_store import CookieStore
from country_redirect.domain.ports.crawler_signature import CrawlerSignature
from country_redirect.domain.ports.element_catalogue import ElementCatalogue
from country_redirect.domain.ports.geo_database import GeoDatabase
from country_redirect.domain.ports.key_value_cache import KeyValueCache
from country_redirect.domain.ports.site_catalogue import SiteCatalogue

__all__ = [
    "CookieStore",
    "CrawlerSignature",
    "ElementCatalogue",
    "GeoDatabase",
    "KeyValueCache",
    "SiteCatalogue",
]
