"""Adapters layer - external system integrations."""

from country_redirect.adapters.cache import TTLKeyValueCache
from country_redirect.adapters.catalogue import InMemoryElementCatalogue, StaticSiteCatalogue
from country_redirect.adapters.config import AppConfig
from country_redirect.adapters.detection import UserAgentCrawlerSignature
from country_redirect.adapters.geoip import MaxMindGeoDatabase
from country_redirect.adapters.redirect_logger import LoggingRedirectLog

__all__ = [
    "AppConfig",
    "InMemoryElementCatalogue",
    "LoggingRedirectLog",
    "MaxMindGeoDatabase",
    "StaticSiteCatalogue",
    "TTLKeyValueCache",
    "UserAgentCrawlerSignature",
]
