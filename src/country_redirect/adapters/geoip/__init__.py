"""GeoIP database adapters."""

from country_redirect.adapters.geoip.maxmind_geo_database import MaxMindGeoDatabase

__all__ = ["MaxMindGeoDatabase"]
