"""GeoIP2 database reader adapter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import geoip2.database
from geoip2.errors import AddressNotFoundError

from country_redirect.domain.models import CountryRecord

logger = logging.getLogger(__name__)


class MaxMindGeoDatabase:
    """Reads countries from a MaxMind GeoIP2/GeoLite2 database file.

    Both country and city databases are supported; the database type recorded
    in the file decides which reader method is used.
    """

    def __init__(self, db_path: Path | str, reader: Any | None = None) -> None:
        """Open the database.

        Args:
            db_path: Path to the ``.mmdb`` file.
            reader: Pre-built reader, mainly for tests.

        Raises:
            FileNotFoundError: If the database file doesn't exist.
        """
        self._db_path = Path(db_path)
        if reader is None:
            if not self._db_path.exists():
                raise FileNotFoundError(f"GeoIP database not found: {self._db_path}")
            reader = geoip2.database.Reader(str(self._db_path))
            logger.info(f"GeoIP database loaded: {self._db_path}")
        self._reader = reader
        try:
            database_type = str(reader.metadata().database_type)
        except AttributeError:
            database_type = ""
        self._use_city = "City" in database_type

    def lookup(self, ip: str) -> CountryRecord | None:
        """Look up the country for an IP address, or None if it is not in the database."""
        try:
            response = self._reader.city(ip) if self._use_city else self._reader.country(ip)
        except AddressNotFoundError:
            logger.debug(f"IP {ip} not found in GeoIP database")
            return None
        except ValueError:
            logger.debug(f"Invalid IP address for GeoIP lookup: {ip}")
            return None

        iso_code = response.country.iso_code
        if not iso_code:
            return None
        return CountryRecord(iso_code=iso_code, name=response.country.name)

    def close(self) -> None:
        """Close the database reader."""
        self._reader.close()

    def __enter__(self) -> MaxMindGeoDatabase:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()
