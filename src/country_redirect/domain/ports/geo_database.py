"""Geo database port."""

from typing import Protocol

from country_redirect.domain.models.country_record import CountryRecord


class GeoDatabase(Protocol):
    """Port for resolving an IP address to its country."""

    def lookup(self, ip: str) -> CountryRecord | None:
        """Look up the country for an IP address.

        Returns:
            The country record, or None if the address is not in the database.
        """
        ...
