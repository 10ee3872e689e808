"""Site catalogue port."""

from typing import Protocol

from country_redirect.domain.models.site import Site


class SiteCatalogue(Protocol):
    """Port for retrieving the configured sites."""

    def get_all_sites(self) -> list[Site]:
        """Get all sites in their configured order."""
        ...

    def get_site_by_handle(self, handle: str) -> Site | None:
        """Get a site by its handle."""
        ...
