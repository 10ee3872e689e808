"""Manual-switch links, one per configured site."""

from urllib.parse import urlencode

from country_redirect.domain.models import Link
from country_redirect.domain.ports import SiteCatalogue


class LinkBuilder:
    """Builds links that let a visitor pick a site explicitly."""

    def __init__(self, sites: SiteCatalogue, override_locale_param: str) -> None:
        self._sites = sites
        self._override_locale_param = override_locale_param

    def get_links(self) -> list[Link]:
        """Get one link per site carrying the override parameter."""
        links: list[Link] = []
        for site in self._sites.get_all_sites():
            base_url = (site.base_url or "").rstrip("?")
            query = urlencode({self._override_locale_param: site.handle})
            links.append(
                Link(site_name=site.name, site_handle=site.handle, url=f"{base_url}?{query}")
            )
        return links
