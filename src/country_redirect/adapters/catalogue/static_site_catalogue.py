"""Site catalogue backed by the configured site list."""

from collections.abc import Iterable

from country_redirect.domain.models import Site


class StaticSiteCatalogue:
    """In-memory catalogue of configured sites."""

    def __init__(self, sites: Iterable[Site]) -> None:
        self._sites = list(sites)
        self._by_handle = {site.handle: site for site in self._sites}

    def get_all_sites(self) -> list[Site]:
        return list(self._sites)

    def get_site_by_handle(self, handle: str) -> Site | None:
        return self._by_handle.get(handle)

    def site_for_url(self, url: str) -> Site | None:
        """Get the site whose base URL is the longest prefix of a URL.

        Returns None when no base URL matches, e.g. an `http://` request URL
        behind a TLS-terminating proxy that does not forward the original scheme.
        """
        best: Site | None = None
        best_length = -1
        for site in self._sites:
            if not site.base_url:
                continue
            prefix = site.base_url.rstrip("/")
            matches = url == prefix or url.startswith((prefix + "/", prefix + "?"))
            if matches and len(prefix) > best_length:
                best = site
                best_length = len(prefix)
        return best
