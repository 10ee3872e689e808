"""Site catalogue loader."""

from typing import Any

from country_redirect.adapters.config.app_config import AppConfig
from country_redirect.domain.models import Site


class SiteCatalogueLoader:
    """Loads site definitions from app config."""

    @staticmethod
    def load_site_from_data(site_data: dict[str, Any], position: int) -> Site | None:
        """Load a single site from a ``[[sites]]`` entry."""
        if not isinstance(site_data, dict):
            return None

        handle = site_data.get("handle")
        if not handle:
            return None

        site_id = site_data.get("id", position)
        try:
            site_id = int(site_id)
        except (ValueError, TypeError):
            site_id = position

        base_url = site_data.get("base_url") or None
        language = site_data.get("language") or None

        return Site(
            id=site_id,
            name=str(site_data.get("name") or handle),
            handle=str(handle),
            base_url=str(base_url) if base_url else None,
            language=str(language) if language else None,
        )

    @staticmethod
    def load(config: AppConfig) -> list[Site]:
        """Load all sites, keeping their configured order.

        Raises ValueError if site handles are not unique.
        """
        sites: list[Site] = []
        for position, site_data in enumerate(config.get_sites_config(), start=1):
            site = SiteCatalogueLoader.load_site_from_data(site_data, position)
            if site is not None:
                sites.append(site)

        handles = [site.handle for site in sites]
        if len(handles) != len(set(handles)):
            duplicates = {h for h in handles if handles.count(h) > 1}
            raise ValueError(f"Site handles must be unique. Duplicate handles found: {duplicates}")

        return sites
