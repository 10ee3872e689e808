"""Site and element catalogue adapters."""

from country_redirect.adapters.catalogue.in_memory_element_catalogue import (
    InMemoryElementCatalogue,
)
from country_redirect.adapters.catalogue.static_site_catalogue import StaticSiteCatalogue

__all__ = ["InMemoryElementCatalogue", "StaticSiteCatalogue"]
