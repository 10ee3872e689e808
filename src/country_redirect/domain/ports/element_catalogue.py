"""Element catalogue port."""

from typing import Protocol

from country_redirect.domain.models.content_element import ContentElement


class ElementCatalogue(Protocol):
    """Port for resolving content elements across sites."""

    def get_locale_variant(
        self, element_id: int, element_type: str, site_id: int
    ) -> ContentElement | None:
        """Get the variant of an element published in another site."""
        ...

    def find_element_by_url(self, url: str) -> ContentElement | None:
        """Get the element published at a URL, if any."""
        ...
