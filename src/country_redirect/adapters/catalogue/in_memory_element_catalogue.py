"""In-memory element catalogue."""

from collections.abc import Iterable

from country_redirect.domain.models import ContentElement


class InMemoryElementCatalogue:
    """Element catalogue holding every locale variant in memory.

    Variants of one piece of content share ``id`` and ``type`` and differ by
    ``site_id``.
    """

    def __init__(self, elements: Iterable[ContentElement] = ()) -> None:
        self._variants: dict[tuple[int, str, int], ContentElement] = {}
        self._by_url: dict[str, ContentElement] = {}
        for element in elements:
            self.add(element)

    def add(self, element: ContentElement) -> None:
        """Register an element variant."""
        self._variants[(element.id, element.type, element.site_id)] = element
        if element.url:
            self._by_url[element.url.rstrip("/")] = element

    def get_locale_variant(
        self, element_id: int, element_type: str, site_id: int
    ) -> ContentElement | None:
        return self._variants.get((element_id, element_type, site_id))

    def find_element_by_url(self, url: str) -> ContentElement | None:
        return self._by_url.get(url.split("?", 1)[0].rstrip("/"))
