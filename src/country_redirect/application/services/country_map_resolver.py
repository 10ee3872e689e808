"""Country code -> site handle resolution against the configured country map."""

import logging
from collections.abc import Mapping, Sequence
from typing import Literal

from country_redirect.domain.models import WILDCARD, CountryMapValue

logger = logging.getLogger(__name__)


def primary_language_subtag(language: str | None) -> str | None:
    """Return the lowercase primary subtag of a language tag (`fr` for `fr-CH`)."""
    if not language:
        return None
    tag = language.strip().lower().replace("_", "-")
    return tag.split("-", 1)[0] or None


def _language_candidates(language: str) -> list[str]:
    """Return lookup keys for a browser language tag, most specific first."""
    tag = language.strip().lower().replace("_", "-")
    if not tag:
        return []
    primary = tag.split("-", 1)[0]
    return [tag] if primary == tag else [tag, primary]


class CountryMapResolver:
    """Resolves country codes to site handles or absolute URLs."""

    def __init__(self, country_map: Mapping[str, CountryMapValue]) -> None:
        """Initialize with a country map whose keys are already lowercase."""
        self._country_map = country_map

    def resolve_site_handle(
        self, country_code: str | None, browser_languages: Sequence[str] = ()
    ) -> str | Literal[False]:
        """Resolve a country code to a site handle or absolute URL.

        Exact country entries win over the ``"*"`` wildcard. A nested language
        mapping is matched against the browser languages in preference order;
        when none of them matches, the wildcard is used instead.

        Returns:
            The site handle or URL, or False when there is no redirect target.
        """
        code = (country_code or "").lower()

        entry = self._country_map.get(code)
        if isinstance(entry, Mapping):
            matched = self._match_language(entry, browser_languages)
            if matched:
                return matched
            logger.debug(
                f"No browser language of {list(browser_languages)} mapped for country '{code}'"
            )
        elif entry:
            return entry

        fallback = self._country_map.get(WILDCARD)
        if isinstance(fallback, str) and fallback:
            return fallback

        return False

    def country_code_for_locale(self, locale: str) -> str | None:
        """Find the country whose map entry points at the given site handle.

        Every entry is scanned and the last match wins when several countries
        share the same site handle.
        """
        found: str | None = None
        for country_code, entry in self._country_map.items():
            if isinstance(entry, Mapping):
                if locale in entry.values():
                    found = country_code
            elif entry == locale:
                found = country_code
        return found

    @staticmethod
    def _match_language(
        languages: Mapping[str, str], browser_languages: Sequence[str]
    ) -> str | None:
        for language in browser_languages:
            for candidate in _language_candidates(language):
                handle = languages.get(candidate)
                if handle:
                    return handle
        return None
