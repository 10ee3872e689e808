"""Destination URL construction for a resolved site handle."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Literal
from urllib.parse import urlsplit, urlunsplit

from country_redirect.domain.models import ContentElement, RequestContext, Site

if TYPE_CHECKING:
    from country_redirect.application.services.override_resolver import OverrideResolver
    from country_redirect.domain.ports import ElementCatalogue, SiteCatalogue

logger = logging.getLogger(__name__)

MARKER_VALUE = "✓"


def is_absolute_url(value: str | None) -> bool:
    """Check if a value is an absolute URL (scheme and host)."""
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parsed = urlsplit(value)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def append_marker_param(url: str, param: str | None) -> str:
    """Append ``param=✓`` to a URL, keeping any existing query string.

    A URL without a path gets ``/`` as its path first. Returns the URL unchanged
    when no parameter name is configured.
    """
    if not param:
        return url

    parts = urlsplit(url)
    marker = f"{param}={MARKER_VALUE}"
    query = f"{parts.query}&{marker}" if parts.query else marker
    return urlunsplit((parts.scheme, parts.netloc, parts.path or "/", query, parts.fragment))


class RedirectUrlBuilder:
    """Computes where a visitor should be sent for a target site handle."""

    def __init__(
        self,
        sites: SiteCatalogue,
        elements: ElementCatalogue | None,
        override_resolver: OverrideResolver,
        redirected_param: str | None,
    ) -> None:
        self._sites = sites
        self._elements = elements
        self._override_resolver = override_resolver
        self._redirected_param = redirected_param

    def build_url(
        self,
        context: RequestContext,
        site_handle: str | Literal[False] | None,
        current_url: str | None = None,
        current_site_handle: str | None = None,
        variant: ContentElement | None = None,
    ) -> str | Literal[False]:
        """Build the redirect URL for a site handle.

        Args:
            context: The current request.
            site_handle: Target site handle or absolute URL from the country map.
            current_url: URL being viewed, used to find the current element.
            current_site_handle: Site being viewed. Defaults to the request's site.
            variant: Already resolved locale variant of the current element.

        Returns:
            The destination URL, or False when the visitor should stay.
        """
        if not site_handle:
            return False

        if is_absolute_url(site_handle):
            # A URL target is a one-off destination, not a sticky country choice.
            self._override_resolver.remove_country_cookie(context)
            return site_handle

        current_site_handle = current_site_handle or context.current_site_handle
        site = self.target_site(site_handle, current_site_handle)
        if site is None or site.base_url is None:
            return False

        if variant is None:
            element = self._find_current_element(context, current_url)
            if element is not None:
                variant = self.locale_variant(element, site)

        if variant is not None and variant.url:
            return append_marker_param(variant.url, self._redirected_param)

        return append_marker_param(site.base_url, self._redirected_param)

    def target_site(self, site_handle: str, current_site_handle: str) -> Site | None:
        """Get the target site, or None for self-redirects and sites without a URL."""
        if site_handle == current_site_handle:
            return None
        site = self._sites.get_site_by_handle(site_handle)
        if site is None or not site.base_url:
            return None
        return site

    def locale_variant(self, element: ContentElement, site: Site) -> ContentElement | None:
        """Get the element's variant in the target site, if it has a URL."""
        if self._elements is None or not element.url:
            return None
        variant = self._elements.get_locale_variant(element.id, element.type, site.id)
        if variant is None or not variant.url:
            return None
        return variant

    def _find_current_element(
        self, context: RequestContext, current_url: str | None
    ) -> ContentElement | None:
        if current_url and self._elements is not None:
            element = self._elements.find_element_by_url(current_url)
            if element is not None:
                return element
        return context.current_element
