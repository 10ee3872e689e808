"""Utilities for extracting redirect inputs from Starlette requests."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.requests import Request

from country_redirect.adapters.web.cookie_store import RequestCookieStore
from country_redirect.application.services import normalize_ip_address
from country_redirect.domain.models import RedirectSettings, RequestContext

if TYPE_CHECKING:
    from country_redirect.adapters.catalogue.static_site_catalogue import StaticSiteCatalogue
    from country_redirect.domain.ports import ElementCatalogue

logger = logging.getLogger(__name__)


def extract_client_ip(request: Request) -> str | None:
    """Extract client IP address from request, supporting X-Forwarded-For header.

    Handles X-Forwarded-For header which may contain multiple IPs (client, proxy1, proxy2).
    Returns the first (original client) IP in the chain, or None when unknown.
    """
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    if request.client and request.client.host:
        return request.client.host

    logger.debug("Could not determine client IP")
    return None


def parse_accept_language(header: str | None) -> list[str]:
    """Parse an Accept-Language header into language tags, most preferred first.

    Entries with equal quality keep their header order; ``*`` and ``q=0``
    entries are dropped.
    """
    if not header:
        return []

    weighted: list[tuple[float, int, str]] = []
    for position, part in enumerate(header.split(",")):
        pieces = [p.strip() for p in part.split(";")]
        tag = pieces[0]
        if not tag or tag == "*":
            continue

        quality = 1.0
        for param in pieces[1:]:
            if param.startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0
        if quality <= 0:
            continue

        weighted.append((-quality, position, tag))

    return [tag for _, _, tag in sorted(weighted)]


def build_request_context(
    request: Request,
    settings: RedirectSettings,
    sites: StaticSiteCatalogue,
    elements: ElementCatalogue | None = None,
) -> RequestContext:
    """Build the per-request redirect context for a Starlette request."""
    current_url = str(request.url)
    current_site = sites.site_for_url(current_url)
    current_element = elements.find_element_by_url(current_url) if elements else None

    return RequestContext(
        cookies=RequestCookieStore(request.cookies),
        current_site_handle=current_site.handle if current_site else "",
        current_uri=request.url.path,
        current_url=current_url,
        ip_address=normalize_ip_address(extract_client_ip(request), settings.override_ip),
        user_agent=request.headers.get("user-agent", ""),
        browser_languages=tuple(parse_accept_language(request.headers.get("accept-language"))),
        query_params=dict(request.query_params),
        current_element=current_element,
    )
