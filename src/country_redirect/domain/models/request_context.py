"""Per-request context and the mutable redirect decision."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from country_redirect.domain.models.content_element import ContentElement
from country_redirect.domain.models.site import Site

if TYPE_CHECKING:
    from country_redirect.domain.ports.cookie_store import CookieStore


@dataclass(frozen=True)
class RequestContext:
    """Inputs of one inbound request, scoped to that request.

    The cookie store is the session state for this request; it is never shared
    between requests.
    """

    cookies: CookieStore
    current_site_handle: str
    current_uri: str = "/"
    current_url: str | None = None
    ip_address: str | None = None
    user_agent: str = ""
    browser_languages: tuple[str, ...] = ()
    query_params: Mapping[str, str] = field(default_factory=dict)
    current_element: ContentElement | None = None


@dataclass
class RedirectRequest:
    """Mutable decision context filled in by the check pipeline."""

    context: RequestContext
    redirect_url: str | None = None
    country_code: str | None = None
    site_handle: str | None = None
    target_site: Site | None = None
    matched_element: ContentElement | None = None
    halted_by: str | None = None

    @property
    def ip_address(self) -> str | None:
        return self.context.ip_address

    @property
    def current_uri(self) -> str:
        return self.context.current_uri

    @property
    def halted(self) -> bool:
        return self.halted_by is not None
