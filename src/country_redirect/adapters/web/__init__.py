"""Web adapters (Starlette)."""

from country_redirect.adapters.web.client_info import (
    build_request_context,
    extract_client_ip,
    parse_accept_language,
)
from country_redirect.adapters.web.cookie_store import PendingCookie, RequestCookieStore
from country_redirect.adapters.web.redirect_middleware import CountryRedirectMiddleware

__all__ = [
    "CountryRedirectMiddleware",
    "PendingCookie",
    "RequestCookieStore",
    "build_request_context",
    "extract_client_ip",
    "parse_accept_language",
]
