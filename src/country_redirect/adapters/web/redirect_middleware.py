"""Country redirect middleware for Starlette."""

import logging
from collections.abc import Awaitable, Callable, Sequence

from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from country_redirect.adapters.catalogue.static_site_catalogue import StaticSiteCatalogue
from country_redirect.adapters.web.client_info import build_request_context
from country_redirect.application import CountryRedirectService
from country_redirect.domain.ports import ElementCatalogue

logger = logging.getLogger(__name__)


class CountryRedirectMiddleware(BaseHTTPMiddleware):
    """Redirects visitors to their country's site before the app handles the request."""

    def __init__(
        self,
        app: Callable,
        service: CountryRedirectService,
        sites: StaticSiteCatalogue,
        elements: ElementCatalogue | None = None,
        status_code: int = 302,
        exclude_prefixes: Sequence[str] = (),
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            service: Redirect service shared by all requests.
            sites: Catalogue used to find the site being visited.
            elements: Optional catalogue used to find the element being viewed.
            status_code: HTTP status for redirects.
            exclude_prefixes: Paths starting with any of these are passed through untouched.
        """
        super().__init__(app)
        self.service = service
        self.sites = sites
        self.elements = elements
        self.status_code = status_code
        self.exclude_prefixes = tuple(exclude_prefixes)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Redirect the visitor or pass the request on, then apply cookie changes."""
        if request.url.path.startswith(self.exclude_prefixes):
            return await call_next(request)

        context = build_request_context(request, self.service.settings, self.sites, self.elements)

        # Geo lookups block, keep them off the event loop
        outcome = await run_in_threadpool(self.service.on_request, context)

        request.state.country_redirect = self.service
        request.state.country_redirect_context = context

        response: Response
        if outcome.redirect_to:
            response = RedirectResponse(outcome.redirect_to, status_code=self.status_code)
        else:
            response = await call_next(request)

        context.cookies.apply_to(response)  # type: ignore[attr-defined]
        return response
