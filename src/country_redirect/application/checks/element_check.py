"""Prefers the locale variant of the element being viewed."""

from country_redirect.application.services.redirect_url_builder import RedirectUrlBuilder
from country_redirect.domain.models import CheckResult, RedirectRequest


class ElementCheck:
    """Stores the current element's variant in the target site, if any."""

    name = "element"

    def __init__(self, url_builder: RedirectUrlBuilder) -> None:
        self._url_builder = url_builder

    def execute(self, request: RedirectRequest) -> CheckResult:
        element = request.context.current_element
        if element is not None and request.target_site is not None:
            request.matched_element = self._url_builder.locale_variant(
                element, request.target_site
            )
        return CheckResult.CONTINUE
