"""Attaches the visitor's country code to the request."""

from country_redirect.application.services.override_resolver import OverrideResolver
from country_redirect.domain.models import CheckResult, RedirectRequest


class GeoCheck:
    """Resolves the country code; never halts."""

    name = "geo"

    def __init__(self, override_resolver: OverrideResolver) -> None:
        self._override_resolver = override_resolver

    def execute(self, request: RedirectRequest) -> CheckResult:
        request.country_code = self._override_resolver.resolve_country_code(request.context)
        return CheckResult.CONTINUE
