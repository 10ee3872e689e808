"""Halts when redirects are switched off."""

from country_redirect.domain.models import CheckResult, RedirectRequest


class EnabledCheck:
    """Plugin-wide redirect toggle."""

    name = "enabled"

    def __init__(self, enabled: bool) -> None:
        self._enabled = enabled

    def execute(self, request: RedirectRequest) -> CheckResult:
        return CheckResult.CONTINUE if self._enabled else CheckResult.HALT
