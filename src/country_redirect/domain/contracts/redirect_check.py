"""Protocol for a single step of the redirect check pipeline."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from country_redirect.domain.models.check_result import CheckResult
    from country_redirect.domain.models.request_context import RedirectRequest


class RedirectCheck(Protocol):
    """One short-circuiting check over the redirect decision context."""

    name: str

    def execute(self, request: "RedirectRequest") -> "CheckResult":
        """Run the check, possibly mutating the request.

        Args:
            request: The decision context for the current request.

        Returns:
            CheckResult.CONTINUE to run the next check, CheckResult.HALT to stop the chain.
        """
        ...
