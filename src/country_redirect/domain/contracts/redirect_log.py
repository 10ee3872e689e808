"""Protocol for recording performed redirects."""

from typing import Protocol


class RedirectLog(Protocol):
    """Records redirects that were sent to visitors."""

    def log_redirect(self, url: str) -> None:
        """Record a redirect to the given URL.

        Args:
            url: The destination the visitor was sent to.
        """
        ...
