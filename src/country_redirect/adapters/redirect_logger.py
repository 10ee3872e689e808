"""Redirect event log writing through the logging module."""

import logging
import threading

logger = logging.getLogger(__name__)


class LoggingRedirectLog:
    """Records performed redirects as INFO log lines.

    Redirects are logged from request worker threads; the counter is guarded.
    """

    def __init__(self) -> None:
        self._count = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        """Number of redirects recorded so far."""
        with self._lock:
            return self._count

    def log_redirect(self, url: str) -> None:
        """Record a redirect to the given URL."""
        with self._lock:
            self._count += 1
        logger.info(f"Redirected visitor to {url}")
