"""Halts for request URIs containing an ignored segment."""

import logging
from collections.abc import Sequence

from country_redirect.domain.models import CheckResult, IgnoreSegment, RedirectRequest

logger = logging.getLogger(__name__)


class IgnoredSegmentCheck:
    """Exempts URIs that contain any configured segment as a substring."""

    name = "ignored_segment"

    def __init__(self, segments: Sequence[IgnoreSegment]) -> None:
        self._segments = tuple(segments)

    def execute(self, request: RedirectRequest) -> CheckResult:
        for segment in self._segments:
            if segment.matches(request.current_uri):
                logger.debug(f"URI {request.current_uri} ignored by '{segment.raw_segment}'")
                return CheckResult.HALT
        return CheckResult.CONTINUE
