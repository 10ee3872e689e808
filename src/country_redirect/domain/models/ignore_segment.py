"""Ignored URI segment domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IgnoreSegment:
    """A configured substring that exempts a request URI from redirect checks.

    Matching is plain substring containment anywhere in the URI; no path-segment
    or wildcard semantics are applied.
    """

    raw_segment: str

    def matches(self, uri: str) -> bool:
        """Return True when the segment occurs anywhere in the URI."""
        if not self.raw_segment:
            return False
        return self.raw_segment in uri
