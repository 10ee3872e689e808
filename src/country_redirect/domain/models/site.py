"""Site domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Site:
    """One locale/region variant of the published content."""

    id: int
    name: str
    handle: str
    base_url: str | None = None
    language: str | None = None  # e.g. "de-CH"
