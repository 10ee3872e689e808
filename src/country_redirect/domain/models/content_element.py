"""Content element domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContentElement:
    """A piece of content as published in one site."""

    id: int
    type: str
    site_id: int
    url: str | None = None
