"""Link domain model."""

from pydantic import BaseModel, ConfigDict


class Link(BaseModel):
    """Manual-switch navigation entry for one configured site."""

    model_config = ConfigDict(frozen=True)

    site_name: str
    site_handle: str
    url: str
