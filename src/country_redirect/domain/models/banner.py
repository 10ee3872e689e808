"""Banner domain model."""

from pydantic import BaseModel, ConfigDict


class Banner(BaseModel):
    """Informational banner offering a manual switch to another site."""

    model_config = ConfigDict(frozen=True)

    text: str
    url: str
    country_name: str | None = None
    site_handle: str
    site_name: str | None = None
