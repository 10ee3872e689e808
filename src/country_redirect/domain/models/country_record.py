"""Country record domain model."""

from pydantic import BaseModel, ConfigDict


class CountryRecord(BaseModel):
    """Country information resolved for an IP address."""

    model_config = ConfigDict(frozen=True)

    iso_code: str
    name: str | None = None
