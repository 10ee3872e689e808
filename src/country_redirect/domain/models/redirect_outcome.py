"""Redirect outcome domain model."""

from pydantic import BaseModel, ConfigDict


class RedirectOutcome(BaseModel):
    """What the host should do with an inbound request."""

    model_config = ConfigDict(frozen=True)

    redirect_to: str | None = None
    should_set_banner_cookie: bool = False
