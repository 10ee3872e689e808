"""Redirect settings domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from country_redirect.domain.models.ignore_segment import IgnoreSegment

# A country map value is a site handle, an absolute URL, or a language -> site handle mapping.
CountryMapValue = str | dict[str, str]

WILDCARD = "*"


class RedirectSettings(BaseModel):
    """Immutable redirect configuration passed into every component."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = True
    country_map: dict[str, CountryMapValue] = Field(default_factory=dict)
    banners: dict[str, str] = Field(default_factory=dict)
    ignored_segments: tuple[IgnoreSegment, ...] = ()

    cookie_name: str = "country_redirect"
    cookie_name_banner: str = "country_redirect_banner"
    cookie_lifetime_days: int = 30

    override_locale_param: str = "selected-site"
    redirected_param: str | None = "redirected"
    banner_param: str | None = "from-banner"

    override_ip: str | None = None
    enable_logging: bool = False

    cache_namespace: str = "country-redirect"

    @field_validator("country_map", mode="before")
    @classmethod
    def normalize_country_map(cls, v: Any) -> Any:
        """Lowercase country codes and nested language codes."""
        if not isinstance(v, dict):
            return v
        normalized: dict[str, Any] = {}
        for country_code, value in v.items():
            if isinstance(value, dict):
                value = {str(lang).lower(): handle for lang, handle in value.items()}
            normalized[str(country_code).lower()] = value
        return normalized

    @field_validator("ignored_segments", mode="before")
    @classmethod
    def coerce_ignored_segments(cls, v: Any) -> Any:
        """Accept plain strings for ignored segments."""
        if isinstance(v, (list, tuple)):
            return tuple(
                IgnoreSegment(raw_segment=item) if isinstance(item, str) else item for item in v
            )
        return v
