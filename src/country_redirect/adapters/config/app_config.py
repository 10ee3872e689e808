"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Scalar settings come from ``COUNTRY_REDIRECT_*`` environment variables (or
    ``.env``). The country map, banners, ignored segments and sites live in the
    TOML file named by ``config_file``; its ``[redirect]`` section overrides the
    scalar settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="COUNTRY_REDIRECT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root log level")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with country map, banners and sites",
    )

    # Redirect behaviour
    enabled: bool = Field(default=True, description="Enable automatic redirects")
    enable_logging: bool = Field(default=False, description="Record performed redirects")
    override_ip: str | None = Field(
        default=None, description="Use this IP instead of the client's (for testing)"
    )
    cookie_name: str = Field(default="country_redirect", description="Country cookie name")
    cookie_name_banner: str = Field(
        default="country_redirect_banner", description="Banner-dismissal cookie name"
    )
    cookie_lifetime_days: int = Field(default=30, description="Lifetime of written cookies")
    override_locale_param: str = Field(
        default="selected-site", description="Query parameter selecting a site explicitly"
    )
    redirected_param: str | None = Field(
        default="redirected", description="Query parameter marking automatic redirects"
    )
    banner_param: str | None = Field(
        default="from-banner", description="Query parameter marking banner click-throughs"
    )

    # GeoIP configuration
    geoip_database_path: str | None = Field(
        default=None, description="Path to a MaxMind GeoIP2/GeoLite2 country or city database"
    )
    geo_lookup_timeout_seconds: float | None = Field(
        default=2.0, description="Timeout for a single GeoIP lookup in seconds"
    )
    geo_cache_ttl_seconds: int = Field(
        default=86400, description="How long IP lookups stay cached in seconds"
    )
    geo_cache_max_entries: int = Field(
        default=10000, description="Maximum number of cached IP lookups"
    )
    cache_namespace: str = Field(default="country-redirect", description="Cache key prefix")

    @field_validator("cookie_lifetime_days", "geo_cache_ttl_seconds", "geo_cache_max_entries")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate counts and durations are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("geo_lookup_timeout_seconds")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate the lookup timeout is positive when set."""
        if v is not None and v <= 0:
            raise ValueError("geo_lookup_timeout_seconds must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    def load_toml_data(self) -> dict[str, Any]:
        """Load and parse the TOML file.

        Returns an empty dict when no config file is configured.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            return tomllib.load(f)

    def get_redirect_section(self) -> dict[str, Any]:
        """Return the ``[redirect]`` table of the TOML file."""
        section = self.load_toml_data().get("redirect", {})
        if not isinstance(section, dict):
            raise ValueError("TOML config 'redirect' must be a table")
        return section

    def get_country_map_config(self) -> dict[str, Any]:
        """Return the ``[country_map]`` table of the TOML file."""
        country_map = self.load_toml_data().get("country_map", {})
        if not isinstance(country_map, dict):
            raise ValueError("TOML config 'country_map' must be a table")
        return country_map

    def get_banners_config(self) -> dict[str, Any]:
        """Return the ``[banners]`` table of the TOML file."""
        banners = self.load_toml_data().get("banners", {})
        if not isinstance(banners, dict):
            raise ValueError("TOML config 'banners' must be a table")
        return banners

    def get_sites_config(self) -> list[dict[str, Any]]:
        """Return the ``[[sites]]`` entries of the TOML file."""
        sites = self.load_toml_data().get("sites", [])
        if not isinstance(sites, list):
            raise ValueError("TOML config 'sites' must be a list")
        return sites
