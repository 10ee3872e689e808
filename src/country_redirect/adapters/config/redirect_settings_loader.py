"""Redirect settings loader."""

from typing import Any

from country_redirect.adapters.config.app_config import AppConfig
from country_redirect.domain.models import IgnoreSegment, RedirectSettings

# [redirect] keys that override the matching AppConfig field
_SCALAR_KEYS = (
    "enabled",
    "enable_logging",
    "override_ip",
    "cookie_name",
    "cookie_name_banner",
    "cookie_lifetime_days",
    "override_locale_param",
    "redirected_param",
    "banner_param",
    "cache_namespace",
)


class RedirectSettingsLoader:
    """Loads immutable redirect settings from app config."""

    @staticmethod
    def load_country_map(data: dict[str, Any]) -> dict[str, str | dict[str, str]]:
        """Validate country map entries: a site handle/URL or a language table."""
        country_map: dict[str, str | dict[str, str]] = {}
        for country_code, value in data.items():
            if isinstance(value, str):
                country_map[country_code] = value
            elif isinstance(value, dict):
                if not all(isinstance(v, str) for v in value.values()):
                    raise ValueError(
                        f"Country map languages for '{country_code}' must map to site handles"
                    )
                country_map[country_code] = dict(value)
            else:
                raise ValueError(
                    f"Country map entry for '{country_code}' must be a string or a table"
                )
        return country_map

    @staticmethod
    def load_ignored_segments(data: Any) -> tuple[IgnoreSegment, ...]:
        """Load ignored segments, skipping empty strings."""
        if data is None:
            return ()
        if not isinstance(data, list):
            raise ValueError("TOML config 'ignored_segments' must be a list")
        return tuple(IgnoreSegment(raw_segment=str(item)) for item in data if str(item))

    @staticmethod
    def load(config: AppConfig) -> RedirectSettings:
        """Load redirect settings from app config and its TOML file."""
        section = config.get_redirect_section()

        values: dict[str, Any] = {key: getattr(config, key) for key in _SCALAR_KEYS}
        for key in _SCALAR_KEYS:
            if key in section:
                values[key] = section[key]

        banners = {str(k): str(v) for k, v in config.get_banners_config().items()}

        return RedirectSettings(
            country_map=RedirectSettingsLoader.load_country_map(config.get_country_map_config()),
            banners=banners,
            ignored_segments=RedirectSettingsLoader.load_ignored_segments(
                section.get("ignored_segments")
            ),
            **values,
        )
