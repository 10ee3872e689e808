"""Configuration adapters."""

from country_redirect.adapters.config.app_config import AppConfig
from country_redirect.adapters.config.redirect_settings_loader import RedirectSettingsLoader
from country_redirect.adapters.config.site_catalogue_loader import SiteCatalogueLoader

__all__ = ["AppConfig", "RedirectSettingsLoader", "SiteCatalogueLoader"]
