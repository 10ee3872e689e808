"""Application layer - redirect use cases."""

from country_redirect.application.country_redirect_service import CountryRedirectService

__all__ = ["CountryRedirectService"]
