"""Internal protocols shared between application services and adapters."""

from country_redirect.domain.contracts.redirect_check import RedirectCheck
from country_redirect.domain.contracts.redirect_log import RedirectLog

__all__ = ["RedirectCheck", "RedirectLog"]
