"""Redirect checks and the pipeline that runs them."""

from country_redirect.application.checks.bot_check import BotCheck
from country_redirect.application.checks.element_check import ElementCheck
from country_redirect.application.checks.enabled_check import EnabledCheck
from country_redirect.application.checks.geo_check import GeoCheck
from country_redirect.application.checks.ignored_segment_check import IgnoredSegmentCheck
from country_redirect.application.checks.language_check import LanguageCheck
from country_redirect.application.checks.pipeline import CheckPipeline, build_check_pipeline
from country_redirect.application.checks.site_check import SiteCheck

__all__ = [
    "BotCheck",
    "CheckPipeline",
    "ElementCheck",
    "EnabledCheck",
    "GeoCheck",
    "IgnoredSegmentCheck",
    "LanguageCheck",
    "SiteCheck",
    "build_check_pipeline",
]
