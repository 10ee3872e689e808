"""Tests for the country redirect service facade."""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any
from unittest.mock import MagicMock

import pytest

from country_redirect.adapters.catalogue import InMemoryElementCatalogue, StaticSiteCatalogue
from country_redirect.adapters.detection import UserAgentCrawlerSignature
from country_redirect.application import CountryRedirectService
from country_redirect.application.services import GeoLookupCache
from country_redirect.domain.models import (
    ContentElement,
    CountryRecord,
    RedirectSettings,
    RequestContext,
    Site,
)

BROWSER_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
GOOGLEBOT_UA = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"

FIXED_NOW = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

GERMAN_IP = "203.0.113.10"
CANADIAN_IP = "198.51.100.7"
US_IP = "192.0.2.1"
SWISS_IP = "203.0.113.20"
CHINESE_IP = "203.0.113.30"

DEFAULT_RECORDS = {
    GERMAN_IP: CountryRecord(iso_code="DE", name="Germany"),
    CANADIAN_IP: CountryRecord(iso_code="CA", name="Canada"),
    US_IP: CountryRecord(iso_code="US", name="United States"),
    SWISS_IP: CountryRecord(iso_code="CH", name="Switzerland"),
    CHINESE_IP: CountryRecord(iso_code="CN", name="China"),
}

SITES = [
    Site(id=1, name="International", handle="intl", base_url="https://example.com/", language="en"),
    Site(id=2, name="United States", handle="en-us", base_url="https://example.com/us/"),
    Site(id=3, name="Deutschland", handle="de", base_url="https://example.com/de/"),
    Site(id=4, name="Schweiz", handle="ch-de", base_url="https://example.com/ch-de/"),
    Site(id=5, name="Suisse", handle="ch-fr", base_url="https://example.com/ch-fr/"),
    Site(id=6, name="Draft", handle="draft", base_url=None),
]

COUNTRY_MAP: dict[str, Any] = {
    "us": "en-us",
    "de": "de",
    "ch": {"de": "ch-de", "fr": "ch-fr"},
    "cn": "https://example.cn/",
    "*": "intl",
}


class MockGeoDatabase:
    """Geo database answering from a fixed table."""

    def __init__(
        self,
        records: Mapping[str, CountryRecord] | None = None,
        error: Exception | None = None,
    ) -> None:
        self.records = dict(DEFAULT_RECORDS if records is None else records)
        self.error = error
        self.calls: list[str] = []

    def lookup(self, ip: str) -> CountryRecord | None:
        self.calls.append(ip)
        if self.error is not None:
            raise self.error
        return self.records.get(ip)


class DictCache:
    """Key/value cache recording its traffic."""

    def __init__(self) -> None:
        self.data: dict[str, Any] = {}
        self.get_calls: list[str] = []
        self.set_calls: list[str] = []

    def get(self, key: str) -> Any | None:
        self.get_calls.append(key)
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.set_calls.append(key)
        self.data[key] = value


class MockCookieStore:
    """Cookie store recording writes and removals."""

    def __init__(self, cookies: Mapping[str, str] | None = None) -> None:
        self.cookies = dict(cookies or {})
        self.writes: list[tuple[str, str, datetime]] = []
        self.cleared: list[str] = []

    def get(self, name: str) -> str | None:
        return self.cookies.get(name)

    def set(self, name: str, value: str, expires_at: datetime) -> None:
        self.cookies[name] = value
        self.writes.append((name, value, expires_at))

    def clear(self, name: str) -> None:
        self.cookies.pop(name, None)
        self.cleared.append(name)


def make_settings(**overrides: Any) -> RedirectSettings:
    """Create redirect settings with the test country map."""
    values: dict[str, Any] = {"country_map": COUNTRY_MAP}
    values.update(overrides)
    return RedirectSettings(**values)


def make_context(
    ip: str | None = GERMAN_IP,
    current_site_handle: str = "intl",
    uri: str = "/news",
    languages: tuple[str, ...] = (),
    query: Mapping[str, str] | None = None,
    cookies: MockCookieStore | None = None,
    user_agent: str = BROWSER_UA,
    element: ContentElement | None = None,
) -> RequestContext:
    """Create a request context for a browser visitor."""
    return RequestContext(
        cookies=cookies if cookies is not None else MockCookieStore(),
        current_site_handle=current_site_handle,
        current_uri=uri,
        current_url=f"https://example.com{uri}",
        ip_address=ip,
        user_agent=user_agent,
        browser_languages=languages,
        query_params=dict(query or {}),
        current_element=element,
    )


def make_service(
    settings: RedirectSettings | None = None,
    database: MockGeoDatabase | None = None,
    sites: list[Site] | None = None,
    elements: InMemoryElementCatalogue | None = None,
    redirect_log: Any = None,
    cache: DictCache | None = None,
) -> CountryRedirectService:
    """Create a redirect service over in-memory collaborators."""
    geo_lookup = GeoLookupCache(
        database if database is not None else MockGeoDatabase(),
        cache if cache is not None else DictCache(),
        timeout_seconds=None,
    )
    return CountryRedirectService(
        settings or make_settings(),
        geo_lookup,
        StaticSiteCatalogue(SITES if sites is None else sites),
        UserAgentCrawlerSignature(),
        elements=elements,
        redirect_log=redirect_log,
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def service() -> CountryRedirectService:
    return make_service()


class TestOnRequest:
    """Tests for the per-request redirect decision."""

    def test_when_german_visitor_on_international_site_then_redirects_to_german_site(
        self, service: CountryRedirectService
    ) -> None:
        """Given a German visitor on the international site, when deciding, then redirects."""
        outcome = service.on_request(make_context(ip=GERMAN_IP))

        assert outcome.redirect_to == "https://example.com/de/?redirected=✓"
        assert outcome.should_set_banner_cookie is False

    def test_when_visitor_already_on_country_site_then_no_redirect(
        self, service: CountryRedirectService
    ) -> None:
        """Given a German visitor on the German site, when deciding, then stays."""
        outcome = service.on_request(make_context(ip=GERMAN_IP, current_site_handle="de"))

        assert outcome.redirect_to is None

    def test_when_country_unknown_then_uses_wildcard_site(
        self, service: CountryRedirectService
    ) -> None:
        """Given a visitor without usable IP on the German site, then goes to the wildcard site."""
        outcome = service.on_request(make_context(ip=None, current_site_handle="de"))

        assert outcome.redirect_to == "https://example.com/?redirected=✓"

    def test_when_country_maps_to_url_then_redirects_verbatim_and_clears_cookie(
        self, service: CountryRedirectService
    ) -> None:
        """Given a country mapped to an absolute URL, then redirects there, forgetting it."""
        cookies = MockCookieStore()

        outcome = service.on_request(make_context(ip=CHINESE_IP, cookies=cookies))

        assert outcome.redirect_to == "https://example.cn/"
        assert "country_redirect" in cookies.cleared
        assert cookies.get("country_redirect") is None

    def test_when_swiss_visitor_prefers_french_then_redirects_to_french_swiss_site(
        self, service: CountryRedirectService
    ) -> None:
        """Given a Swiss visitor preferring French, then the French Swiss site wins."""
        outcome = service.on_request(make_context(ip=SWISS_IP, languages=("fr-CH", "de")))

        assert outcome.redirect_to == "https://example.com/ch-fr/?redirected=✓"

    def test_when_crawler_then_no_redirect_and_no_cookie(
        self, service: CountryRedirectService
    ) -> None:
        """Given a crawler, when deciding, then nothing is redirected or persisted."""
        cookies = MockCookieStore()

        outcome = service.on_request(make_context(user_agent=GOOGLEBOT_UA, cookies=cookies))

        assert outcome.redirect_to is None
        assert cookies.writes == []

    def test_when_redirects_disabled_then_no_redirect(self) -> None:
        """Given redirects switched off, when deciding, then stays."""
        service = make_service(settings=make_settings(enabled=False))

        outcome = service.on_request(make_context())

        assert outcome.redirect_to is None

    def test_when_uri_contains_ignored_segment_then_no_redirect(self) -> None:
        """Given an ignored segment in the URI, when deciding, then stays."""
        service = make_service(settings=make_settings(ignored_segments=["/admin"]))

        outcome = service.on_request(make_context(uri="/en/admin/login"))

        assert outcome.redirect_to is None

    def test_when_element_has_locale_variant_then_redirects_to_variant(self) -> None:
        """Given the viewed entry exists on the German site, then redirects to that entry."""
        current = ContentElement(id=10, type="entry", site_id=1, url="https://example.com/launch")
        german = ContentElement(
            id=10, type="entry", site_id=3, url="https://example.com/de/start"
        )
        service = make_service(elements=InMemoryElementCatalogue([current, german]))

        outcome = service.on_request(make_context(element=current))

        assert outcome.redirect_to == "https://example.com/de/start?redirected=✓"

    def test_when_arriving_from_banner_then_sets_banner_cookie(
        self, service: CountryRedirectService
    ) -> None:
        """Given the banner marker in the query, then the dismissal cookie is set for 30 days."""
        cookies = MockCookieStore()

        outcome = service.on_request(
            make_context(current_site_handle="de", query={"from-banner": "✓"}, cookies=cookies)
        )

        assert outcome.should_set_banner_cookie is True
        assert cookies.get("country_redirect_banner") == "1"
        banner_write = [w for w in cookies.writes if w[0] == "country_redirect_banner"]
        assert banner_write[0][2] == FIXED_NOW + timedelta(days=30)

    def test_when_logging_enabled_then_records_redirect(self) -> None:
        """Given redirect logging enabled, when redirecting, then the redirect is recorded."""
        redirect_log = MagicMock()
        service = make_service(
            settings=make_settings(enable_logging=True), redirect_log=redirect_log
        )

        outcome = service.on_request(make_context())

        redirect_log.log_redirect.assert_called_once_with(outcome.redirect_to)

    def test_when_logging_disabled_then_does_not_record_redirect(self) -> None:
        """Given redirect logging disabled, when redirecting, then nothing is recorded."""
        redirect_log = MagicMock()
        service = make_service(redirect_log=redirect_log)

        service.on_request(make_context())

        redirect_log.log_redirect.assert_not_called()


class TestCountryCode:
    """Tests for country code queries through the facade."""

    def test_when_override_matches_locale_then_later_calls_skip_geo_lookup(self) -> None:
        """Given an override for a configured site, then the country sticks without geo lookup."""
        database = MockGeoDatabase()
        service = make_service(database=database)
        cookies = MockCookieStore()

        first = service.get_country_code(
            make_context(query={"selected-site": "de"}, cookies=cookies)
        )
        second = service.get_country_code(make_context(cookies=cookies))

        assert first == "de"
        assert second == "de"
        assert cookies.get("country_redirect") == "de"
        assert database.calls == []

    def test_when_no_cookie_then_geolocates_and_persists(
        self, service: CountryRedirectService
    ) -> None:
        """Given no cookie, when asking for the country, then it is geolocated and stored."""
        cookies = MockCookieStore()

        country_code = service.get_country_code(make_context(ip=CANADIAN_IP, cookies=cookies))

        assert country_code == "CA"
        assert cookies.writes == [("country_redirect", "CA", FIXED_NOW + timedelta(days=30))]

    def test_country_name_comes_from_geo_record(self, service: CountryRedirectService) -> None:
        """Given a geolocated visitor, when asking for the country name, then it is returned."""
        assert service.get_country_name(make_context(ip=CANADIAN_IP)) == "Canada"
        assert service.get_country_name(make_context(ip=None)) is None


class TestLinks:
    """Tests for manual-switch links."""

    def test_links_cover_every_site_with_override_parameter(
        self, service: CountryRedirectService
    ) -> None:
        """Given configured sites, when listing links, then each carries the override parameter."""
        links = service.get_links()

        assert [link.site_handle for link in links] == [site.handle for site in SITES]
        assert links[0].site_name == "International"
        assert links[0].url == "https://example.com/?selected-site=intl"
        assert links[2].url == "https://example.com/de/?selected-site=de"

    def test_link_for_site_without_url_is_relative(self, service: CountryRedirectService) -> None:
        """Given a site without base URL, when listing links, then only the query remains."""
        draft = service.get_links()[-1]

        assert draft.url == "?selected-site=draft"


class TestStateQueries:
    """Tests for was_redirected / was_redirected_from_banner / was_overridden."""

    def test_markers_are_read_from_query_parameters(
        self, service: CountryRedirectService
    ) -> None:
        """Given marker parameters, when querying state, then each is detected."""
        context = make_context(query={"redirected": "✓", "selected-site": "de"})

        assert service.was_redirected(context) is True
        assert service.was_overridden(context) is True
        assert service.was_redirected_from_banner(context) is False

    def test_when_marker_param_unconfigured_then_never_detected(self) -> None:
        """Given no redirected parameter name, when querying state, then returns False."""
        service = make_service(settings=make_settings(redirected_param=None))

        assert service.was_redirected(make_context(query={"redirected": "✓"})) is False
