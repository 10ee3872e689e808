"""Tests for the Starlette app, redirect middleware and JSON endpoints."""

from collections.abc import Iterator
from pathlib import Path

import httpx
import pytest
from starlette.requests import Request
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from country_redirect.adapters.config import AppConfig
from country_redirect.main import API_PREFIX, create_app
from tests.test_services import BROWSER_UA, CANADIAN_IP, GERMAN_IP, GOOGLEBOT_UA, MockGeoDatabase

EXAMPLE_CONFIG = Path(__file__).resolve().parent.parent / "config.example.toml"


def homepage(request: Request) -> PlainTextResponse:
    return PlainTextResponse(f"page {request.url.path}")


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_app(AppConfig(config_file=str(EXAMPLE_CONFIG)), geo_database=MockGeoDatabase())
    app.router.routes.append(Route("/{path:path}", homepage))
    with TestClient(
        app, base_url="https://example.com", headers={"User-Agent": BROWSER_UA}
    ) as test_client:
        yield test_client


def visit(client: TestClient, path: str, ip: str, **headers: str) -> httpx.Response:
    return client.get(path, headers={"X-Forwarded-For": ip, **headers}, follow_redirects=False)


def test_german_visitor_is_redirected_with_marker(client: TestClient) -> None:
    """Given a German visitor on the international site, then they are redirected."""
    response = visit(client, "/news", GERMAN_IP)

    assert response.status_code == 302
    assert response.headers["location"] == "https://example.com/de/?redirected=%E2%9C%93"
    assert "country_redirect=DE" in response.headers["set-cookie"]


def test_visitor_on_own_site_sees_page_and_gets_cookie(client: TestClient) -> None:
    """Given a German visitor on the German site, then the page is served."""
    response = visit(client, "/de/news", GERMAN_IP)

    assert response.status_code == 200
    assert response.text == "page /de/news"
    assert "country_redirect=DE" in response.headers["set-cookie"]


def test_crawler_is_never_redirected(client: TestClient) -> None:
    """Given a crawler, then the page is served without cookies."""
    response = visit(client, "/news", GERMAN_IP, **{"User-Agent": GOOGLEBOT_UA})

    assert response.status_code == 200
    assert "set-cookie" not in response.headers


def test_ignored_segment_is_never_redirected(client: TestClient) -> None:
    """Given an ignored URI, then the page is served."""
    response = visit(client, "/admin/login", GERMAN_IP)

    assert response.status_code == 200


def test_swiss_visitor_is_redirected_by_language(client: TestClient) -> None:
    """Given a Swiss visitor preferring Italian, then the Italian Swiss site is chosen."""
    response = visit(client, "/", "203.0.113.20", **{"Accept-Language": "it-CH,de;q=0.5"})

    assert response.headers["location"].startswith("https://example.com/ch-it/")


def test_country_mapped_to_url_redirects_verbatim(client: TestClient) -> None:
    """Given a country mapped to a URL, then the visitor is sent there unchanged."""
    response = visit(client, "/", "203.0.113.30")

    assert response.status_code == 302
    assert response.headers["location"] == "https://example.cn/"


def test_country_cookie_takes_precedence_over_ip(client: TestClient) -> None:
    """Given a country cookie, then the IP is not consulted."""
    response = visit(client, "/", GERMAN_IP, Cookie="country_redirect=US")

    assert response.headers["location"].startswith("https://example.com/us/")


def test_links_endpoint_lists_sites(client: TestClient) -> None:
    """Given configured sites, then the links endpoint lists them."""
    response = client.get(f"{API_PREFIX}/links")

    assert response.status_code == 200
    links = response.json()
    assert len(links) == 6
    assert links[2] == {
        "site_name": "Deutschland",
        "site_handle": "de",
        "url": "https://example.com/de/?selected-site=de",
    }


def test_banner_endpoint_offers_banner(client: TestClient) -> None:
    """Given a Canadian visitor on the German site, then the banner endpoint offers a switch."""
    response = client.get(
        f"{API_PREFIX}/banner",
        params={"url": "https://example.com/de/news", "site": "de"},
        headers={"X-Forwarded-For": CANADIAN_IP},
    )

    banner = response.json()
    assert banner["site_handle"] == "intl"
    assert banner["country_name"] == "Canada"
    assert banner["url"] == "https://example.com/?redirected=✓&from-banner=✓"


def test_banner_endpoint_returns_null_after_dismissal(client: TestClient) -> None:
    """Given the dismissal cookie, then the banner endpoint returns null."""
    response = client.get(
        f"{API_PREFIX}/banner",
        params={"site": "de"},
        headers={"X-Forwarded-For": CANADIAN_IP, "Cookie": "country_redirect_banner=1"},
    )

    assert response.json() is None


def test_country_endpoint_reports_country(client: TestClient) -> None:
    """Given a visitor, then the country endpoint reports code and name."""
    response = client.get(f"{API_PREFIX}/country", headers={"X-Forwarded-For": CANADIAN_IP})

    assert response.json() == {"country_code": "CA", "country_name": "Canada"}


def test_banner_click_through_sets_dismissal_cookie(client: TestClient) -> None:
    """Given the banner marker, then the dismissal cookie is set."""
    response = visit(client, "/de/?from-banner=%E2%9C%93", GERMAN_IP)

    assert response.status_code == 200
    assert "country_redirect_banner=1" in response.headers["set-cookie"]



def test_plain_http_request_behind_proxy_is_not_redirected() -> None:
    """Given an http:// request URL matching no https:// site, then the page is served."""
    app = create_app(AppConfig(config_file=str(EXAMPLE_CONFIG)), geo_database=MockGeoDatabase())
    app.router.routes.append(Route("/{path:path}", homepage))

    with TestClient(
        app, base_url="http://example.com", headers={"User-Agent": BROWSER_UA}
    ) as test_client:
        response = visit(test_client, "/de/news", GERMAN_IP)

    assert response.status_code == 200
    assert response.text == "page /de/news"
