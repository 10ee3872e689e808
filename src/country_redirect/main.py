"""ASGI entry point for the country redirect service."""

import contextlib
import logging
import sys
from collections.abc import AsyncIterator

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from country_redirect.adapters.cache import TTLKeyValueCache
from country_redirect.adapters.catalogue import StaticSiteCatalogue
from country_redirect.adapters.config import AppConfig, RedirectSettingsLoader, SiteCatalogueLoader
from country_redirect.adapters.detection import UserAgentCrawlerSignature
from country_redirect.adapters.geoip import MaxMindGeoDatabase
from country_redirect.adapters.redirect_logger import LoggingRedirectLog
from country_redirect.adapters.web import CountryRedirectMiddleware, build_request_context
from country_redirect.application import CountryRedirectService
from country_redirect.application.services import GeoLookupCache
from country_redirect.domain.ports import ElementCatalogue, GeoDatabase

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)

API_PREFIX = "/_country-redirect"


def create_service(
    config: AppConfig,
    geo_database: GeoDatabase | None = None,
    elements: ElementCatalogue | None = None,
) -> tuple[CountryRedirectService, StaticSiteCatalogue]:
    """Wire the redirect service and site catalogue from configuration."""
    settings = RedirectSettingsLoader.load(config)
    sites = StaticSiteCatalogue(SiteCatalogueLoader.load(config))
    logger.info(
        f"Loaded {len(sites.get_all_sites())} site(s) and "
        f"{len(settings.country_map)} country map entr(y/ies)"
    )

    if geo_database is None and config.geoip_database_path:
        geo_database = MaxMindGeoDatabase(config.geoip_database_path)
    if geo_database is None:
        logger.warning("No GeoIP database configured, visitors will resolve to the '*' entry")

    geo_lookup = GeoLookupCache(
        geo_database,
        TTLKeyValueCache(
            max_entries=config.geo_cache_max_entries, ttl_seconds=config.geo_cache_ttl_seconds
        ),
        namespace=settings.cache_namespace,
        timeout_seconds=config.geo_lookup_timeout_seconds,
    )

    service = CountryRedirectService(
        settings,
        geo_lookup,
        sites,
        UserAgentCrawlerSignature(),
        elements=elements,
        redirect_log=LoggingRedirectLog(),
    )
    return service, sites


def create_app(
    config: AppConfig | None = None,
    geo_database: GeoDatabase | None = None,
    elements: ElementCatalogue | None = None,
) -> Starlette:
    """Create the Starlette application with the redirect middleware and JSON endpoints."""
    config = config or AppConfig()
    logging.getLogger().setLevel(config.log_level)
    service, sites = create_service(config, geo_database=geo_database, elements=elements)

    async def links(request: Request) -> JSONResponse:
        return JSONResponse([link.model_dump() for link in service.get_links()])

    async def banner(request: Request) -> JSONResponse:
        context = build_request_context(request, service.settings, sites, elements)
        result = service.get_banner(
            context,
            current_url=request.query_params.get("url"),
            current_site_handle=request.query_params.get("site"),
        )
        response = JSONResponse(result.model_dump() if result else None)
        context.cookies.apply_to(response)  # type: ignore[attr-defined]
        return response

    async def country(request: Request) -> JSONResponse:
        context = build_request_context(request, service.settings, sites, elements)
        response = JSONResponse(
            {
                "country_code": service.get_country_code(context),
                "country_name": service.get_country_name(context),
            }
        )
        context.cookies.apply_to(response)  # type: ignore[attr-defined]
        return response

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        yield
        service.close()

    return Starlette(
        routes=[
            Route(f"{API_PREFIX}/links", links),
            Route(f"{API_PREFIX}/banner", banner),
            Route(f"{API_PREFIX}/country", country),
        ],
        middleware=[
            Middleware(
                CountryRedirectMiddleware,
                service=service,
                sites=sites,
                elements=elements,
                exclude_prefixes=(API_PREFIX,),
            )
        ],
        lifespan=lifespan,
    )


def main() -> None:
    """Run the service with uvicorn."""
    config = AppConfig()
    try:
        app = create_app(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
