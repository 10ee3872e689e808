"""CLI helpers for checking a country redirect configuration."""

import argparse
import json
import sys
from typing import Literal

from country_redirect.adapters.catalogue import StaticSiteCatalogue
from country_redirect.adapters.config import AppConfig, RedirectSettingsLoader, SiteCatalogueLoader
from country_redirect.adapters.geoip import MaxMindGeoDatabase
from country_redirect.application.services import CountryMapResolver, LinkBuilder
from country_redirect.domain.models import CountryRecord, Link


def resolve_country(
    config: AppConfig, country_code: str, languages: list[str]
) -> str | Literal[False]:
    """Resolve a country code to its site handle or URL."""
    settings = RedirectSettingsLoader.load(config)
    return CountryMapResolver(settings.country_map).resolve_site_handle(country_code, languages)


def lookup_ip(database_path: str, ip: str) -> CountryRecord | None:
    """Look up the country of an IP address in a GeoIP database."""
    with MaxMindGeoDatabase(database_path) as database:
        return database.lookup(ip)


def list_links(config: AppConfig) -> list[Link]:
    """List the manual-switch links for all configured sites."""
    settings = RedirectSettingsLoader.load(config)
    sites = StaticSiteCatalogue(SiteCatalogueLoader.load(config))
    return LinkBuilder(sites, settings.override_locale_param).get_links()


def _split_languages(value: str | None) -> list[str]:
    if not value:
        return []
    return [lang.strip() for lang in value.split(",") if lang.strip()]


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Inspect country redirect configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Which site does a Swiss visitor preferring French get?
  country-redirect resolve CH --languages fr-CH,de --config config.toml

  # Which country is an IP address in?
  country-redirect lookup 81.2.69.142 --database GeoLite2-Country.mmdb

  # Show the manual-switch links
  country-redirect links --config config.toml
        """,
    )
    parser.add_argument("--config", help="Path to TOML configuration file")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    resolve_parser = subparsers.add_parser("resolve", help="Resolve a country code to a site")
    resolve_parser.add_argument("country_code", help="ISO country code (e.g., DE) or '*'")
    resolve_parser.add_argument(
        "--languages", help="Comma-separated browser languages in preference order"
    )

    lookup_parser = subparsers.add_parser("lookup", help="Look up the country of an IP address")
    lookup_parser.add_argument("ip", help="IPv4 or IPv6 address")
    lookup_parser.add_argument("--database", help="Path to GeoIP2/GeoLite2 database file")

    links_parser = subparsers.add_parser("links", help="List manual-switch links")
    links_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        config = AppConfig(config_file=args.config) if args.config else AppConfig()

        if args.command == "resolve":
            result = resolve_country(config, args.country_code, _split_languages(args.languages))
            if result is False:
                print(f"No redirect target for '{args.country_code}'", file=sys.stderr)
                sys.exit(1)
            print(result)

        elif args.command == "lookup":
            database_path = args.database or config.geoip_database_path
            if not database_path:
                print("No GeoIP database given (use --database)", file=sys.stderr)
                sys.exit(1)
            record = lookup_ip(database_path, args.ip)
            if record is None:
                print(f"No country found for {args.ip}", file=sys.stderr)
                sys.exit(1)
            print(f"{record.iso_code} {record.name or ''}".rstrip())

        elif args.command == "links":
            links = list_links(config)
            if args.json:
                data = [link.model_dump() for link in links]
                print(json.dumps(data, indent=2, ensure_ascii=False))
            else:
                for link in links:
                    print(f"{link.site_name} ({link.site_handle}): {link.url}")

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
