"""Memoized IP -> country lookups.

Lookups go through a shared key/value cache keyed by ``"<namespace>-<ip>"``.
Only successful lookups are cached; failures, timeouts and unknown addresses
degrade to "no country" and are retried on the next request.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import TYPE_CHECKING

from country_redirect.application.services.ip_address import normalize_ip_address
from country_redirect.domain.models import WILDCARD, CountryRecord

if TYPE_CHECKING:
    from country_redirect.domain.ports import GeoDatabase, KeyValueCache

logger = logging.getLogger(__name__)


class GeoLookupCache:
    """Caches country records returned by a geo database."""

    def __init__(
        self,
        database: GeoDatabase | None,
        cache: KeyValueCache,
        namespace: str = "country-redirect",
        timeout_seconds: float | None = 2.0,
    ) -> None:
        """Initialize the lookup cache.

        Args:
            database: Geo database to query on a cache miss. None disables lookups.
            cache: Key/value store shared between requests.
            namespace: Prefix for cache keys.
            timeout_seconds: Upper bound for a single database lookup. None waits indefinitely.
        """
        self._database = database
        self._cache = cache
        self._namespace = namespace
        self._timeout_seconds = timeout_seconds
        self._executor: ThreadPoolExecutor | None = None
        self._executor_lock = threading.Lock()

    def cache_key(self, ip: str) -> str:
        """Build the cache key for an IP address."""
        return f"{self._namespace}-{ip}"

    def country_code_for_ip(self, ip: str | None) -> str:
        """Get the ISO country code for an IP address, or ``"*"`` when unknown."""
        record = self.country_record_for_ip(ip)
        if record is None or not record.iso_code:
            return WILDCARD
        return record.iso_code

    def country_record_for_ip(self, ip: str | None) -> CountryRecord | None:
        """Get the country record for an IP address, or None when unknown."""
        address = normalize_ip_address(ip)
        if address is None:
            return None

        key = self.cache_key(address)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        record = self._lookup(address)
        if record is not None:
            self._cache.set(key, record)
        return record

    def close(self) -> None:
        """Release the lookup worker thread, if one was started."""
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=False)
                self._executor = None

    def _lookup(self, ip: str) -> CountryRecord | None:
        if self._database is None:
            return None

        try:
            if self._timeout_seconds is None:
                return self._database.lookup(ip)
            future = self._get_executor().submit(self._database.lookup, ip)
            return future.result(timeout=self._timeout_seconds)
        except FuturesTimeoutError:
            logger.warning(f"GeoIP lookup for {ip} timed out after {self._timeout_seconds}s")
            return None
        except Exception as e:
            logger.warning(f"GeoIP lookup failed for {ip}: {e}")
            return None

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=4, thread_name_prefix="geo-lookup"
                )
            return self._executor
