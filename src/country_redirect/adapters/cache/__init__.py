"""Cache adapters."""

from country_redirect.adapters.cache.ttl_key_value_cache import TTLKeyValueCache

__all__ = ["TTLKeyValueCache"]
