"""Wire a TinyURLService from a function's configuration

The configuration section (see tinyurl.utils.config.load_config) looks like:

    {
        "store": {"host": "...", "port": 6379, "db": 0, "socket_timeout": 2.0},
        "cache": {"host": "...", "port": 6379, "db": 0, "socket_timeout": 0.5, "ttl": 86400}
    }

Every key except the cache "ttl" is a Redis connection parameter.
"""

import functools
from typing import Any

from tinyurl.dao.cache import URLCacheRedisDAO
from tinyurl.dao.redis import URLDocumentRedisDAO
from tinyurl.exceptions import BadConfigurationError
from tinyurl.services.metrics import PrometheusUsageCounter
from tinyurl.services.url_service import TinyURLService


@functools.cache
def usage_counter() -> PrometheusUsageCounter:
    """Return the process-wide usage counter (one per process, shared by all services)"""
    return PrometheusUsageCounter()


def build_url_service(app_config: dict[str, Any], prefix: str | None = None) -> TinyURLService:
    """Build a Redis-backed TinyURLService and register its usage counter

    Args:
        app_config (dict[str, Any]):
            Function configuration with 'store' and 'cache' sections.
        prefix (str | None):
            Namespace prefix for all Redis keys, e.g. 'tinyurl:prod'.

    Returns:
        TinyURLService: ready-to-use service.

    Raises:
        BadConfigurationError:
            If the 'store' or 'cache' section is missing.
        DataStoreError:
            If the store is unreachable.
    """
    try:
        store_config = dict(app_config['store'])
        cache_config = dict(app_config['cache'])
    except (KeyError, TypeError) as e:
        raise BadConfigurationError("Configuration must define 'store' and 'cache' sections.") from e

    cache_ttl = cache_config.pop('ttl', None)

    store = URLDocumentRedisDAO(**{f'redis_{k}': v for k, v in store_config.items()}, prefix=prefix)
    cache = URLCacheRedisDAO(**{f'redis_{k}': v for k, v in cache_config.items()}, prefix=prefix)

    service = TinyURLService(
        store=store,
        cache=cache,
        counter=usage_counter(),
        cache_ttl=int(cache_ttl) if cache_ttl is not None else None,
    )
    service.register_metric()
    return service
