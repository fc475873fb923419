"""DAO for caching serialized URL documents in Redis

This module provides a Redis-backed implementation of CacheBaseDAO. Every entry
is written with a TTL so the cache never outgrows its role as a disposable
projection of the store.

Responsibilities:
    - SET / GET / DEL serialized values under '<cache prefix>:urls:<key>'
    - Distinguish a plain cache miss (CacheMissError) from a degraded cache (CacheError)

Classes:
    URLCacheRedisDAO:
        Concrete cache DAO backed by Redis. Uses RedisClientMixin to initialize
        the Redis client and assigns CacheKeySchema for key generation.

Example:
    >>> dao = URLCacheRedisDAO(redis_host='cache.internal', prefix='tinyurl:dev')
    >>> dao.cache('27qMi57J', document.to_json())
    <URLCacheRedisDAO>
    >>> dao.get_cached_value('27qMi57J')
    '{"base10Id": 2468135791013, "urlKey": "27qMi57J", ...}'
    >>> dao.delete('27qMi57J')
    <URLCacheRedisDAO>
"""

from beartype import beartype

from tinyurl.dao.base import CacheBaseDAO
from tinyurl.dao.cache.cache_key_schema import CacheKeySchema
from tinyurl.dao.cache.constants import DEFAULT_CACHE_TTL
from tinyurl.dao.redis.mixins import RedisClientMixin
from tinyurl.dao.redis.helpers import redis_error_handler
from tinyurl.dao.exceptions import CacheError, CacheMissError


handle_cache_error = redis_error_handler(CacheError)


class URLCacheRedisDAO(RedisClientMixin, CacheBaseDAO):
    """Redis-backed cache DAO for serialized URL documents

    Attributes (via mixins):
        redis (redis.Redis):
            Redis client used to communicate with the cache.
        keys (CacheKeySchema):
            Key schema helper for generating namespaced cache keys.
        default_ttl (int):
            TTL in seconds applied when cache() is called without one.

    NOTE:
        - The healthcheck is skipped by default: an unreachable cache must never
          prevent the service from serving requests out of the store.
    """

    healthcheck_error = CacheError
    key_schema = CacheKeySchema

    def __init__(self, *args, default_ttl: int = DEFAULT_CACHE_TTL, healthcheck: bool = False, **kwargs):
        super().__init__(*args, healthcheck=healthcheck, **kwargs)
        self.default_ttl = int(default_ttl)

    @handle_cache_error
    @beartype
    def cache(self, key: str, value: str, ttl: int | None = None, **kwargs) -> 'URLCacheRedisDAO':
        """SET value under key, expiring after ttl seconds (default_ttl if None)

        Raises:
            CacheError:
                If a Redis connectivity issue occurs.
        """
        self.redis.set(self.keys.cached_value_key(key), value, ex=ttl or self.default_ttl)
        return self

    @handle_cache_error
    @beartype
    def get_cached_value(self, key: str, **kwargs) -> str:
        """GET the value cached under key

        Raises:
            CacheMissError:
                If nothing is cached under key.
            CacheError:
                If a Redis connectivity issue occurs.
        """
        value = self.redis.get(self.keys.cached_value_key(key))
        if value is None:
            raise CacheMissError(f"No cache entry for key '{key}'.")
        return value.decode('utf-8') if isinstance(value, bytes) else value

    @handle_cache_error
    @beartype
    def delete(self, key: str, **kwargs) -> 'URLCacheRedisDAO':
        """DEL the value cached under key

        Raises:
            CacheMissError:
                If nothing is cached under key.
            CacheError:
                If a Redis connectivity issue occurs.
        """
        if not self.redis.delete(self.keys.cached_value_key(key)):
            raise CacheMissError(f"No cache entry for key '{key}'.")
        return self
