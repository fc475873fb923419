from tinyurl.dao.cache.cache_key_schema import CacheKeySchema
from tinyurl.dao.cache.url_cache_redis_dao import URLCacheRedisDAO

__all__ = [
    'CacheKeySchema',
    'URLCacheRedisDAO',
]
