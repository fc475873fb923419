"""Unit tests for URLCacheRedisDAO.

Test coverage includes:
    1. Construction
       - No healthcheck by default, so an unreachable cache isn't fatal.
    2. cache()
       - Values are SET with the given or the default TTL.
    3. get_cached_value()
       - Absent keys raise CacheMissError; bytes are decoded.
    4. delete()
       - Absent keys raise CacheMissError.
    5. Error handling
       - Connection errors become CacheError, never DataStoreError.
"""

import pytest
import redis

from tinyurl.dao.cache import CacheKeySchema, URLCacheRedisDAO
from tinyurl.dao.cache.constants import DEFAULT_CACHE_TTL, WARM_TTL
from tinyurl.dao.exceptions import CacheError, CacheMissError, DataStoreError


class TestURLCacheRedisDAO:
    dao: URLCacheRedisDAO
    redis_client: redis.Redis

    @pytest.fixture(autouse=True)
    def setup(self, redis_client: redis.Redis, app_prefix: str):
        self.redis_client = redis_client
        self.dao = URLCacheRedisDAO(redis_client=redis_client, prefix=app_prefix)

    # -------------------------------
    # 1. Construction
    # -------------------------------

    def test_construction_skips_healthcheck(self):
        self.redis_client.ping.assert_not_called()
        assert isinstance(self.dao.keys, CacheKeySchema)
        assert self.dao.default_ttl == DEFAULT_CACHE_TTL == WARM_TTL

    def test_construction_with_healthcheck(self, redis_client):
        redis_client.ping.side_effect = redis.exceptions.ConnectionError('down')

        with pytest.raises(CacheError):
            URLCacheRedisDAO(redis_client=redis_client, healthcheck=True)

    # -------------------------------
    # 2. cache()
    # -------------------------------

    def test_cache_with_default_ttl(self):
        assert self.dao.cache('27qMi57J', '{"urlKey": "27qMi57J"}') is self.dao

        self.redis_client.set.assert_called_once_with(
            'cache:testapp:test:urls:27qMi57J',
            '{"urlKey": "27qMi57J"}',
            ex=DEFAULT_CACHE_TTL,
        )

    def test_cache_with_custom_ttl(self, redis_client):
        dao = URLCacheRedisDAO(redis_client=redis_client, default_ttl=60)

        dao.cache('27qMi57J', 'value', ttl=5)
        dao.cache('4PjAHW6Y', 'value')

        assert redis_client.set.call_args_list[0].kwargs['ex'] == 5
        assert redis_client.set.call_args_list[1].kwargs['ex'] == 60

    # -------------------------------
    # 3. get_cached_value()
    # -------------------------------

    def test_get_cached_value(self):
        self.redis_client.get.return_value = 'value'

        assert self.dao.get_cached_value('27qMi57J') == 'value'
        self.redis_client.get.assert_called_once_with('cache:testapp:test:urls:27qMi57J')

    def test_get_cached_value_decodes_bytes(self):
        self.redis_client.get.return_value = b'value'

        assert self.dao.get_cached_value('27qMi57J') == 'value'

    def test_get_cached_value_miss(self):
        with pytest.raises(CacheMissError, match="No cache entry for key '27qMi57J'."):
            self.dao.get_cached_value('27qMi57J')

    def test_cache_miss_is_a_cache_error(self):
        assert issubclass(CacheMissError, CacheError)

    # -------------------------------
    # 4. delete()
    # -------------------------------

    def test_delete(self):
        self.redis_client.delete.return_value = 1

        assert self.dao.delete('27qMi57J') is self.dao
        self.redis_client.delete.assert_called_once_with('cache:testapp:test:urls:27qMi57J')

    def test_delete_miss(self):
        self.redis_client.delete.return_value = 0

        with pytest.raises(CacheMissError):
            self.dao.delete('27qMi57J')

    # -------------------------------
    # 5. Error handling
    # -------------------------------

    @pytest.mark.parametrize('method, args', [('cache', ('k', 'v')), ('get_cached_value', ('k',)), ('delete', ('k',))])
    def test_connection_errors_become_cache_errors(self, method, args):
        error = redis.exceptions.TimeoutError('Timeout reading from socket')
        self.redis_client.set.side_effect = error
        self.redis_client.get.side_effect = error
        self.redis_client.delete.side_effect = error

        with pytest.raises(CacheError, match="Can't connect to Redis at cache.test:6379/1.") as exc_info:
            getattr(self.dao, method)(*args)

        assert not isinstance(exc_info.value, DataStoreError)
