"""Unit tests for the CacheKeySchema class in cache_key_schema.py.

Test coverage includes:
    1. Cached value keys
       - Keys always live under the 'cache' namespace.
    2. Custom prefix behavior
       - The custom prefix follows the 'cache' namespace.
    3. Invalid prefix types
       - Ensures improper prefix types raise TypeError.
"""

import pytest

from tinyurl.dao.cache.cache_key_schema import CacheKeySchema
from tinyurl.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. Cached value keys
# -------------------------------


def test_cached_value_key_without_prefix():
    assert CacheKeySchema().cached_value_key('27qMi57J') == 'cache:urls:27qMi57J'


def test_cache_keys_never_collide_with_store_keys():
    prefix = 'tinyurl:prod'
    assert CacheKeySchema(prefix).cached_value_key('27qMi57J') != RedisKeySchema(prefix).url_document_key('27qMi57J')


# -------------------------------
# 2. Custom prefix behavior
# -------------------------------


@pytest.mark.parametrize(
    'prefix, expected',
    [
        ('tinyurl:prod', 'cache:tinyurl:prod:urls:27qMi57J'),
        ('secret', 'cache:secret:urls:27qMi57J'),
        (None, 'cache:urls:27qMi57J'),
    ],
)
def test_key_prefixing(prefix, expected):
    assert CacheKeySchema(prefix=prefix).cached_value_key('27qMi57J') == expected


# -------------------------------
# 3. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, -1, 45.6, [], {}])
def test_invalid_prefix_type_raises_error(prefix):
    with pytest.raises(TypeError):
        CacheKeySchema(prefix=prefix)
