"""Unit tests for the RedisKeySchema class in redis_key_schema.py.

Test coverage includes:

1. URL document key generation
   - Ensures url_document_key() generates correct Redis keys for a given URL key.

2. Prefix behavior
   - Confirms keys are prefixed only when a prefix is provided.

3. Invalid prefix types
   - Ensures improper prefix types raise TypeError.
"""

import pytest

from tinyurl.dao.redis.redis_key_schema import RedisKeySchema


# -------------------------------
# 1. URL document key generation
# -------------------------------


@pytest.mark.parametrize(
    'url_key, expected',
    [
        ('27qMi57J', 'urls:27qMi57J'),
        ('1', 'urls:1'),
    ],
)
def test_url_document_key(url_key, expected):
    keys = RedisKeySchema()
    assert keys.url_document_key(url_key) == expected


# -------------------------------
# 2. Prefix behavior
# -------------------------------


@pytest.mark.parametrize(
    'prefix, expected',
    [
        ('tinyurl:prod', 'tinyurl:prod:urls:27qMi57J'),
        ('secret', 'secret:urls:27qMi57J'),
        (None, 'urls:27qMi57J'),
    ],
)
def test_key_prefixing(prefix, expected):
    keys = RedisKeySchema(prefix=prefix)
    assert keys.url_document_key('27qMi57J') == expected


# -------------------------------
# 3. Invalid prefix types
# -------------------------------


@pytest.mark.parametrize('prefix', [123, -1, 45.6, [], {}])
def test_invalid_prefix_type_raises_error(prefix):
    with pytest.raises(TypeError):
        RedisKeySchema(prefix=prefix)
