from tinyurl.dao.redis.redis_key_schema import RedisKeySchema
from tinyurl.dao.redis.mixins import RedisClientMixin
from tinyurl.dao.redis.url_document_redis_dao import URLDocumentRedisDAO


__all__ = [
    'RedisKeySchema',
    'RedisClientMixin',
    'URLDocumentRedisDAO',
]
