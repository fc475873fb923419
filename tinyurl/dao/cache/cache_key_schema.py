from tinyurl.dao.redis.redis_key_schema import prefix_key


__all__ = ['CacheKeySchema']


class CacheKeySchema:
    """Provide standardized Redis keys for cached values.

    All keys live under the 'cache' namespace, optionally followed by a custom
    prefix, e.g. "cache:tinyurl:prod". Cache keys therefore never collide with
    store keys, even when both share a Redis database.

    NOTE: Yes, this class mirrors RedisKeySchema, but we don't want to spaghettify
    the caching layer with our Redis datastore backend.
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = f'cache:{prefix}' if prefix is not None else 'cache'

    @prefix_key
    def cached_value_key(self, key: str) -> str:
        return f'urls:{key}'
