import functools
from typing import Any
from collections.abc import Callable

import redis

from tinyurl.dao.exceptions import DAOError, DataStoreError


__all__ = ['redis_error_handler', 'handle_redis_connection_error']


def _location(client: Any) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def redis_error_handler[F: Callable[..., Any]](error_cls: type[DAOError]) -> Callable[[F], F]:
    """Build a decorator translating Redis client errors into DAO exceptions

    Args:
        error_cls (type[DAOError]):
            DAO exception raised in place of redis.exceptions.RedisError.

    Returns:
        Callable[[F], F]:
            Decorator for DAO methods which access `self.redis`.

    Example:
        >>> handle_cache_error = redis_error_handler(CacheError)
        >>> @handle_cache_error
        ... def get_value(self, key):
        ...     return self.redis.get(key)
    """

    def decorator(method: F) -> F:
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
                raise error_cls(f"Can't connect to Redis at {_location(self.redis)}.") from e
            except redis.exceptions.RedisError as e:
                raise error_cls(f'Redis at {_location(self.redis)} failed: {e}') from e

        return wrapper

    return decorator


handle_redis_connection_error = redis_error_handler(DataStoreError)