"""Abstract base class for cache data access objects (DAOs).

This class establishes the cache port: a key/value cache with TTL support that
holds serialized URL documents. The cache is a disposable projection of the
store, so implementations signal failures with CacheError and absence with
CacheMissError, and callers route around both.
"""

from abc import ABC, abstractmethod


class CacheBaseDAO(ABC):
    """Interface for key/value cache data access objects (DAOs).

    Methods:
        cache(key: str, value: str, ttl: int | None = None, **kwargs) -> CacheBaseDAO:
            Store a serialized value under key for ttl seconds.
            Raises CacheError on connection or write failure.

        get_cached_value(key: str, **kwargs) -> str:
            Return the serialized value stored under key.
            Raises CacheMissError if the key is absent.
            Raises CacheError on connection or read failure.

        delete(key: str, **kwargs) -> CacheBaseDAO:
            Remove key from the cache.
            Raises CacheMissError if the key is absent.
            Raises CacheError on connection or write failure.

    NOTE:
        - A ttl of None means "use the implementation's default TTL", never
          "no expiry". Cache entries must always be allowed to vanish.
    """

    @abstractmethod
    def cache(self, key: str, value: str, ttl: int | None = None, **kwargs) -> 'CacheBaseDAO':
        pass

    @abstractmethod
    def get_cached_value(self, key: str, **kwargs) -> str:
        pass

    @abstractmethod
    def delete(self, key: str, **kwargs) -> 'CacheBaseDAO':
        pass
