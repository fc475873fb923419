"""Thread-safe in-memory store and cache DAOs.

These satisfy the same ports as the Redis-backed DAOs and are meant for local
runs and tests, where standing up Redis is overkill.

Classes:
    URLDocumentMemoryDAO:
        Dictionary-backed URLDocumentBaseDAO.
    MemoryCacheDAO:
        Dictionary-backed CacheBaseDAO with per-entry TTL.

Example:
    >>> store = URLDocumentMemoryDAO()
    >>> cache = MemoryCacheDAO(default_ttl=60)
    >>> store.put(document).get_document(document.url_key) == document
    True
    >>> cache.cache('27qMi57J', document.to_json()).get_cached_value('27qMi57J')
    '{"base10Id": ...}'
"""

import logging
import threading
import time

from tinyurl.models import URLDocument
from tinyurl.dao.base import CacheBaseDAO, URLDocumentBaseDAO
from tinyurl.dao.cache.constants import DEFAULT_CACHE_TTL
from tinyurl.dao.exceptions import CacheMissError, DocumentAlreadyExistsError, DocumentNotFoundError


logger = logging.getLogger(__name__)


class URLDocumentMemoryDAO(URLDocumentBaseDAO):
    """In-memory URL document store

    NOTE:
        - Unlike Redis, expired documents are not reaped; they stay until deleted.
    """

    def __init__(self):
        self._documents: dict[str, URLDocument] = {}
        self._lock = threading.Lock()

    def put(self, document: URLDocument, **kwargs) -> 'URLDocumentMemoryDAO':
        with self._lock:
            if document.url_key in self._documents:
                raise DocumentAlreadyExistsError(f"URL document with key '{document.url_key}' already exists.")
            self._documents[document.url_key] = document
        return self

    def get_document(self, url_key: str, **kwargs) -> URLDocument:
        with self._lock:
            try:
                return self._documents[url_key]
            except KeyError:
                raise DocumentNotFoundError(f"URL document with key '{url_key}' not found.") from None

    def delete(self, url_key: str, **kwargs) -> 'URLDocumentMemoryDAO':
        with self._lock:
            if self._documents.pop(url_key, None) is None:
                raise DocumentNotFoundError(f"URL document with key '{url_key}' not found.")
        return self

    def __contains__(self, url_key: str) -> bool:
        with self._lock:
            return url_key in self._documents


class MemoryCacheDAO(CacheBaseDAO):
    """In-memory key/value cache with per-entry TTL

    Attributes:
        default_ttl (int):
            TTL in seconds applied when cache() is called without one.
    """

    def __init__(self, default_ttl: int = DEFAULT_CACHE_TTL):
        self.default_ttl = default_ttl
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    def cache(self, key: str, value: str, ttl: int | None = None, **kwargs) -> 'MemoryCacheDAO':
        with self._lock:
            self._entries[key] = (value, time.time() + (ttl or self.default_ttl))
        return self

    def get_cached_value(self, key: str, **kwargs) -> str:
        with self._lock:
            value, expiry = self._entries.get(key, (None, 0.0))
            if value is None:
                raise CacheMissError(f"No cache entry for key '{key}'.")
            if time.time() >= expiry:
                del self._entries[key]
                logger.debug('Cache entry expired.', extra={'cacheKey': key})
                raise CacheMissError(f"No cache entry for key '{key}'.")
            return value

    def delete(self, key: str, **kwargs) -> 'MemoryCacheDAO':
        with self._lock:
            value, expiry = self._entries.pop(key, (None, 0.0))
        if value is None or time.time() >= expiry:
            raise CacheMissError(f"No cache entry for key '{key}'.")
        return self

    def __contains__(self, key: str) -> bool:
        try:
            self.get_cached_value(key)
        except CacheMissError:
            return False
        return True
