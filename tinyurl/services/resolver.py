"""Cache-aside resolution of URL keys

Reads check the cache first and fall back to the authoritative store. The cache
is repopulated only after a genuine miss: when the cache itself is degraded,
reads are served from the store without hammering the cache with writes.

Classes:
    CacheAsideResolver:
        Resolve URL keys into URL documents.

Example:
    >>> resolver = CacheAsideResolver(store=store, cache=cache, counter=counter)
    >>> resolver.resolve('27qMi57J').long_url
    'https://example.com/page'
"""

import logging

from tinyurl.models import URLDocument
from tinyurl.dao.base import CacheBaseDAO, URLDocumentBaseDAO
from tinyurl.dao.exceptions import CacheError, CacheMissError, DataStoreError, DocumentNotFoundError
from tinyurl.exceptions import MalformedDocumentError
from tinyurl.services.metrics import UsageCounter


logger = logging.getLogger(__name__)


class CacheAsideResolver:
    def __init__(
        self,
        store: URLDocumentBaseDAO,
        cache: CacheBaseDAO,
        counter: UsageCounter,
        cache_ttl: int | None = None,
    ):
        self.store = store
        self.cache = cache
        self.counter = counter
        self.cache_ttl = cache_ttl

    def resolve(self, url_key: str) -> URLDocument:
        """Resolve a URL key into its URL document

        Procedure:
        - Step 1: Count the lookup (best-effort)
        - Step 2: Look the URL key up in the cache
        - Step 3: Serve a cached copy, unless it has expired
        - Step 4: Otherwise fetch from the store and repopulate the cache after a genuine miss

        Args:
            url_key (str):
                URL key of the requested tiny URL.

        Returns:
            URLDocument: the resolved document.

        Raises:
            DocumentNotFoundError:
                If the store has no such document, or the document has expired.
                A cached copy past its expire time is proof enough; the store
                is not consulted in that case.
            DataStoreError:
                If the store fails.
        """
        # 1- Count the lookup
        try:
            self.counter.increment(url_key)
        except Exception:
            logger.warning('Failed to increment usage counter.', exc_info=True, extra={'urlKey': url_key})

        # 2- Look the URL key up in the cache
        candidate, repopulate = self._check_cache(url_key)

        # 3- Serve the cached copy
        if candidate is not None:
            if candidate.is_expired():
                self._evict(url_key)
                raise DocumentNotFoundError(f"URL document with key '{url_key}' has expired.")
            logger.debug('Cache hit.', extra={'urlKey': url_key})
            return candidate

        # 4- Fall back to the store
        try:
            document = self.store.get_document(url_key)
        except DocumentNotFoundError:
            logger.info('URL document not found in store.', extra={'urlKey': url_key})
            raise
        except DataStoreError:
            logger.error('Failed to get URL document from store.', exc_info=True, extra={'urlKey': url_key})
            raise

        # Documents outlive their expire time in stores without TTL support
        if document.is_expired():
            logger.info('URL document in store has expired.', extra={'urlKey': url_key})
            raise DocumentNotFoundError(f"URL document with key '{url_key}' has expired.")

        if repopulate:
            try:
                self.cache.cache(url_key, document.to_json(), self.cache_ttl)
            except CacheError:
                logger.warning('Failed to repopulate cache.', exc_info=True, extra={'urlKey': url_key})

        return document

    def _check_cache(self, url_key: str) -> tuple[URLDocument | None, bool]:
        """Return (cached document or None, whether to repopulate the cache after a store read)"""
        try:
            cached = self.cache.get_cached_value(url_key)
        except CacheMissError:
            logger.debug('Cache miss.', extra={'urlKey': url_key})
            return None, True
        except CacheError:
            logger.warning('Failed to get cached URL document.', exc_info=True, extra={'urlKey': url_key})
            return None, False

        try:
            return URLDocument.from_json(cached), False
        except MalformedDocumentError:
            logger.warning('Failed to decode cached URL document.', exc_info=True, extra={'urlKey': url_key})
            return None, False

    def _evict(self, url_key: str) -> None:
        try:
            self.cache.delete(url_key)
        except CacheMissError:
            pass
        except CacheError:
            logger.error('Failed to delete expired URL document from cache.', exc_info=True, extra={'urlKey': url_key})
