"""Tiny URL creation and deletion

Writes go to the authoritative store first; the cache is only populated (or
cleared) afterwards, on a best-effort basis. A store write that succeeded is
never rolled back because of the cache.

Functions:
    form_tiny_url(long_url: str, live_forever: bool, now: datetime | None = None) -> URLDocument:
        Build a fresh URL document with a newly drawn key.

Classes:
    MutationService:
        generate() and delete() tiny URLs.
"""

import logging
from datetime import datetime, timedelta, UTC

from tinyurl.models import URLDocument
from tinyurl.dao.base import CacheBaseDAO, URLDocumentBaseDAO
from tinyurl.dao.exceptions import CacheError, CacheMissError, DataStoreError, DocumentAlreadyExistsError
from tinyurl.services.metrics import UsageCounter
from tinyurl.utils.constants import TTL, Generation
from tinyurl.utils.shortener import encode, generate_base10_id


logger = logging.getLogger(__name__)


def form_tiny_url(long_url: str, live_forever: bool, now: datetime | None = None) -> URLDocument:
    """Build a URL document for long_url with a fresh key

    Documents expire a year from now, or 250 years from now (practically never)
    when live_forever is set.

    Example:
        >>> now = datetime(2025, 10, 15, tzinfo=UTC)
        >>> form_tiny_url('https://abc.io', live_forever=False, now=now).expire_time
        datetime.datetime(2026, 10, 15, 0, 0, tzinfo=datetime.timezone.utc)
    """
    now = now or datetime.now(UTC)
    base10_id = generate_base10_id(now)
    lifetime = TTL.FOREVER if live_forever else TTL.ONE_YEAR
    return URLDocument(
        base10_id=base10_id,
        url_key=encode(base10_id),
        long_url=long_url,
        expire_time=now + timedelta(seconds=lifetime),
        live_forever=live_forever,
    )


class MutationService:
    """Create and delete tiny URLs

    Attributes:
        store (URLDocumentBaseDAO):
            Authoritative URL document store.
        cache (CacheBaseDAO):
            Cache of serialized URL documents.
        counter (UsageCounter):
            Per-key usage counter, cleared on deletion.
        cache_ttl (int | None):
            TTL for cached documents. None defers to the cache's default.
        max_attempts (int):
            Key draws attempted before a key collision is surfaced.
    """

    def __init__(
        self,
        store: URLDocumentBaseDAO,
        cache: CacheBaseDAO,
        counter: UsageCounter,
        cache_ttl: int | None = None,
        max_attempts: int = Generation.MAX_ATTEMPTS,
    ):
        self.store = store
        self.cache = cache
        self.counter = counter
        self.cache_ttl = cache_ttl
        self.max_attempts = max_attempts

    def generate(self, long_url: str, live_forever: bool = False) -> URLDocument:
        """Generate and persist a tiny URL for long_url

        Procedure:
        - Step 1: Draw a key and build the URL document
        - Step 2: Persist it in the store (redraw the key if it's already taken)
        - Step 3: Cache it (best-effort)

        Args:
            long_url (str):
                Validated http(s) URL to shorten.
            live_forever (bool):
                If True, the tiny URL practically never expires.

        Returns:
            URLDocument: the persisted document, including its key and expire time.

        Raises:
            DataStoreError:
                If the store write fails. DocumentAlreadyExistsError (a subclass)
                if every drawn key was already taken.
        """
        for attempt in range(1, self.max_attempts + 1):
            # 1- Draw a key and build the URL document
            document = form_tiny_url(long_url, live_forever)

            # 2- Persist it in the store
            try:
                self.store.put(document)
            except DocumentAlreadyExistsError:
                logger.warning(
                    'URL key collision. Drawing a new key.',
                    extra={'urlKey': document.url_key, 'attempt': attempt},
                )
                if attempt == self.max_attempts:
                    raise
            except DataStoreError:
                logger.error('Failed to store URL document.', exc_info=True, extra={'longUrl': long_url})
                raise
            else:
                break

        logger.info(
            'Added URL document to store.',
            extra={'urlKey': document.url_key, 'base10Id': document.base10_id, 'liveForever': live_forever},
        )

        # 3- Cache it
        try:
            self.cache.cache(document.url_key, document.to_json(), self.cache_ttl)
        except CacheError:
            logger.warning('Failed to cache URL document.', exc_info=True, extra={'urlKey': document.url_key})

        return document

    def delete(self, url_key: str) -> None:
        """Delete a tiny URL from the store, the cache and the usage counter

        Raises:
            DocumentNotFoundError:
                If the store has no document for url_key.
            DataStoreError:
                If the store fails.
        """
        try:
            self.store.delete(url_key)
        except DataStoreError:
            logger.error('Failed to delete URL document from store.', exc_info=True, extra={'urlKey': url_key})
            raise

        try:
            self.cache.delete(url_key)
        except CacheMissError:
            logger.debug('URL document was not cached.', extra={'urlKey': url_key})
        except CacheError:
            logger.warning('Failed to delete URL document from cache.', exc_info=True, extra={'urlKey': url_key})

        try:
            self.counter.reset(url_key)
        except Exception:
            logger.warning('Failed to reset usage counter.', exc_info=True, extra={'urlKey': url_key})

        logger.info('Deleted URL document.', extra={'urlKey': url_key})
