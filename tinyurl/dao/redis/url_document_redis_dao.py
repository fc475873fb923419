"""Data Access Object (DAO) implementation for storing URL documents in Redis

This module provides a Redis-based implementation of URLDocumentBaseDAO, the
authoritative store of tiny URL mappings.

Responsibilities:
    - Insert, retrieve and delete URL documents as Redis hashes;
    - Let Redis reap expired (non live-forever) documents via EXPIREAT;
    - Provide defensive error handling and raise appropriate DAO exceptions.

Storage layout:
    <prefix>:urls:<url key> -> HASH {
        base_10_id, url_key, long_url, expire_time (ISO-8601), live_forever (0/1)
    }

Classes:
    URLDocumentRedisDAO:
        DAO for storing and retrieving URLDocument in a Redis datastore.

Example:
    >>> from tinyurl.dao.redis import URLDocumentRedisDAO

    >>> dao = URLDocumentRedisDAO(prefix="tinyurl:dev")
    >>> dao.put(document)
    <URLDocumentRedisDAO>

    >>> dao.get_document('27qMi57J').long_url
    'https://example.com/page'

    >>> dao.delete('27qMi57J')
    <URLDocumentRedisDAO>
"""

from datetime import datetime, UTC
from typing import Any

from beartype import beartype

from tinyurl.models import URLDocument
from tinyurl.dao.base import URLDocumentBaseDAO
from tinyurl.dao.redis.mixins import RedisClientMixin
from tinyurl.dao.redis.helpers import handle_redis_connection_error
from tinyurl.dao.exceptions import DataStoreError, DocumentAlreadyExistsError, DocumentNotFoundError


class URLDocumentRedisDAO(RedisClientMixin, URLDocumentBaseDAO):
    """Redis-based Data Access Object (DAO) for managing URL documents

    This class implements the URLDocumentBaseDAO interface using Redis as a data store.

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        put(document: URLDocument, **kwargs) -> URLDocumentRedisDAO:
            Insert a URL document.
            Raises DocumentAlreadyExistsError when a document with the same URL key exists.
            Raises DataStoreError on connectivity issues with Redis.

        get_document(url_key: str, **kwargs) -> URLDocument:
            Retrieve a URL document by URL key.
            Raises DocumentNotFoundError when the URL key doesn't exist.
            Raises DataStoreError on connectivity issues or corrupt records.

        delete(url_key: str, **kwargs) -> URLDocumentRedisDAO:
            Delete a URL document by URL key.
            Raises DocumentNotFoundError when the URL key doesn't exist.
            Raises DataStoreError on connectivity issues with Redis.
    """

    @handle_redis_connection_error
    @beartype
    def put(self, document: URLDocument, **kwargs) -> 'URLDocumentRedisDAO':
        """Insert a URL document into Redis

        Documents which don't live forever are set to EXPIREAT their expire time,
        so the store never holds them past expiry.

        Args:
            document (URLDocument):
                URLDocument instance representing the tiny URL mapping.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLDocumentRedisDAO: self (for method chaining)

        Raises:
            DocumentAlreadyExistsError:
                If a document with the same URL key already exists.
            DataStoreError:
                If a Redis connection issue occurs during the transaction.
        """
        document_key = self.keys.url_document_key(document.url_key)

        # NOTE: EXISTS and the write are not atomic. Two concurrent writers drawing
        #       the same key may both pass this check and the latter wins. Key
        #       collisions are rare enough that this is accepted.
        if self.redis.exists(document_key):
            raise DocumentAlreadyExistsError(f"URL document with key '{document.url_key}' already exists.")

        # NOTE: HSET and EXPIREAT are executed as an atomic operation to avoid
        #       a state where an expirable document is persisted without TTL.
        with self.redis.pipeline(transaction=True) as pipe:
            pipe.hset(document_key, mapping=_to_record(document))
            if not document.live_forever:
                pipe.expireat(document_key, int(document.expire_time.timestamp()))
            pipe.execute()
        return self

    @handle_redis_connection_error
    @beartype
    def get_document(self, url_key: str, **kwargs) -> URLDocument:
        """Retrieve a stored URL document by URL key

        Args:
            url_key (str):
                The URL key identifier for the tiny URL.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            URLDocument:
                The stored URLDocument instance.

        Raises:
            DocumentNotFoundError:
                If the URL document does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur or the stored record is corrupt.

        Example:
            >>> dao.get_document('27qMi57J')
            URLDocument(base10_id=2468135791013, url_key='27qMi57J', ...)
        """
        record = self.redis.hgetall(self.keys.url_document_key(url_key))
        if not record:
            raise DocumentNotFoundError(f"URL document with key '{url_key}' not found.")
        return _from_record(record)

    @handle_redis_connection_error
    @beartype
    def delete(self, url_key: str, **kwargs) -> 'URLDocumentRedisDAO':
        """Delete a stored URL document by URL key

        Raises:
            DocumentNotFoundError:
                If the URL document does not exist in Redis.
            DataStoreError:
                If Redis connectivity issues occur.
        """
        if not self.redis.delete(self.keys.url_document_key(url_key)):
            raise DocumentNotFoundError(f"URL document with key '{url_key}' not found.")
        return self


def _to_record(document: URLDocument) -> dict[str, Any]:
    # Redis hashes don't store booleans
    return {
        'base_10_id': document.base10_id,
        'url_key': document.url_key,
        'long_url': document.long_url,
        'expire_time': document.expire_time.isoformat(),
        'live_forever': int(document.live_forever),
    }


def _text(value: Any) -> Any:
    return value.decode('utf-8') if isinstance(value, bytes) else value


def _from_record(record: dict[Any, Any]) -> URLDocument:
    try:
        # Clients built with decode_responses=False return bytes keys and values
        record = {_text(k): _text(v) for k, v in record.items()}
        expire_time = datetime.fromisoformat(record['expire_time'])
        return URLDocument(
            base10_id=int(record['base_10_id']),
            url_key=record['url_key'],
            long_url=record['long_url'],
            expire_time=expire_time if expire_time.tzinfo else expire_time.replace(tzinfo=UTC),
            live_forever=str(record['live_forever']) == '1',
        )
    except (KeyError, TypeError, ValueError) as e:
        raise DataStoreError(f'Corrupt URL document record: {record!r}.') from e
