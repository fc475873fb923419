"""Exceptions related to Data Access Objects (DAO) operations.

The store is authoritative, so its errors propagate to callers. The cache is
a disposable projection of the store, so its errors are logged and routed
around by the services.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DocumentNotFoundError:
        Raised when a URL document doesn't exist in the data store (or a cached
        copy proves it has expired).

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

    DocumentAlreadyExistsError:
        Raised when inserting a URL document whose key is already taken.

    CacheError:
        Raised when the cache backend misbehaves (degraded cache).

    CacheMissError:
        Raised when a requested cache entry is absent.

Example:
    >>> from tinyurl.dao.exceptions import CacheMissError
    >>> raise CacheMissError("No cache entry for key '27qMi57J'.")
    Traceback (most recent call last):
        ...
    tinyurl.dao.exceptions.CacheMissError: No cache entry for key '27qMi57J'.
"""

from tinyurl.exceptions import TinyURLError


class DAOError(TinyURLError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DocumentNotFoundError(DAOError):
    """Exception raised when a URL document is not found in the data store."""

    error_code = 'dao:document_not_found_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, OOM, etc.
    """

    error_code = 'dao:data_store_error'


class DocumentAlreadyExistsError(DataStoreError):
    """Exception raised when attempting to insert a URL document whose key already exists."""

    error_code = 'dao:document_already_exists_error'


class CacheError(DAOError):
    """Exception raised when the cache backend fails (other than a plain miss)."""

    error_code = 'dao:cache_error'


class CacheMissError(CacheError):
    """Exception raised when a requested cache entry is missing."""

    error_code = 'dao:cache_miss_error'
