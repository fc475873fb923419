"""Abstract base class for URL document data access objects (DAOs).

This class establishes the store port: the authoritative, durable record of
URL mappings, regardless of the underlying storage mechanism (e.g., Redis,
MongoDB, in-memory).

Responsibilities:
    - Provide an interface for inserting, retrieving and deleting URLDocument objects.
    - Standardize error handling across multiple data store implementations.
    - Take and return URLDocument exclusively.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from tinyurl.models import URLDocument
        >>> from tinyurl.dao.redis import URLDocumentRedisDAO

        >>> dao = URLDocumentRedisDAO(...)
        >>> dao.put(document)
        <URLDocumentRedisDAO>

        >>> dao.get_document('27qMi57J').long_url
        'https://example.com/blog/article-123'

        >>> dao.delete('27qMi57J')
        <URLDocumentRedisDAO>
"""

from abc import ABC, abstractmethod

from tinyurl.models import URLDocument


class URLDocumentBaseDAO(ABC):
    """Interface for URL document data access objects (DAOs).

    Methods:
        put(document: URLDocument, **kwargs) -> URLDocumentBaseDAO:
            Insert a new URLDocument into the data store.
            Raises DocumentAlreadyExistsError if the URL key is already taken.
            Raises DataStoreError on connection or write failure.

        get_document(url_key: str, **kwargs) -> URLDocument:
            Retrieve a URLDocument from the data store by URL key.
            Raises DocumentNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or read failure.

        delete(url_key: str, **kwargs) -> URLDocumentBaseDAO:
            Delete a URLDocument from the data store by URL key.
            Raises DocumentNotFoundError if the entry does not exist.
            Raises DataStoreError on connection or write failure.

    Subclassing:
        Datastore-specific implementations (e.g., URLDocumentRedisDAO or
        URLDocumentMemoryDAO) must extend this class and implement all
        abstract methods.
    """

    @abstractmethod
    def put(self, document: URLDocument, **kwargs) -> 'URLDocumentBaseDAO':
        """Insert a new URLDocument into the data store.

        Args:
            document (URLDocument):
                The URLDocument instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLDocumentBaseDAO: self (for method chaining)

        Raises:
            DocumentAlreadyExistsError:
                If a URLDocument with the same URL key already exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def get_document(self, url_key: str, **kwargs) -> URLDocument:
        """Retrieve a URLDocument from the data store by its URL key.

        Args:
            url_key (str):
                The URL key of the URLDocument to be retrieved.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLDocument: The stored URLDocument.

        Raises:
            DocumentNotFoundError:
                If no URLDocument with the given URL key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass

    @abstractmethod
    def delete(self, url_key: str, **kwargs) -> 'URLDocumentBaseDAO':
        """Delete a URLDocument from the data store by its URL key.

        Args:
            url_key (str):
                The URL key of the URLDocument to be deleted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            URLDocumentBaseDAO: self (for method chaining)

        Raises:
            DocumentNotFoundError:
                If no URLDocument with the given URL key exists.

            DataStoreError:
                If there is an error in the data store.
        """
        pass
