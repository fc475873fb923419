"""Tiny URL service, the contract consumed by transport handlers

TinyURLService composes the cache-aside resolver and the mutation service over
one store, one cache and one usage counter.

Example:
    >>> from tinyurl.dao.memory import URLDocumentMemoryDAO, MemoryCacheDAO
    >>> service = TinyURLService(store=URLDocumentMemoryDAO(), cache=MemoryCacheDAO())
    >>> document = service.generate_tiny_url('https://abc.io')
    >>> service.get_tiny_url(document.url_key).long_url
    'https://abc.io'
    >>> service.delete_tiny_url(document.url_key)
"""

from tinyurl.models import URLDocument
from tinyurl.dao.base import CacheBaseDAO, URLDocumentBaseDAO
from tinyurl.services.metrics import NullUsageCounter, UsageCounter
from tinyurl.services.mutation import MutationService
from tinyurl.services.resolver import CacheAsideResolver


class TinyURLService:
    """Generate, resolve and delete tiny URLs

    Methods:
        generate_tiny_url(long_url: str, live_forever: bool = False) -> URLDocument:
            Raises DataStoreError if the store write fails.

        get_tiny_url(url_key: str) -> URLDocument:
            Raises DocumentNotFoundError if the tiny URL doesn't exist or has expired.
            Raises DataStoreError if the store read fails.

        delete_tiny_url(url_key: str) -> None:
            Raises DocumentNotFoundError if the tiny URL doesn't exist.
            Raises DataStoreError if the store delete fails.

        register_metric() -> None:
            Register the per-key usage counter with its metrics registry.
    """

    def __init__(
        self,
        store: URLDocumentBaseDAO,
        cache: CacheBaseDAO,
        counter: UsageCounter | None = None,
        cache_ttl: int | None = None,
    ):
        self.counter = counter or NullUsageCounter()
        self.resolver = CacheAsideResolver(store=store, cache=cache, counter=self.counter, cache_ttl=cache_ttl)
        self.mutations = MutationService(store=store, cache=cache, counter=self.counter, cache_ttl=cache_ttl)

    def generate_tiny_url(self, long_url: str, live_forever: bool = False) -> URLDocument:
        return self.mutations.generate(long_url, live_forever)

    def get_tiny_url(self, url_key: str) -> URLDocument:
        return self.resolver.resolve(url_key)

    def delete_tiny_url(self, url_key: str) -> None:
        self.mutations.delete(url_key)

    def register_metric(self) -> None:
        self.counter.register()
