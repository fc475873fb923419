"""Unit tests for TinyURLService, end to end over the in-memory DAOs."""

from unittest.mock import MagicMock

import pytest
from freezegun import freeze_time

from tinyurl.dao.exceptions import DocumentNotFoundError
from tinyurl.services import TinyURLService
from tinyurl.services.metrics import NullUsageCounter, UsageCounter


@freeze_time('2025-10-15 12:00:00')
class TestTinyURLService:
    @pytest.fixture(autouse=True)
    def setup(self, store, cache, counter):
        self.store = store
        self.cache = cache
        self.counter = counter
        self.service = TinyURLService(store=store, cache=cache, counter=counter)

    def test_generate_then_resolve(self):
        document = self.service.generate_tiny_url('https://example.com/article/123')

        resolved = self.service.get_tiny_url(document.url_key)

        assert resolved == document
        assert resolved.long_url == 'https://example.com/article/123'
        self.counter.increment.assert_called_once_with(document.url_key)

    def test_delete_then_resolve(self):
        document = self.service.generate_tiny_url('https://abc.io', live_forever=True)

        self.service.delete_tiny_url(document.url_key)

        with pytest.raises(DocumentNotFoundError):
            self.service.get_tiny_url(document.url_key)
        with pytest.raises(DocumentNotFoundError):
            self.service.delete_tiny_url(document.url_key)

    def test_resolve_after_cache_eviction(self):
        document = self.service.generate_tiny_url('https://abc.io')
        self.cache.delete(document.url_key)

        assert self.service.get_tiny_url(document.url_key) == document
        assert document.url_key in self.cache

    def test_register_metric(self):
        self.service.register_metric()
        self.counter.register.assert_called_once_with()


def test_counter_defaults_to_null(store, cache):
    service = TinyURLService(store=store, cache=cache)
    assert isinstance(service.counter, NullUsageCounter)


def test_components_share_one_counter(store, cache):
    counter = MagicMock(spec=UsageCounter)
    service = TinyURLService(store=store, cache=cache, counter=counter, cache_ttl=60)

    assert service.resolver.counter is service.mutations.counter is counter
    assert service.resolver.cache_ttl == service.mutations.cache_ttl == 60
