"""Unit tests for usage counters in metrics.py.

Test coverage includes:
    1. PrometheusUsageCounter
       - Lookups are counted per URL key under tiny_url_svc_tiny_url_usage_total.
       - reset() drops a URL key's series, absent keys included.
       - register() is idempotent.
       - Lookups of unknown keys still create a series.
    2. NullUsageCounter
       - All operations are no-ops.
"""

import pytest
from prometheus_client import CollectorRegistry

from tinyurl.dao.exceptions import DocumentNotFoundError
from tinyurl.services import TinyURLService
from tinyurl.services.metrics import NullUsageCounter, PrometheusUsageCounter, UsageCounter


SAMPLE = 'tiny_url_svc_tiny_url_usage_total'


@pytest.fixture
def registry() -> CollectorRegistry:
    return CollectorRegistry()


@pytest.fixture
def counter(registry: CollectorRegistry) -> PrometheusUsageCounter:
    counter = PrometheusUsageCounter(registry=registry)
    counter.register()
    return counter


# -------------------------------
# 1. PrometheusUsageCounter
# -------------------------------


def test_increment_counts_per_url_key(counter, registry):
    counter.increment('27qMi57J')
    counter.increment('27qMi57J')
    counter.increment('9bHtdX')

    assert registry.get_sample_value(SAMPLE, {'url_key': '27qMi57J'}) == 2.0
    assert registry.get_sample_value(SAMPLE, {'url_key': '9bHtdX'}) == 1.0


def test_reset_drops_series(counter, registry):
    counter.increment('27qMi57J')

    counter.reset('27qMi57J')

    assert registry.get_sample_value(SAMPLE, {'url_key': '27qMi57J'}) is None


def test_reset_absent_key(counter):
    counter.reset('never-seen')


def test_register_is_idempotent(registry):
    counter = PrometheusUsageCounter(registry=registry)

    counter.register()
    counter.register()

    counter.increment('27qMi57J')
    assert registry.get_sample_value(SAMPLE, {'url_key': '27qMi57J'}) == 1.0


def test_unregistered_counter_is_not_exported(registry):
    counter = PrometheusUsageCounter(registry=registry)

    counter.increment('27qMi57J')

    assert registry.get_sample_value(SAMPLE, {'url_key': '27qMi57J'}) is None


def test_custom_namespace(registry):
    counter = PrometheusUsageCounter(registry=registry, namespace='staging')
    counter.register()

    counter.increment('27qMi57J')

    assert registry.get_sample_value('staging_tiny_url_usage_total', {'url_key': '27qMi57J'}) == 1.0



def test_unknown_key_lookup_leaves_series(counter, registry, store, cache):
    service = TinyURLService(store=store, cache=cache, counter=counter)

    with pytest.raises(DocumentNotFoundError):
        service.get_tiny_url('unknown1')

    assert registry.get_sample_value(SAMPLE, {'url_key': 'unknown1'}) == 1.0


# -------------------------------
# 2. NullUsageCounter
# -------------------------------


def test_null_usage_counter():
    counter = NullUsageCounter()
    assert isinstance(counter, UsageCounter)

    counter.register()
    counter.increment('27qMi57J')
    counter.reset('27qMi57J')
