"""Per-key usage counter

The services hold a reference to a UsageCounter; the counter's lifecycle (and
its registration with a metrics registry) is owned by the process.

Unknown keys:
    Lookups are counted before the URL key is known to exist, so a lookup of an
    unknown key leaves a series behind. Label cardinality therefore grows with
    the number of distinct keys looked up, not stored. Only reset() (called on
    delete) removes a series.

Classes:
    UsageCounter:
        Abstract counter capability: increment(url_key), reset(url_key), register().
    PrometheusUsageCounter:
        Counter backed by a prometheus_client Counter labelled by URL key.
    NullUsageCounter:
        Counter that records nothing (metrics disabled).

Example:
    >>> counter = PrometheusUsageCounter()
    >>> counter.register()
    >>> counter.increment('27qMi57J')
    >>> counter.reset('27qMi57J')
"""

import logging
import threading
from abc import ABC, abstractmethod

from prometheus_client import REGISTRY, CollectorRegistry, Counter


logger = logging.getLogger(__name__)

USAGE_METRIC_NAMESPACE = 'tiny_url_svc'
USAGE_METRIC_NAME = 'tiny_url_usage'


class UsageCounter(ABC):
    @abstractmethod
    def increment(self, url_key: str) -> None:
        pass

    @abstractmethod
    def reset(self, url_key: str) -> None:
        pass

    @abstractmethod
    def register(self) -> None:
        pass


class PrometheusUsageCounter(UsageCounter):
    """Usage counter exported as '<namespace>_tiny_url_usage_total{url_key="..."}'

    Attributes:
        counter (prometheus_client.Counter):
            Unregistered counter; register() adds it to the registry.
        registry (prometheus_client.CollectorRegistry):
            Registry the counter is exported through. Defaults to the global REGISTRY.

    NOTE: one series per looked-up URL key, unknown keys included; a scan of
    random keys grows the series count without bound until the process restarts.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY, namespace: str = USAGE_METRIC_NAMESPACE):
        self.counter = Counter(
            USAGE_METRIC_NAME,
            'Number of times a tiny URL was resolved',
            ['url_key'],
            namespace=namespace,
            registry=None,
        )
        self.registry = registry
        self._registered = False
        self._lock = threading.Lock()

    def register(self) -> None:
        """Register the counter with the registry (once; later calls are no-ops)

        Raises:
            ValueError:
                If another collector already owns the metric name in the registry.
        """
        with self._lock:
            if self._registered:
                return
            self.registry.register(self.counter)
            self._registered = True
        logger.debug('Registered usage counter.', extra={'metric': USAGE_METRIC_NAME})

    def increment(self, url_key: str) -> None:
        self.counter.labels(url_key=url_key).inc()

    def reset(self, url_key: str) -> None:
        # Removing an absent label set is not an error
        try:
            self.counter.remove(url_key)
        except KeyError:
            pass


class NullUsageCounter(UsageCounter):
    def increment(self, url_key: str) -> None:
        pass

    def reset(self, url_key: str) -> None:
        pass

    def register(self) -> None:
        pass
