from tinyurl.services.metrics import UsageCounter, PrometheusUsageCounter, NullUsageCounter
from tinyurl.services.mutation import MutationService, form_tiny_url
from tinyurl.services.resolver import CacheAsideResolver
from tinyurl.services.url_service import TinyURLService
from tinyurl.services.factory import build_url_service


__all__ = [
    'UsageCounter',
    'PrometheusUsageCounter',
    'NullUsageCounter',
    'MutationService',
    'form_tiny_url',
    'CacheAsideResolver',
    'TinyURLService',
    'build_url_service',
]
