from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest

from tinyurl.models import URLDocument
from tinyurl.dao.base import CacheBaseDAO, URLDocumentBaseDAO
from tinyurl.dao.memory import MemoryCacheDAO, URLDocumentMemoryDAO
from tinyurl.services.metrics import UsageCounter


@pytest.fixture
def document() -> URLDocument:
    return URLDocument(
        base10_id=2468135791013,
        url_key='27qMi57J',
        long_url='https://example.com/article/123',
        expire_time=datetime(2026, 10, 15, 12, 0, tzinfo=UTC),
    )


@pytest.fixture
def expired_document() -> URLDocument:
    return URLDocument(
        base10_id=7489135791013,
        url_key='4PjAHW6Y',
        long_url='https://example.com/old',
        expire_time=datetime(2025, 10, 1, tzinfo=UTC),
    )


@pytest.fixture
def store() -> URLDocumentMemoryDAO:
    return URLDocumentMemoryDAO()


@pytest.fixture
def cache() -> MemoryCacheDAO:
    return MemoryCacheDAO()


@pytest.fixture
def mock_store() -> URLDocumentBaseDAO:
    return MagicMock(spec=URLDocumentBaseDAO)


@pytest.fixture
def mock_cache() -> CacheBaseDAO:
    return MagicMock(spec=CacheBaseDAO)


@pytest.fixture
def counter() -> UsageCounter:
    return MagicMock(spec=UsageCounter)
