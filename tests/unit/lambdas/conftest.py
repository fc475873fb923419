import pytest
from pytest import MonkeyPatch

from tinyurl.dao.memory import MemoryCacheDAO, URLDocumentMemoryDAO
from tinyurl.services import TinyURLService
from tinyurl.utils import helpers
from tinyurl.utils.constants import ENV


@pytest.fixture
def context() -> dict:
    return {'function_name': 'tinyurl-test'}


@pytest.fixture
def app_config() -> dict:
    return {
        'store': {'host': 'store.test', 'port': 6379, 'db': 0},
        'cache': {'host': 'cache.test', 'port': 6379, 'db': 1, 'ttl': 600},
    }


@pytest.fixture
def store() -> URLDocumentMemoryDAO:
    return URLDocumentMemoryDAO()


@pytest.fixture
def cache() -> MemoryCacheDAO:
    return MemoryCacheDAO()


@pytest.fixture
def service(store: URLDocumentMemoryDAO, cache: MemoryCacheDAO) -> TinyURLService:
    return TinyURLService(store=store, cache=cache)


@pytest.fixture(autouse=True)
def deployed(monkeypatch: MonkeyPatch) -> None:
    """Behave as a deployed lambda (unexpected errors become 500 responses)"""
    monkeypatch.setenv(ENV.App.APP_ENV, 'test')
    monkeypatch.setenv(ENV.App.APP_NAME, 'tinyurl')
    monkeypatch.delenv(ENV.App.AWS_SAM_LOCAL, raising=False)
    monkeypatch.setattr(helpers, 'running_locally', lambda: False)
