import json

import pytest

from linkshortener.store import LinkStore
from linkshortener.lambdas.dependencies import store_for
from linkshortener.utils.config import AppConfig, StoreConfig


@pytest.fixture
def config(tmp_path) -> AppConfig:
    return AppConfig(store=StoreConfig(data_dir=str(tmp_path / 'data')))


@pytest.fixture
def store(config) -> LinkStore:
    return LinkStore.from_config(config.store)


@pytest.fixture
def domain_store(tmp_path) -> LinkStore:
    return LinkStore(data_dir=tmp_path / 'data', allowed_domain='localhost:3000')


@pytest.fixture
def apigw_event():
    """Build a minimal API Gateway proxy event."""

    def _event(method: str = 'GET', body=None, short_id: str | None = None, domain: str | None = None) -> dict:
        event = {
            'httpMethod': method,
            'headers': {'User-Agent': 'pytest'},
            'pathParameters': {'shortId': short_id} if short_id is not None else None,
            'body': body if body is None or isinstance(body, str) else json.dumps(body),
            'requestContext': {'httpMethod': method, 'stage': 'test'},
        }
        if domain:
            event['requestContext']['domainName'] = domain
        return event

    return _event


@pytest.fixture(autouse=True)
def clear_store_cache():
    store_for.cache_clear()
    yield
    store_for.cache_clear()
