from unittest.mock import AsyncMock, Mock

import httpx
import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_conversion_service
from api.main import app
from application.services import ConversionService
from infrastructure.providers import FrankfurterProvider
from infrastructure.providers.base import RateSource


@pytest.fixture
def mock_rate_source():
    source = Mock(spec=RateSource)
    source.fetch_latest = AsyncMock()
    source.fetch_range = AsyncMock()
    return source


@pytest.fixture
def client(mock_rate_source):
    # Override the real dependency with a service backed by the mock source
    app.dependency_overrides[get_conversion_service] = lambda: ConversionService(mock_rate_source)
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()


def frankfurter_handler(request: httpx.Request) -> httpx.Response:
    # EUR is known, USD simulates a provider outage, anything else is unknown
    base = request.url.params.get('from')
    if base == 'EUR':
        return httpx.Response(
            200, json={'amount': 1.0, 'base': 'EUR', 'date': '2025-11-05', 'rates': {'USD': 1.2}}
        )
    if base == 'USD':
        return httpx.Response(500, text='Internal Server Error')
    return httpx.Response(404, json={'message': 'not found'})


@pytest.fixture
def frankfurter_client():
    provider = FrankfurterProvider(
        client=httpx.AsyncClient(transport=httpx.MockTransport(frankfurter_handler)),
        max_attempts=1,
    )
    app.dependency_overrides[get_conversion_service] = lambda: ConversionService(provider)
    client = TestClient(app, raise_server_exceptions=False)
    yield client
    app.dependency_overrides.clear()
