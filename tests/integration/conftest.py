"""Pytest fixtures for integration tests.

This module provides fixtures for testing the gateway and resolver Flask
APIs with mocked ViaCEP, WeatherAPI and resolver responses.
"""

import json
from typing import Any, Callable, Dict, Generator
from unittest.mock import Mock, patch

import pytest

from application.services import GatewayApplicationService, ResolverApplicationService
from infrastructure.adapters import (
    HttpTemperatureResolverClient,
    ViaCepPostalDirectory,
    WeatherApiProvider,
)

RESOLVER_URL = "http://resolver.test:8081/"
VIACEP_URL = "http://viacep.test/ws"
WEATHER_API_URL = "http://weather.test/v1/current.json"


def make_response(status_code: int = 200, payload: Any = None) -> Mock:
    """Build a fake requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = json.dumps(payload) if payload is not None else ""
    if payload is None:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def viacep_directory() -> Dict[str, Dict[str, Any]]:
    """ViaCEP answers keyed by postal code."""
    return {
        "01001000": {"cep": "01001-000", "localidade": "São Paulo", "uf": "SP"},
        "60175047": {"cep": "60175-047", "localidade": "Fortaleza", "uf": "CE"},
        "99999999": {"erro": True},
    }


@pytest.fixture
def weather_by_city() -> Dict[str, float]:
    """WeatherAPI temperatures keyed by the normalized query."""
    return {
        "Sao+Paulo": 22.5,
        "Fortaleza": 30.0,
    }


@pytest.fixture
def fake_upstreams(
    viacep_directory: Dict[str, Dict[str, Any]],
    weather_by_city: Dict[str, float],
) -> Callable[..., Mock]:
    """A requests.get replacement serving ViaCEP and WeatherAPI."""

    def fake_get(url: str, params: Dict[str, str] | None = None, timeout: float | None = None) -> Mock:
        if url.startswith(VIACEP_URL):
            code = url[len(VIACEP_URL):].strip("/").split("/")[0]
            return make_response(200, viacep_directory.get(code, {"erro": True}))
        if url.startswith(WEATHER_API_URL):
            city_query = url.split("q=", 1)[1]
            if city_query not in weather_by_city:
                return make_response(
                    400, {"error": {"code": 1006, "message": "No matching location found."}}
                )
            return make_response(200, {"current": {"temp_c": weather_by_city[city_query]}})
        raise AssertionError(f"unexpected URL {url}")

    return fake_get


@pytest.fixture
def resolver_service() -> ResolverApplicationService:
    """Create a ResolverApplicationService with test URLs."""
    return ResolverApplicationService(
        postal_directory=ViaCepPostalDirectory(base_url=VIACEP_URL, timeout=1),
        weather_provider=WeatherApiProvider(
            api_key="test_key", base_url=WEATHER_API_URL, timeout=1
        ),
    )


@pytest.fixture
def gateway_service() -> GatewayApplicationService:
    """Create a GatewayApplicationService pointing at the test resolver URL."""
    return GatewayApplicationService(
        HttpTemperatureResolverClient(base_url=RESOLVER_URL, timeout=1)
    )


@pytest.fixture
def resolver_app(resolver_service: ResolverApplicationService) -> Generator[Any, None, None]:
    """Create the resolver Flask test app with the test service.

    This fixture patches the global resolver_service in the server module.
    """
    import infrastructure.api.resolver_server as server_module

    with patch.object(server_module, 'resolver_service', resolver_service):
        app = server_module.app
        app.config['TESTING'] = True
        yield app


@pytest.fixture
def gateway_app(gateway_service: GatewayApplicationService) -> Generator[Any, None, None]:
    """Create the gateway Flask test app with the test service.

    This fixture patches the global gateway_service in the server module.
    """
    import infrastructure.api.gateway_server as server_module

    with patch.object(server_module, 'gateway_service', gateway_service):
        app = server_module.app
        app.config['TESTING'] = True
        yield app


@pytest.fixture
def resolver_client(resolver_app: Any) -> Any:
    """Create a resolver Flask test client."""
    return resolver_app.test_client()


@pytest.fixture
def gateway_client(gateway_app: Any) -> Any:
    """Create a gateway Flask test client."""
    return gateway_app.test_client()
