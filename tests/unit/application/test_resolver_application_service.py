"""Tests for the resolver application service."""

from unittest.mock import AsyncMock, Mock

import pytest
from application.services import ResolverApplicationService
from domain.exceptions import InvalidPostalCodeError, PostalCodeNotFoundError, UpstreamError
from domain.interfaces import IPostalDirectory, IWeatherProvider
from domain.value_objects import CityLookupResult, WeatherReading


@pytest.fixture
def postal_directory() -> Mock:
    directory = Mock(spec=IPostalDirectory)
    directory.lookup_city = AsyncMock(
        return_value=CityLookupResult(city_name="São Paulo", found=True)
    )
    return directory


@pytest.fixture
def weather_provider() -> Mock:
    provider = Mock(spec=IWeatherProvider)
    provider.current_temperature = AsyncMock(return_value=WeatherReading(celsius=22.5))
    return provider


@pytest.fixture
def resolver_service(
    postal_directory: Mock, weather_provider: Mock
) -> ResolverApplicationService:
    return ResolverApplicationService(postal_directory, weather_provider)


class TestResolverApplicationService:
    """Tests for ResolverApplicationService.get_temperature."""

    @pytest.mark.asyncio
    async def test_resolves_valid_code(self, resolver_service: ResolverApplicationService) -> None:
        """Test the happy path end to end inside the resolver."""
        response = await resolver_service.get_temperature("01001000")

        assert response.to_dict() == {
            "temp_c": 22.5,
            "temp_f": pytest.approx(72.5),
            "temp_k": pytest.approx(295.5),
            "city": "São Paulo",
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize("code", [None, "", "abc", "123456789"])
    async def test_revalidates_code(
        self,
        resolver_service: ResolverApplicationService,
        postal_directory: Mock,
        code: str | None,
    ) -> None:
        """Test that the resolver rejects bad codes even when called directly."""
        with pytest.raises(InvalidPostalCodeError):
            await resolver_service.get_temperature(code)

        postal_directory.lookup_city.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_code_skips_weather(
        self,
        resolver_service: ResolverApplicationService,
        postal_directory: Mock,
        weather_provider: Mock,
    ) -> None:
        """Test that the weather provider is only called for known codes."""
        postal_directory.lookup_city.return_value = CityLookupResult.not_found()

        with pytest.raises(PostalCodeNotFoundError):
            await resolver_service.get_temperature("99999999")

        weather_provider.current_temperature.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_upstream_error_propagates(
        self,
        resolver_service: ResolverApplicationService,
        weather_provider: Mock,
    ) -> None:
        """Test that provider failures reach the caller."""
        weather_provider.current_temperature.side_effect = UpstreamError(
            "error fetching temperature: boom", service="weatherapi"
        )

        with pytest.raises(UpstreamError, match="boom"):
            await resolver_service.get_temperature("01001000")
