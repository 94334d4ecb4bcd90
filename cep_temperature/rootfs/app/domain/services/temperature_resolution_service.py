"""Temperature resolution service.

Domain service chaining the postal directory and the weather provider.
"""

import logging

from domain.exceptions import PostalCodeNotFoundError
from domain.interfaces import IPostalDirectory, IWeatherProvider
from domain.value_objects import PostalCodeQuery, TemperatureResponse

from .city_name_normalizer import normalize_city_name

_LOGGER = logging.getLogger(__name__)


class TemperatureResolutionService:
    """Resolve a postal code to the current temperature of its city.

    The steps run strictly in sequence: directory lookup, not-found
    check, city name normalization, weather lookup, unit conversion.
    The weather provider is only called for codes the directory knows.
    """

    def __init__(
        self,
        postal_directory: IPostalDirectory,
        weather_provider: IWeatherProvider,
    ) -> None:
        """Initialize the resolution service.

        Args:
            postal_directory: Postal code to city resolver
            weather_provider: City to current weather resolver
        """
        self._postal_directory = postal_directory
        self._weather_provider = weather_provider

    async def resolve(self, query: PostalCodeQuery) -> TemperatureResponse:
        """Resolve a postal code to a temperature response.

        Args:
            query: Validated postal code

        Returns:
            TemperatureResponse stamped with the directory's city name

        Raises:
            PostalCodeNotFoundError: If the directory does not know the code
            TemperatureNotFoundError: If the provider does not know the city
            UpstreamError: If either external call fails
        """
        lookup = await self._postal_directory.lookup_city(query)
        if not lookup.found:
            raise PostalCodeNotFoundError(query.code)

        city_query = normalize_city_name(lookup.city_name)
        _LOGGER.debug(
            "Postal code %s resolved to %s (query: %s)",
            query.code,
            lookup.city_name,
            city_query,
        )

        reading = await self._weather_provider.current_temperature(city_query)

        return TemperatureResponse.from_celsius(reading.celsius, lookup.city_name)
