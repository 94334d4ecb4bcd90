"""Weather provider interface.

Contract for fetching the current temperature of a city.
"""

from abc import ABC, abstractmethod

from domain.value_objects import WeatherReading


class IWeatherProvider(ABC):
    """Contract for an external current-weather provider."""

    @abstractmethod
    async def current_temperature(self, city_query: str) -> WeatherReading:
        """Fetch current conditions for a city.

        Args:
            city_query: City name already normalized and percent-encoded
                for a query string

        Returns:
            WeatherReading in °C

        Raises:
            TemperatureNotFoundError: If the provider does not know the city
            UpstreamError: On transport, status or decode failure
        """
        pass
