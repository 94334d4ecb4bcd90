"""Resolver Application Service.

Internal use case: resolve a postal code to a temperature through the
postal directory and the weather provider.
"""

import logging

from domain.exceptions import NotFoundError, UpstreamError
from domain.interfaces import IPostalDirectory, IWeatherProvider
from domain.services import TemperatureResolutionService
from domain.value_objects import PostalCodeQuery, TemperatureResponse

_LOGGER = logging.getLogger(__name__)


class ResolverApplicationService:
    """Application service behind the resolver's ``GET /``.

    The postal code is validated again here: the resolver must be safe
    even when called directly, without going through the gateway.
    """

    def __init__(
        self,
        postal_directory: IPostalDirectory,
        weather_provider: IWeatherProvider,
    ) -> None:
        """Initialize the resolver application service.

        Args:
            postal_directory: Postal directory implementation
            weather_provider: Weather provider implementation
        """
        self._resolution_service = TemperatureResolutionService(
            postal_directory=postal_directory,
            weather_provider=weather_provider,
        )

    async def get_temperature(self, code: str | None) -> TemperatureResponse:
        """Resolve a raw postal code to its current temperature.

        Args:
            code: Postal code from the query string (may be None)

        Returns:
            TemperatureResponse

        Raises:
            InvalidPostalCodeError: If the code is not 8 digits
            NotFoundError: If the code or the temperature is unknown
            UpstreamError: If an external call fails
        """
        query = PostalCodeQuery(code if code is not None else "")

        try:
            response = await self._resolution_service.resolve(query)
        except NotFoundError as e:
            _LOGGER.warning("Postal code %s: %s", query.code, e)
            raise
        except UpstreamError as e:
            _LOGGER.error(
                "Upstream failure (%s) for postal code %s: %s",
                e.service or "unknown",
                query.code,
                e,
            )
            raise

        _LOGGER.info(
            "Postal code %s resolved: %s, %.1f°C",
            query.code,
            response.city,
            response.temp_c,
        )
        return response
