"""WeatherAPI provider adapter.

Infrastructure adapter that implements IWeatherProvider using
WeatherAPI's current conditions endpoint.
"""

import logging
import os

import requests
from domain.exceptions import TemperatureNotFoundError, UpstreamError
from domain.interfaces import IWeatherProvider
from domain.value_objects import WeatherReading

from .http_utils import decode_json, get_default_timeout

_LOGGER = logging.getLogger(__name__)

DEFAULT_WEATHER_API_URL = "http://api.weatherapi.com/v1/current.json"

# WeatherAPI error code for "No matching location found."
NO_MATCHING_LOCATION_CODE = 1006


class WeatherApiProvider(IWeatherProvider):
    """WeatherAPI implementation of the weather provider.

    Only current conditions are requested (``aqi=no``). WeatherAPI
    answers 400 both for an unknown location (error code 1006) and for
    request faults or its own failures; only the former is a not-found.
    """

    SERVICE_NAME = "weatherapi"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the WeatherAPI provider.

        Args:
            api_key: WeatherAPI key (defaults to WEATHER_API_KEY env variable)
            base_url: Current conditions URL (defaults to WEATHER_API_URL)
            timeout: Request timeout in seconds (defaults to HTTP_TIMEOUT_SECONDS)
        """
        self._api_key = api_key if api_key is not None else os.getenv("WEATHER_API_KEY", "")
        self._base_url = base_url or os.getenv("WEATHER_API_URL", DEFAULT_WEATHER_API_URL)
        self._timeout = timeout if timeout is not None else get_default_timeout()

        if not self._api_key:
            _LOGGER.warning("WEATHER_API_KEY is not set, weather lookups will be rejected")
        _LOGGER.info("WeatherAPI provider initialized with URL: %s", self._base_url)

    def _build_url(self, city_query: str) -> str:
        # city_query is already encoded; params= would encode it twice
        return f"{self._base_url}?q={city_query}"

    def _get_params(self) -> dict[str, str]:
        return {"key": self._api_key, "aqi": "no"}

    async def current_temperature(self, city_query: str) -> WeatherReading:
        """Fetch the current temperature for a normalized city name.

        Args:
            city_query: Normalized, query-string encoded city name

        Returns:
            WeatherReading in °C

        Raises:
            TemperatureNotFoundError: If WeatherAPI finds no matching location
            UpstreamError: On transport failure, unexpected status or bad JSON
        """
        try:
            response = requests.get(
                self._build_url(city_query),
                params=self._get_params(),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(
                f"error fetching temperature: {e}", service=self.SERVICE_NAME
            ) from e

        if response.status_code == 400:
            self._raise_bad_request(response, city_query)
        if response.status_code != 200:
            raise UpstreamError(
                f"error fetching temperature: {self.SERVICE_NAME} returned HTTP {response.status_code}",
                service=self.SERVICE_NAME,
            )

        payload = decode_json(response, self.SERVICE_NAME)
        try:
            return WeatherReading.from_provider_payload(payload)
        except ValueError as e:
            raise UpstreamError(
                f"error fetching temperature: {e}", service=self.SERVICE_NAME
            ) from e

    def _raise_bad_request(self, response: requests.Response, city_query: str) -> None:
        """Classify a WeatherAPI 400 by its ``{"error": {"code", "message"}}`` body.

        Raises:
            TemperatureNotFoundError: For error code 1006
            UpstreamError: For any other code or an undecodable body
        """
        try:
            error = response.json().get("error") or {}
            code = error.get("code")
            message = error.get("message")
        except (ValueError, AttributeError):
            code, message = None, None

        if code == NO_MATCHING_LOCATION_CODE:
            raise TemperatureNotFoundError(city_query)

        raise UpstreamError(
            f"error fetching temperature: {self.SERVICE_NAME} returned HTTP 400"
            f" (code {code}): {message or 'no error message'}",
            service=self.SERVICE_NAME,
        )
