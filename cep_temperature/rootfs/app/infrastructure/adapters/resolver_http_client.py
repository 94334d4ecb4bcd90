"""Resolver service HTTP client.

Infrastructure adapter that implements ITemperatureResolverClient by
calling the resolver service over plain HTTP.
"""

import logging
import os

import requests
from domain.exceptions import NotFoundError, UpstreamError
from domain.interfaces import ITemperatureResolverClient
from domain.value_objects import PostalCodeQuery, TemperatureResponse

from .http_utils import decode_json, get_default_timeout

_LOGGER = logging.getLogger(__name__)

DEFAULT_RESOLVER_URL = "http://localhost:8081/"
DEFAULT_NOT_FOUND_MESSAGE = "can not find zipcode"


class HttpTemperatureResolverClient(ITemperatureResolverClient):
    """Calls ``GET <resolver>/?cep=<code>`` on the resolver service.

    A 404 is a terminal not-found signal; its body only supplies the
    message, falling back to DEFAULT_NOT_FOUND_MESSAGE.
    """

    SERVICE_NAME = "resolver"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the resolver client.

        Args:
            base_url: Resolver base URL (defaults to RESOLVER_URL env variable)
            timeout: Request timeout in seconds (defaults to HTTP_TIMEOUT_SECONDS)
        """
        base_url = base_url or os.getenv("RESOLVER_URL", DEFAULT_RESOLVER_URL)
        # Trailing slash so the query lands on the resolver root path
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._timeout = timeout if timeout is not None else get_default_timeout()

        _LOGGER.info("Resolver client initialized with URL: %s", self._base_url)

    async def resolve(self, query: PostalCodeQuery) -> TemperatureResponse:
        """Delegate a postal code to the resolver service.

        Args:
            query: Validated postal code

        Returns:
            TemperatureResponse parsed from the resolver body

        Raises:
            NotFoundError: If the resolver answers 404
            UpstreamError: On transport failure, unexpected status or bad JSON
        """
        try:
            response = requests.get(
                self._base_url,
                params={"cep": query.code},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise UpstreamError(str(e), service=self.SERVICE_NAME) from e

        if response.status_code == 404:
            raise NotFoundError(self._not_found_message(response))
        if response.status_code != 200:
            raise UpstreamError(
                f"{self.SERVICE_NAME} returned HTTP {response.status_code}: {self._error_detail(response)}",
                service=self.SERVICE_NAME,
            )

        payload = decode_json(response, self.SERVICE_NAME)
        try:
            return TemperatureResponse.from_dict(payload)
        except ValueError as e:
            raise UpstreamError(
                f"invalid {self.SERVICE_NAME} response: {e}", service=self.SERVICE_NAME
            ) from e

    @staticmethod
    def _not_found_message(response: requests.Response) -> str:
        """Message of a resolver 404, e.g. zipcode vs temperature."""
        try:
            message = response.json().get("error")
        except (ValueError, AttributeError):
            return DEFAULT_NOT_FOUND_MESSAGE
        return message if isinstance(message, str) and message else DEFAULT_NOT_FOUND_MESSAGE

    @staticmethod
    def _error_detail(response: requests.Response) -> str:
        """Resolver's ``error`` field in full, else the first 200 chars of the body."""
        try:
            message = response.json().get("error")
        except (ValueError, AttributeError):
            message = None
        if isinstance(message, str) and message:
            return message
        return response.text[:200]
