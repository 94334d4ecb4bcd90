"""Gateway Application Service.

Client-facing use case: validate the request body and delegate the
postal code to the resolver service.
"""

import logging
from typing import Any

from domain.exceptions import (
    MalformedRequestError,
    MissingParameterError,
    NotFoundError,
    UpstreamError,
)
from domain.interfaces import ITemperatureResolverClient
from domain.value_objects import PostalCodeQuery, TemperatureResponse

_LOGGER = logging.getLogger(__name__)

POSTAL_CODE_FIELD = "cep"


class GatewayApplicationService:
    """Application service behind the gateway's ``POST /``.

    Stateless: every call builds its own PostalCodeQuery and passes it
    explicitly to the resolver client.
    """

    def __init__(self, resolver_client: ITemperatureResolverClient) -> None:
        """Initialize the gateway application service.

        Args:
            resolver_client: Client for the resolver service
        """
        self._resolver_client = resolver_client

    def parse_request(self, payload: Any) -> PostalCodeQuery:
        """Turn a decoded request body into a validated query.

        Args:
            payload: Decoded JSON body, or None if decoding failed

        Returns:
            PostalCodeQuery

        Raises:
            MalformedRequestError: If the body is not ``{"cep": str}``
            MissingParameterError: If ``cep`` is absent or empty
            InvalidPostalCodeError: If ``cep`` is not 8 digits
        """
        if not isinstance(payload, dict):
            raise MalformedRequestError()

        code = payload.get(POSTAL_CODE_FIELD)
        if code is None or code == "":
            raise MissingParameterError(POSTAL_CODE_FIELD)
        if not isinstance(code, str):
            raise MalformedRequestError(f"'{POSTAL_CODE_FIELD}' must be a string")

        return PostalCodeQuery(code)

    async def get_temperature(self, payload: Any) -> TemperatureResponse:
        """Validate a request body and resolve its postal code.

        Args:
            payload: Decoded JSON body, or None if decoding failed

        Returns:
            TemperatureResponse forwarded unchanged from the resolver

        Raises:
            ClientInputError: If the body or the postal code is invalid
            NotFoundError: If the resolver reports not found
            UpstreamError: If the resolver call fails
        """
        query = self.parse_request(payload)
        _LOGGER.info("Resolving temperature for postal code %s", query.code)

        try:
            response = await self._resolver_client.resolve(query)
        except NotFoundError:
            _LOGGER.warning("Resolver could not find postal code %s", query.code)
            raise
        except UpstreamError as e:
            _LOGGER.error("Resolver call failed for %s: %s", query.code, e)
            raise

        _LOGGER.info(
            "Postal code %s: %.1f°C in %s",
            query.code,
            response.temp_c,
            response.city,
        )
        return response
