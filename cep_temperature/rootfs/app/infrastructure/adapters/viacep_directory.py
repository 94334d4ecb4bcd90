"""ViaCEP postal directory adapter.

Infrastructure adapter that implements IPostalDirectory using the
ViaCEP REST API (``GET /ws/<cep>/json/``).
"""

import logging
import os

import requests
from domain.exceptions import UpstreamError
from domain.interfaces import IPostalDirectory
from domain.value_objects import CityLookupResult, PostalCodeQuery

from .http_utils import decode_json, get_default_timeout

_LOGGER = logging.getLogger(__name__)

DEFAULT_VIACEP_URL = "http://viacep.com.br/ws"


class ViaCepPostalDirectory(IPostalDirectory):
    """ViaCEP implementation of the postal directory.

    ViaCEP answers 200 with ``{"erro": true}`` for unknown codes and
    400 for codes it cannot parse; both are reported as not found.

    Note: Uses the synchronous requests library, one request per call
    with no retries.
    """

    SERVICE_NAME = "viacep"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
    ) -> None:
        """Initialize the ViaCEP directory.

        Args:
            base_url: ViaCEP base URL (defaults to VIACEP_URL env variable)
            timeout: Request timeout in seconds (defaults to HTTP_TIMEOUT_SECONDS)
        """
        self._base_url = (base_url or os.getenv("VIACEP_URL", DEFAULT_VIACEP_URL)).rstrip("/")
        self._timeout = timeout if timeout is not None else get_default_timeout()

        _LOGGER.info("ViaCEP directory initialized with URL: %s", self._base_url)

    def _build_url(self, query: PostalCodeQuery) -> str:
        return f"{self._base_url}/{query.code}/json/"

    async def lookup_city(self, query: PostalCodeQuery) -> CityLookupResult:
        """Resolve a postal code to its locality through ViaCEP.

        Args:
            query: Validated postal code

        Returns:
            CityLookupResult, found=False for unknown codes

        Raises:
            UpstreamError: On transport failure, unexpected status or bad JSON
        """
        url = self._build_url(query)
        _LOGGER.debug("Fetching %s", url)

        try:
            response = requests.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            raise UpstreamError(
                f"error fetching zipcode: {e}", service=self.SERVICE_NAME
            ) from e

        if response.status_code == 400:
            return CityLookupResult.not_found()
        if response.status_code != 200:
            raise UpstreamError(
                f"error fetching zipcode: {self.SERVICE_NAME} returned HTTP {response.status_code}",
                service=self.SERVICE_NAME,
            )

        payload = decode_json(response, self.SERVICE_NAME)
        try:
            return CityLookupResult.from_directory_payload(payload)
        except ValueError as e:
            raise UpstreamError(
                f"error fetching zipcode: {e}", service=self.SERVICE_NAME
            ) from e
