"""Postal directory interface.

Contract for resolving a postal code to a city name.
"""

from abc import ABC, abstractmethod

from domain.value_objects import CityLookupResult, PostalCodeQuery


class IPostalDirectory(ABC):
    """Contract for an external postal code directory."""

    @abstractmethod
    async def lookup_city(self, query: PostalCodeQuery) -> CityLookupResult:
        """Resolve a postal code to its locality.

        Args:
            query: Validated postal code

        Returns:
            CityLookupResult, with found=False when the code is unknown

        Raises:
            UpstreamError: On transport, status or decode failure
        """
        pass
