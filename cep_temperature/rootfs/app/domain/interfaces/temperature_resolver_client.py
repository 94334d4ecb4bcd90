"""Temperature resolver client interface.

Contract used by the gateway to reach the resolver service.
"""

from abc import ABC, abstractmethod

from domain.value_objects import PostalCodeQuery, TemperatureResponse


class ITemperatureResolverClient(ABC):
    """Contract for delegating a postal code to the resolver service."""

    @abstractmethod
    async def resolve(self, query: PostalCodeQuery) -> TemperatureResponse:
        """Resolve a postal code to its current temperature.

        Args:
            query: Validated postal code

        Returns:
            TemperatureResponse exactly as produced by the resolver

        Raises:
            NotFoundError: If the resolver reports the code as not found
            UpstreamError: On transport, status or decode failure
        """
        pass
