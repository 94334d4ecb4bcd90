"""Infrastructure adapters for the temperature lookups.

These adapters implement domain interfaces using the requests library
against ViaCEP, WeatherAPI and the resolver service.
"""

from .resolver_http_client import HttpTemperatureResolverClient
from .viacep_directory import ViaCepPostalDirectory
from .weatherapi_provider import WeatherApiProvider

__all__ = [
    "HttpTemperatureResolverClient",
    "ViaCepPostalDirectory",
    "WeatherApiProvider",
]
