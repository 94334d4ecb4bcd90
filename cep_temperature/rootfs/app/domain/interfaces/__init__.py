"""Domain interfaces for the temperature lookups.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .postal_directory import IPostalDirectory
from .temperature_resolver_client import ITemperatureResolverClient
from .weather_provider import IWeatherProvider

__all__ = [
    "IPostalDirectory",
    "ITemperatureResolverClient",
    "IWeatherProvider",
]
