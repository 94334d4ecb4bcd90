"""Value objects for the temperature domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .city_lookup_result import CityLookupResult
from .postal_code import PostalCodeQuery, is_valid_postal_code
from .temperature_response import (
    KELVIN_OFFSET,
    TemperatureResponse,
    celsius_to_fahrenheit,
    celsius_to_kelvin,
)
from .weather_reading import WeatherReading

__all__ = [
    "CityLookupResult",
    "KELVIN_OFFSET",
    "PostalCodeQuery",
    "TemperatureResponse",
    "WeatherReading",
    "celsius_to_fahrenheit",
    "celsius_to_kelvin",
    "is_valid_postal_code",
]
