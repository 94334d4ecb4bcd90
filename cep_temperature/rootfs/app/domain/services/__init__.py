"""Domain services for the temperature lookups.

Services contain pure business logic and operate on value objects.
"""

from .city_name_normalizer import normalize_city_name, strip_diacritics
from .temperature_resolution_service import TemperatureResolutionService

__all__ = [
    "TemperatureResolutionService",
    "normalize_city_name",
    "strip_diacritics",
]
