"""Temperature response value object.

The composed result of the pipeline, and the only artifact the
services expose to their callers.
"""

from dataclasses import dataclass
from typing import Any

# 273, not 273.15: existing consumers compare response bodies byte for byte
KELVIN_OFFSET = 273


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert °C to °F."""
    return celsius * 1.8 + 32


def celsius_to_kelvin(celsius: float) -> float:
    """Convert °C to K."""
    return celsius + KELVIN_OFFSET


@dataclass(frozen=True)
class TemperatureResponse:
    """Current temperature of a city in three units.

    Attributes:
        temp_c: Temperature in °C
        temp_f: Temperature in °F
        temp_k: Temperature in K (offset 273)
        city: Display name of the city, as returned by the postal directory
    """

    temp_c: float
    temp_f: float
    temp_k: float
    city: str

    @classmethod
    def from_celsius(cls, celsius: float, city: str) -> "TemperatureResponse":
        """Build a response, deriving °F and K from °C.

        Args:
            celsius: Temperature in °C
            city: Display name of the city

        Returns:
            TemperatureResponse
        """
        return cls(
            temp_c=celsius,
            temp_f=celsius_to_fahrenheit(celsius),
            temp_k=celsius_to_kelvin(celsius),
            city=city,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TemperatureResponse":
        """Parse a serialized response, taking the values as given.

        Raises:
            ValueError: If a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")
        try:
            city = data["city"]
            temps = [float(data[key]) for key in ("temp_c", "temp_f", "temp_k")]
        except KeyError as e:
            raise ValueError(f"missing field in temperature response: {e}") from e
        except TypeError as e:
            raise ValueError(f"invalid temperature response: {e}") from e

        if not isinstance(city, str):
            raise ValueError(f"city must be a string, got {city!r}")

        return cls(temp_c=temps[0], temp_f=temps[1], temp_k=temps[2], city=city)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape exposed by both services."""
        return {
            "temp_c": self.temp_c,
            "temp_f": self.temp_f,
            "temp_k": self.temp_k,
            "city": self.city,
        }
