"""Weather reading value object."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class WeatherReading:
    """Current temperature as reported by the weather provider.

    Attributes:
        celsius: Temperature in °C (canonical unit)
    """

    celsius: float

    @classmethod
    def from_provider_payload(cls, payload: dict[str, Any]) -> "WeatherReading":
        """Build a reading from a ``{"current": {"temp_c": float}}`` body.

        Raises:
            ValueError: If the temperature is missing or not numeric
        """
        try:
            temp_c = payload["current"]["temp_c"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"missing current.temp_c in weather response: {e}") from e

        # bool is an int subclass
        if isinstance(temp_c, bool) or not isinstance(temp_c, (int, float)):
            raise ValueError(f"current.temp_c must be a number, got {temp_c!r}")

        return cls(celsius=float(temp_c))
