"""City lookup result value object.

Outcome of resolving a postal code against the postal directory.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CityLookupResult:
    """City resolved from a postal code.

    Attributes:
        city_name: Locality name as returned by the directory (may be accented)
        found: False when the directory has no locality for the code
    """

    city_name: str
    found: bool

    def __post_init__(self) -> None:
        """Validate lookup result values."""
        if self.found and not self.city_name:
            raise ValueError("city_name cannot be empty when found is True")

    @classmethod
    def not_found(cls) -> "CityLookupResult":
        """Create a result for an unknown postal code."""
        return cls(city_name="", found=False)

    @classmethod
    def from_directory_payload(cls, payload: dict[str, Any]) -> "CityLookupResult":
        """Build a result from a directory JSON body.

        The directory flags unknown codes with ``"erro": true``; some
        deployments send the flag as the string ``"true"``.

        Args:
            payload: Decoded JSON body ``{"localidade": str, "erro": bool}``

        Returns:
            CityLookupResult

        Raises:
            ValueError: If the payload is not a JSON object or has no city
        """
        if not isinstance(payload, dict):
            raise ValueError(f"expected a JSON object, got {type(payload).__name__}")

        erro = payload.get("erro", False)
        if erro is True or str(erro).lower() == "true":
            return cls.not_found()

        city_name = payload.get("localidade")
        if not isinstance(city_name, str) or not city_name:
            raise ValueError("missing 'localidade' in directory response")

        return cls(city_name=city_name, found=True)
