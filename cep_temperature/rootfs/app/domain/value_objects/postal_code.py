"""Postal code value object.

Immutable carrier for a validated Brazilian postal code (CEP).
"""

import re
from dataclasses import dataclass

from domain.exceptions import InvalidPostalCodeError

# ASCII only: \d would also accept other Unicode decimal digits
_POSTAL_CODE_PATTERN = re.compile(r"[0-9]{8}")


def is_valid_postal_code(value: object) -> bool:
    """Check that a value is exactly 8 ASCII decimal digits.

    No trimming or padding is applied; the value must match verbatim.

    Args:
        value: Candidate postal code

    Returns:
        True if the value is a string of exactly 8 digits
    """
    return isinstance(value, str) and _POSTAL_CODE_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class PostalCodeQuery:
    """A postal code that passed format validation.

    Attributes:
        code: 8-digit postal code, used verbatim
    """

    code: str

    def __post_init__(self) -> None:
        """Validate the postal code format."""
        if not is_valid_postal_code(self.code):
            raise InvalidPostalCodeError(self.code)

    def __str__(self) -> str:
        return self.code
