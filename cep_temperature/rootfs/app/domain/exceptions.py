"""Domain exceptions.

Typed outcomes for the resolution pipeline. Callers branch on the
exception class, never on the message text.
"""


class TemperatureLookupError(Exception):
    """Base class for every failure of the resolution pipeline."""


class ClientInputError(TemperatureLookupError, ValueError):
    """The caller supplied a request that can never succeed."""


class MalformedRequestError(ClientInputError):
    """Request body could not be decoded into the expected shape."""

    def __init__(self, message: str = "malformed request") -> None:
        super().__init__(message)


class MissingParameterError(ClientInputError):
    """A required request parameter is absent or empty."""

    def __init__(self, parameter: str) -> None:
        self.parameter = parameter
        super().__init__(f"missing required parameter: {parameter}")


class InvalidPostalCodeError(ClientInputError):
    """Postal code is not exactly 8 ASCII digits."""

    def __init__(self, code: object) -> None:
        self.code = code
        super().__init__("invalid zipcode")


class NotFoundError(TemperatureLookupError):
    """The postal code or its temperature could not be found."""


class PostalCodeNotFoundError(NotFoundError):
    """The postal directory has no locality for the code."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__("can not find zipcode")


class TemperatureNotFoundError(NotFoundError):
    """The weather provider has no reading for the city."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__("can not find temperature")


class UpstreamError(TemperatureLookupError):
    """Transport, timeout, status or decode failure talking to a dependency.

    Attributes:
        detail: Original error text, kept for diagnosability
        service: Name of the dependency that failed
    """

    def __init__(self, detail: str, service: str | None = None) -> None:
        self.detail = detail
        self.service = service
        super().__init__(detail)
