"""Exceptions raised for invalid Open Location Code input."""


class OpenLocationCodeError(ValueError):
    """Base class for input validation failures.

    Args:
        value: The offending input (a code string or a code length).
        message: Human-readable error description.
    """

    def __init__(self, value: object, message: str) -> None:
        self.value = value
        self.message = message
        super().__init__(message)


class InvalidLengthError(OpenLocationCodeError):
    """Requested code length is below 2, or odd and below the pair length."""

    def __init__(self, code_length: int) -> None:
        super().__init__(code_length, f"Invalid Open Location Code length: {code_length}")


class NotFullCodeError(OpenLocationCodeError):
    """A full code was required but the input is short or invalid."""

    def __init__(self, code: object) -> None:
        super().__init__(code, f"Open Location Code is not a valid full code: {code}")


class NotValidShortCodeError(OpenLocationCodeError):
    """Input is neither a full code nor a valid short code."""

    def __init__(self, code: object) -> None:
        super().__init__(code, f"Open Location Code is not a valid short code: {code}")


class PaddedCodeError(OpenLocationCodeError):
    """Padded codes cannot be shortened."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Cannot shorten padded codes: {code}")


class InvalidCoordinatesError(OpenLocationCodeError):
    """Latitude or longitude is NaN or infinite."""

    def __init__(self, latitude: float, longitude: float) -> None:
        super().__init__((latitude, longitude), f"Coordinates must be finite: ({latitude}, {longitude})")
