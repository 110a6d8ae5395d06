"""Errors raised while validating, decoding or encoding radix values."""
from typing import Optional


class RadixError(ValueError):
    """Base class for every failure reported by this package."""

    default_message = "Radix conversion failed."

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)


class RadixNotSupported(RadixError):
    def __init__(self, radix: object) -> None:
        self.radix = radix
        super().__init__(f"Radix {radix!r} is not supported; expected an integer between 2 and 36.")


class EmptyInput(RadixError):
    default_message = "The value cannot be empty."


class InvalidDigit(RadixError):
    def __init__(self, digit: str, radix: int) -> None:
        self.digit = digit
        self.radix = radix
        super().__init__(f"{digit!r} is not a valid digit in radix {radix}.")


class MagnitudeOutOfRange(RadixError):
    def __init__(self, value: int, message: Optional[str] = None) -> None:
        self.value = value
        super().__init__(message or "The number must be a non-negative integer.")


class Overflow(MagnitudeOutOfRange):
    def __init__(self, value: int, limit: int) -> None:
        self.limit = limit
        super().__init__(value, f"The number exceeds the largest supported magnitude ({limit}).")


class InternalError(RadixError):
    """An encoder or decoder invariant was broken; indicates a defect."""

    default_message = "Internal radix conversion error."
