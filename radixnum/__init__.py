"""Conversion of non-negative integers between radices 2 through 36."""
import logging
from logging import NullHandler

from .codec import decode, encode, from_radix, to_radix
from .exceptions import (
    EmptyInput,
    InternalError,
    InvalidDigit,
    MagnitudeOutOfRange,
    Overflow,
    RadixError,
    RadixNotSupported,
)
from .value import RadixValue

logging.getLogger(__name__).addHandler(NullHandler())

__all__ = [
    "RadixValue",
    "RadixError",
    "RadixNotSupported",
    "EmptyInput",
    "InvalidDigit",
    "MagnitudeOutOfRange",
    "Overflow",
    "InternalError",
    "decode",
    "encode",
    "to_radix",
    "from_radix",
]
