"""Immutable numbers tagged with the radix they are written in."""
from dataclasses import dataclass
from typing import Tuple

from .codec import check_magnitude, decode, encode
from .constants import DECIMAL_RADIX
from .utils import sanitize, validate_radix


@dataclass(frozen=True)
class RadixValue:
    """A non-negative integer written as canonical digits in a given radix.

    ``text`` is always uppercase, trimmed, non-empty and free of redundant
    leading zeros, so equality between values compares their magnitudes
    within the same radix.
    """

    text: str
    radix: int

    def __post_init__(self) -> None:
        radix = validate_radix(self.radix)
        canonical = encode(decode(sanitize(self.text, radix), radix), radix)
        object.__setattr__(self, "text", canonical)

    @classmethod
    def from_integer(cls, number: int) -> "RadixValue":
        return cls(encode(check_magnitude(number), DECIMAL_RADIX), DECIMAL_RADIX)

    @classmethod
    def parse(cls, text: str, radix: int) -> "RadixValue":
        """Parse ``text`` as a number in ``radix``; letters may be any case."""
        return cls(text, radix)

    def with_radix(self, radix: int) -> "RadixValue":
        """Return the same magnitude re-encoded in ``radix``."""
        radix = validate_radix(radix)
        return RadixValue(encode(self.as_decimal(), radix), radix)

    def as_decimal(self) -> int:
        return decode(self.text, self.radix)

    def as_string(self) -> str:
        return self.text

    def digits(self) -> Tuple[str, ...]:
        return tuple(self.text)

    def __str__(self) -> str:
        return self.text

    def __int__(self) -> int:
        return self.as_decimal()
