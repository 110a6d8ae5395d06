"""Digit alphabet helpers and input validation used across the package."""
from functools import lru_cache
from typing import FrozenSet, Optional

from .constants import ALPHABET, DECIMAL_RADIX, MAX_RADIX, MIN_RADIX
from .exceptions import EmptyInput, InternalError, InvalidDigit, RadixNotSupported


def validate_radix(radix: int) -> int:
    """Return ``radix`` unchanged if it lies within the supported range."""
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise RadixNotSupported(radix)
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise RadixNotSupported(radix)
    return radix


def letter_for(radix: int) -> Optional[str]:
    """Highest letter allowed as a digit in ``radix``, or ``None`` below radix 11."""
    radix = validate_radix(radix)
    if radix <= DECIMAL_RADIX:
        return None
    return chr(ord("A") + (radix - 11))


@lru_cache(maxsize=MAX_RADIX)
def allowed_digits(radix: int) -> FrozenSet[str]:
    return frozenset(ALPHABET[: validate_radix(radix)])


def digit_value(char: str, radix: int = MAX_RADIX) -> int:
    """Map a single uppercase digit character to its numeric value."""
    if "0" <= char <= "9":
        value = ord(char) - ord("0")
    elif "A" <= char <= "Z":
        value = ord(char) - ord("A") + 10
    else:
        raise InvalidDigit(char, radix)
    if value >= radix:
        raise InvalidDigit(char, radix)
    return value


def digit_char(value: int) -> str:
    """Map a digit value in ``[0, 35]`` to its character."""
    if not 0 <= value < len(ALPHABET):
        raise InternalError(f"Digit value {value} has no character in the alphabet.")
    if value < 10:
        return chr(ord("0") + value)
    return chr(ord("A") + value - 10)


def sanitize(text: str, radix: int) -> str:
    """Trim, uppercase and validate ``text`` as a number written in ``radix``."""
    radix = validate_radix(radix)
    if not isinstance(text, str):
        raise TypeError(f"Expected a string of digits, got {type(text).__name__}.")

    value = text.strip()
    if not value:
        raise EmptyInput()

    allowed = allowed_digits(radix)
    for char in value:
        if not char.isascii() or char.upper() not in allowed:
            raise InvalidDigit(char, radix)
    return value.upper()
