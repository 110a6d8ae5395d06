"""Conversions between magnitudes and their digit strings in radices 2 to 36."""
import logging
from typing import List

from .constants import MAX_MAGNITUDE
from .exceptions import EmptyInput, InternalError, MagnitudeOutOfRange, Overflow
from .utils import digit_char, digit_value, sanitize, validate_radix

logger = logging.getLogger(__name__)


def check_magnitude(number: int) -> int:
    """Return ``number`` if it is a non-negative integer within the supported width."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Expected an integer, got {type(number).__name__}.")
    if number < 0:
        raise MagnitudeOutOfRange(number)
    if number > MAX_MAGNITUDE:
        raise Overflow(number, MAX_MAGNITUDE)
    return number


def decode(text: str, radix: int) -> int:
    """Decode validated uppercase digit text in ``radix`` to its magnitude.

    Digits are weighted from the rightmost position leftward. Any character
    that is not a digit of ``radix`` raises :class:`InvalidDigit`, and a
    result wider than ``MAX_MAGNITUDE`` raises :class:`Overflow`.
    """
    radix = validate_radix(radix)
    if not text:
        raise EmptyInput()

    logger.debug("Decoding %r from radix %d", text, radix)
    result = 0
    weight = 1
    for position, char in enumerate(reversed(text)):
        value = digit_value(char, radix)
        if value:
            if weight > MAX_MAGNITUDE:
                raise Overflow(value * weight, MAX_MAGNITUDE)
            result += value * weight
            if result > MAX_MAGNITUDE:
                raise Overflow(result, MAX_MAGNITUDE)
        logger.debug("position=%d digit=%r value=%d total=%d", position, char, value, result)
        # Beyond the limit only zero digits are accepted.
        if weight <= MAX_MAGNITUDE:
            weight *= radix
    return result


def encode(number: int, radix: int) -> str:
    """Encode ``number`` as canonical uppercase text in ``radix``."""
    radix = validate_radix(radix)
    number = check_magnitude(number)
    if number == 0:
        return "0"

    logger.debug("Encoding %d into radix %d", number, radix)
    stack: List[str] = []
    while number:
        number, remainder = divmod(number, radix)
        if remainder >= radix:
            raise InternalError(f"Remainder {remainder} is not a digit of radix {radix}.")
        stack.append(digit_char(remainder))
        logger.debug("remainder=%d quotient=%d", remainder, number)

    chars: List[str] = []
    while stack:
        chars.append(stack.pop())
    return "".join(chars)


def to_radix(number: int, radix: int) -> str:
    """Convert an integer to its representation in ``radix``."""
    return encode(number, radix)


def from_radix(value: str, radix: int) -> int:
    """Convert a string written in ``radix`` back to an integer."""
    return decode(sanitize(value, radix), radix)
