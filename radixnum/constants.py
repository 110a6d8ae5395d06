"""Alphabet and numeric limits shared by the conversion helpers."""
import string

ALPHABET = string.digits + string.ascii_uppercase

MIN_RADIX = 2
MAX_RADIX = len(ALPHABET)
DECIMAL_RADIX = 10

# Magnitudes are bounded to an unsigned machine word.
MAGNITUDE_BITS = 64
MAX_MAGNITUDE = 2**MAGNITUDE_BITS - 1
