"""
IEEE-754 double classification and order-preserving magnitudes.

A normal double is turned into a non-negative integer magnitude that is
strictly increasing in `abs(value)`. Inside the fixed-point band the
magnitude is the exact value doubled `FRACTION_BITS` times, so differences
between encodings are proportional to differences between the raw values.
Outside the band the IEEE-754 bit pattern keeps the mapping injective and
ordered:

    |value| < 2^-96          bit pattern of |value|              < 2^62
    2^-96 <= |value| < 2^92  |value| * 2^160                     [2^64, 2^252)
    2^92 <= |value|          2^252 + pattern offset              < 2^253
"""

import math
import struct
import sys

from enum import Enum
from typing import Tuple

FRACTION_BITS = 160
BAND_LOW_EXPONENT = -96
BAND_HIGH_EXPONENT = 92

# Every magnitude returned by `scaled_magnitude` is below 2^MAGNITUDE_BITS
MAGNITUDE_BITS = 253

BAND_LOW = math.ldexp(1.0, BAND_LOW_EXPONENT)
BAND_HIGH = math.ldexp(1.0, BAND_HIGH_EXPONENT)
HIGH_BASE = 1 << (FRACTION_BITS + BAND_HIGH_EXPONENT)


class FloatCategory(Enum):
    """IEEE-754 classification of a double."""

    NAN = "nan"
    INFINITE = "infinite"
    ZERO = "zero"
    SUBNORMAL = "subnormal"
    NORMAL = "normal"


def classify(value: float) -> FloatCategory:
    """Classify a double the way IEEE-754 does."""
    if math.isnan(value):
        return FloatCategory.NAN
    if math.isinf(value):
        return FloatCategory.INFINITE
    if value == 0.0:
        return FloatCategory.ZERO
    if abs(value) < sys.float_info.min:
        return FloatCategory.SUBNORMAL
    return FloatCategory.NORMAL


def bit_pattern(value: float) -> int:
    """Unsigned 64-bit IEEE-754 representation of a double."""
    return struct.unpack(">Q", struct.pack(">d", value))[0]


HIGH_PATTERN = bit_pattern(BAND_HIGH)


def scaled_magnitude(value: float) -> Tuple[int, int]:
    """
    Split a normal double into its sign and order-preserving magnitude.

    Args:
        value: a finite, normal double

    Returns:
        A `(sign, magnitude)` pair where sign is -1, 0 or 1

    """
    sign = (value > 0) - (value < 0)
    value = abs(value)
    if value < BAND_LOW:
        magnitude = bit_pattern(value)
    elif value < BAND_HIGH:
        numerator, denominator = value.as_integer_ratio()
        # denominator is a power of two no larger than 2^148 inside the band
        magnitude = (numerator << FRACTION_BITS) // denominator
    else:
        magnitude = HIGH_BASE + bit_pattern(value) - HIGH_PATTERN
    return (sign if magnitude else 0), magnitude
