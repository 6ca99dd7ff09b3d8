"""Fixed-width ring integers for RSA-style signature schemes."""

from ..domain import DomainInt

RING_BITS = 256


class RingInteger(DomainInt):
    """
    Non-negative integer of at most 256 bits.

    Arithmetic is checked: results at or above `2^256 - 1` are rejected.
    """

    MAX = (1 << RING_BITS) - 1
    SIZE = RING_BITS // 8
    ZERO_CENTER_BITS = 254

    __slots__ = ()
