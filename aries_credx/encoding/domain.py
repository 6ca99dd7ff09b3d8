"""Bounded integer domains that encoded attributes live in."""

from abc import ABC
from functools import total_ordering
from typing import Optional

from .error import DomainOverflowError


@total_ordering
class DomainInt(ABC):
    """
    Fixed-width non-negative integer bounded by a public maximum.

    Subclasses describe a concrete backend by setting the class constants:

    - `MAX`: exclusive upper bound of the domain
    - `SIZE`: width in bytes of the big-endian serialization
    - `ZERO_CENTER_BITS`: bit position of the zero-center offset
    - `MODULAR`: reduce arithmetic results modulo `MAX` (prime fields)

    Instances are immutable. Construction outside `[0, MAX)` always raises
    `DomainOverflowError`; so does arithmetic, unless the backend is modular.
    """

    MAX: int = None
    SIZE: int = None
    ZERO_CENTER_BITS: int = None
    MODULAR: bool = False

    __slots__ = ("_value",)

    def __init__(self, value: int = 0):
        """Initialize a domain integer from a Python int."""
        if isinstance(value, DomainInt):
            value = int(value)
        if not isinstance(value, int):
            raise TypeError(
                f"{self.__class__.__name__} requires an int, got {type(value).__name__}"
            )
        if value < 0 or value >= self.MAX:
            raise DomainOverflowError(
                f"Value does not fit {self.__class__.__name__}: {value}"
            )
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        """Reject mutation."""
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def is_concrete(cls) -> bool:
        """Check that the backend constants are all defined."""
        return None not in (cls.MAX, cls.SIZE, cls.ZERO_CENTER_BITS)

    @classmethod
    def max_value(cls) -> int:
        """Accessor for the exclusive upper bound of the domain."""
        return cls.MAX

    @classmethod
    def zero_center(cls) -> "DomainInt":
        """Offset mapping signed magnitudes onto the unsigned domain."""
        return cls(1 << cls.ZERO_CENTER_BITS)

    @classmethod
    def from_bytes(cls, data: bytes) -> "DomainInt":
        """
        Create an instance from big-endian bytes.

        Input shorter than `SIZE` is left-padded with zeros; longer input is
        truncated to its trailing `SIZE` bytes.
        """
        data = bytes(data)
        if len(data) > cls.SIZE:
            data = data[-cls.SIZE :]
        return cls(int.from_bytes(data.rjust(cls.SIZE, b"\x00"), "big"))

    def to_bytes(self) -> bytes:
        """Serialize to fixed-width big-endian bytes."""
        return self._value.to_bytes(self.SIZE, "big")

    def _operand(self, other) -> Optional[int]:
        if isinstance(other, DomainInt):
            if type(other) is not type(self):
                raise TypeError(
                    f"Cannot combine {self.__class__.__name__} "
                    f"with {other.__class__.__name__}"
                )
            return other._value
        if isinstance(other, int):
            return other
        return None

    def _result(self, value: int) -> "DomainInt":
        if self.MODULAR:
            value %= self.MAX
        return self.__class__(value)

    def __add__(self, other):
        """Add another element of the domain or a plain int."""
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._result(self._value + value)

    __radd__ = __add__

    def __sub__(self, other):
        """Subtract another element of the domain or a plain int."""
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._result(self._value - value)

    def __rsub__(self, other):
        """Subtract from a plain int."""
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._result(value - self._value)

    def __mul__(self, other):
        """Multiply by another element of the domain or a plain int."""
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._result(self._value * value)

    __rmul__ = __mul__

    def __eq__(self, other):
        """Compare with an element of the same backend or a plain int."""
        if isinstance(other, DomainInt):
            return type(other) is type(self) and other._value == self._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other):
        """Order by integer value."""
        value = self._operand(other)
        if value is None:
            return NotImplemented
        return self._value < value

    def __hash__(self):
        """Hash consistently with the plain int value."""
        return hash(self._value)

    def __int__(self):
        """Convert to a plain int."""
        return self._value

    __index__ = __int__

    def __repr__(self) -> str:
        """Provide a human readable representation of this object."""
        return f"<{self.__class__.__name__}({self._value})>"
