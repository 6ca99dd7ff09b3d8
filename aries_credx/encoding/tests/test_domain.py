from unittest import TestCase

from ..domain import DomainInt
from ..error import DomainOverflowError


class ByteDomain(DomainInt):
    MAX = 251
    SIZE = 1
    ZERO_CENTER_BITS = 7

    __slots__ = ()


class PrimeDomain(DomainInt):
    MAX = 251
    SIZE = 1
    ZERO_CENTER_BITS = 7
    MODULAR = True

    __slots__ = ()


class TestDomainInt(TestCase):
    def test_bounds(self):
        assert ByteDomain.max_value() == 251
        assert int(ByteDomain(0)) == 0
        assert int(ByteDomain(250)) == 250
        with self.assertRaises(DomainOverflowError):
            ByteDomain(251)
        with self.assertRaises(DomainOverflowError):
            ByteDomain(-1)
        with self.assertRaises(TypeError):
            ByteDomain(1.0)

    def test_zero_center(self):
        zero = ByteDomain.zero_center()
        assert zero == 128
        assert isinstance(zero, ByteDomain)

    def test_from_bytes(self):
        assert ByteDomain.from_bytes(b"") == 0
        assert ByteDomain.from_bytes(b"\x07") == 7
        assert ByteDomain.from_bytes(b"\x01\x02\x03") == 3
        with self.assertRaises(DomainOverflowError):
            ByteDomain.from_bytes(b"\xff")

    def test_to_bytes(self):
        assert ByteDomain(7).to_bytes() == b"\x07"
        assert ByteDomain.from_bytes(ByteDomain(200).to_bytes()) == 200

    def test_checked_arithmetic(self):
        one = ByteDomain(1)
        assert ByteDomain(5) + one == 6
        assert ByteDomain(5) - one == 4
        assert 5 + one == 6
        assert 5 - one == 4
        assert one * 3 == 3
        with self.assertRaises(DomainOverflowError):
            ByteDomain(250) + one
        with self.assertRaises(DomainOverflowError):
            ByteDomain(0) - one

    def test_modular_arithmetic(self):
        one = PrimeDomain(1)
        assert PrimeDomain(250) + one == 0
        assert PrimeDomain(0) - one == 250
        assert PrimeDomain.zero_center() * 2 == 5

    def test_mixed_domains(self):
        with self.assertRaises(TypeError):
            ByteDomain(1) + PrimeDomain(1)
        assert ByteDomain(1) != PrimeDomain(1)

    def test_ordering(self):
        assert ByteDomain(1) < ByteDomain(2)
        assert ByteDomain(2) >= ByteDomain(2)
        assert ByteDomain(3) > 2
        assert sorted([ByteDomain(3), ByteDomain(1)]) == [1, 3]

    def test_immutable(self):
        value = ByteDomain(1)
        with self.assertRaises(AttributeError):
            value._value = 2
        assert hash(value) == hash(ByteDomain(1))
        assert "ByteDomain(1)" in repr(value)

    def test_is_concrete(self):
        assert ByteDomain.is_concrete()
        assert not DomainInt.is_concrete()
