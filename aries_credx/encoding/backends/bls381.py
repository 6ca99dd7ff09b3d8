"""BLS12-381 scalar field elements."""

from ..domain import DomainInt

# Order of the BLS12-381 prime-order subgroup
CURVE_ORDER = 0x73EDA753299D7D483339D80809A1D80553BDA402FFFE5BFEFFFFFFFF00000001

# Width of the BLS12-381 big number serialization
FIELD_ELEMENT_SIZE = 48


class FieldElement(DomainInt):
    """Element of the BLS12-381 scalar field, bounded by the group order."""

    MAX = CURVE_ORDER
    SIZE = FIELD_ELEMENT_SIZE
    ZERO_CENTER_BITS = 254
    MODULAR = True

    __slots__ = ()
