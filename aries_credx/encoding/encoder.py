"""Attribute encoder, generic over the target integer domain."""

import logging
import math

from datetime import datetime
from typing import Any, Mapping, Type, Union

from ..config.base import BaseSettings, ConfigError
from ..utils.classloader import ClassLoader, ClassNotFoundError, ModuleLoadError
from . import floats
from .backends.bls381 import FieldElement
from .dates import days_since_1900, epoch_seconds, parse_rfc3339
from .domain import DomainInt
from .error import DomainOverflowError, EncodeError
from .floats import FloatCategory

LOGGER = logging.getLogger(__name__)

# Public sentinels for degenerate doubles; +inf is encoded as MAX - 9
NAN_SENTINEL = 1
SUBNORMAL_SENTINEL = 2
NEG_INFINITY_SENTINEL = 8
POS_INFINITY_OFFSET = 9

BACKENDS = {
    "bls381": "aries_credx.encoding.backends.bls381.FieldElement",
    "rsa-native": "aries_credx.encoding.backends.rsa_native.RingInteger",
}
DEFAULT_BACKEND = "bls381"

KIND_TIMESTAMP = "timestamp"
KIND_DAYS = "days"
KIND_FLOAT = "float"
KIND_SIGNED = "signed"
KIND_UNSIGNED = "unsigned"
ATTRIBUTE_KINDS = {
    KIND_TIMESTAMP: "encode_timestamp",
    KIND_DAYS: "encode_days_since_epoch",
    KIND_FLOAT: "encode_float",
    KIND_SIGNED: "encode_signed_int",
    KIND_UNSIGNED: "encode_unsigned_int",
}


def load_domain(backend: str = None) -> Type[DomainInt]:
    """
    Resolve an encoding backend to its domain class.

    Args:
        backend: a backend alias (see `BACKENDS`), a class path, or the path of
            a module defining a `DomainInt` implementation

    Returns:
        The domain class

    Raises:
        ConfigError: If the backend cannot be resolved

    """
    backend = backend or DEFAULT_BACKEND
    path = BACKENDS.get(backend, backend)
    try:
        try:
            domain = ClassLoader.load_class(path)
        except ClassNotFoundError:
            domain = ClassLoader.load_subclass_of(DomainInt, path)
    except (ClassNotFoundError, ModuleLoadError) as err:
        raise ConfigError(f"Unknown attribute encoding backend: {backend}") from err
    if not issubclass(domain, DomainInt):
        raise ConfigError(f"Backend class is not a DomainInt: {path}")
    if not domain.is_concrete():
        raise ConfigError(f"Backend class does not define its bounds: {path}")
    LOGGER.debug("Loaded attribute encoding backend %s", path)
    return domain


class AttributeEncoder:
    """
    Encode attribute values as elements of a bounded integer domain.

    Every encoding is offset around the domain's zero-center so that signed
    values keep their ordering under unsigned integer comparison. Finite
    encodings stay within `2^MAGNITUDE_BITS` of the zero-center, which keeps
    them clear of the float sentinels at both ends of the domain.
    """

    def __init__(self, domain: Type[DomainInt] = FieldElement):
        """
        Initialize an encoder for a domain.

        Args:
            domain: the domain class encoded values are instances of

        Raises:
            ConfigError: If the domain is too narrow for the encoding layout

        """
        if not (isinstance(domain, type) and issubclass(domain, DomainInt)):
            raise ConfigError(f"Not a DomainInt implementation: {domain!r}")
        if not domain.is_concrete():
            raise ConfigError(f"{domain.__name__} does not define its bounds")
        zero = 1 << domain.ZERO_CENTER_BITS
        band = 1 << floats.MAGNITUDE_BITS
        if (
            zero - band <= NEG_INFINITY_SENTINEL
            or zero + band > domain.MAX - POS_INFINITY_OFFSET
        ):
            raise ConfigError(f"{domain.__name__} is too narrow for attribute encoding")
        self._domain = domain
        self._zero_center = domain.zero_center()

    @classmethod
    def from_settings(cls, settings: BaseSettings) -> "AttributeEncoder":
        """Create an encoder for the backend named by the `encoding.backend` setting."""
        backend = settings.get_str("encoding.backend", default=DEFAULT_BACKEND)
        return cls(load_domain(backend))

    @property
    def domain(self) -> Type[DomainInt]:
        """Accessor for the domain class."""
        return self._domain

    @property
    def zero_center(self) -> DomainInt:
        """Accessor for the zero-center offset."""
        return self._zero_center

    @property
    def max_value(self) -> int:
        """Accessor for the exclusive upper bound of the domain."""
        return self._domain.MAX

    def _offset(self, sign: int, magnitude: Union[int, DomainInt]) -> DomainInt:
        if int(magnitude) >> floats.MAGNITUDE_BITS:
            raise DomainOverflowError(
                f"Magnitude exceeds {floats.MAGNITUDE_BITS} bits: {int(magnitude)}"
            )
        if sign < 0:
            return self._zero_center - magnitude
        return self._zero_center + magnitude

    def encode_timestamp(self, value: Union[str, datetime]) -> DomainInt:
        """
        Encode an RFC3339 date-time as seconds since the Unix epoch.

        Dates before 1970 encode below the zero-center.

        Raises:
            MalformedInputError: If the value is not a valid RFC3339 date-time

        """
        return self.encode_signed_int(epoch_seconds(parse_rfc3339(value)))

    def encode_days_since_epoch(self, value: Union[str, datetime]) -> DomainInt:
        """
        Encode an RFC3339 date-time as whole days since 1900-01-01T00:00:00Z.

        Raises:
            MalformedInputError: If the value is not a valid RFC3339 date-time

        """
        return self.encode_signed_int(days_since_1900(parse_rfc3339(value)))

    def encode_signed_int(self, value: int) -> DomainInt:
        """Encode a signed integer."""
        if not isinstance(value, int):
            raise TypeError(f"Expected an int, got {type(value).__name__}")
        return self._offset(-1 if value < 0 else 1, abs(value))

    def encode_unsigned_int(self, value: int) -> DomainInt:
        """Encode an unsigned integer."""
        if not isinstance(value, int):
            raise TypeError(f"Expected an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"Expected an unsigned int, got {value}")
        return self._offset(1, value)

    def encode_float(self, value: float) -> DomainInt:
        """
        Encode a double.

        Total over all doubles: NaN, subnormals and infinities map onto fixed
        sentinels, zero of either sign maps onto the zero-center. Integers
        beyond the double range round to the infinity of their sign.
        """
        if not isinstance(value, (int, float)):
            raise TypeError(f"Expected a float, got {type(value).__name__}")
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf
        return self._FLOAT_ENCODERS[floats.classify(value)](self, value)

    def _encode_nan(self, value: float) -> DomainInt:
        return self._domain(NAN_SENTINEL)

    def _encode_subnormal(self, value: float) -> DomainInt:
        return self._domain(SUBNORMAL_SENTINEL)

    def _encode_zero(self, value: float) -> DomainInt:
        return self._zero_center

    def _encode_infinite(self, value: float) -> DomainInt:
        if value > 0:
            return self._domain(self._domain.MAX - POS_INFINITY_OFFSET)
        return self._domain(NEG_INFINITY_SENTINEL)

    def _encode_normal(self, value: float) -> DomainInt:
        sign, magnitude = floats.scaled_magnitude(value)
        scaled = self._domain.from_bytes(
            magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")
        )
        return self._offset(sign, scaled)

    _FLOAT_ENCODERS = {
        FloatCategory.NAN: _encode_nan,
        FloatCategory.SUBNORMAL: _encode_subnormal,
        FloatCategory.ZERO: _encode_zero,
        FloatCategory.INFINITE: _encode_infinite,
        FloatCategory.NORMAL: _encode_normal,
    }

    def encode(self, value: Any) -> DomainInt:
        """
        Encode a value according to its Python type.

        Integers (and booleans) use the signed encoding, floats the float
        encoding, strings and datetimes the timestamp encoding.
        """
        if isinstance(value, int):
            return self.encode_signed_int(value)
        if isinstance(value, float):
            return self.encode_float(value)
        if isinstance(value, (str, datetime)):
            return self.encode_timestamp(value)
        raise TypeError(f"Unsupported attribute type: {type(value).__name__}")

    def encode_as(self, kind: str, value: Any) -> DomainInt:
        """
        Encode a value as the named kind of attribute.

        Args:
            kind: one of `timestamp`, `days`, `float`, `signed`, `unsigned`
            value: the raw attribute value

        Raises:
            EncodeError: If the kind is unknown or the value cannot be encoded

        """
        method = ATTRIBUTE_KINDS.get(kind)
        if not method:
            raise EncodeError(f"Unknown attribute kind: {kind}")
        return getattr(self, method)(value)

    def encode_attributes(self, attributes: Mapping[str, Any]) -> dict:
        """
        Encode a credential's named attribute values.

        Args:
            attributes: mapping of attribute name to either a raw value or a
                `{"kind": ..., "value": ...}` mapping

        Returns:
            A dict of attribute name to encoded value

        """
        encoded = {}
        for name, attr in attributes.items():
            if isinstance(attr, Mapping):
                encoded[name] = self.encode_as(attr.get("kind"), attr.get("value"))
            else:
                encoded[name] = self.encode(attr)
        return encoded
