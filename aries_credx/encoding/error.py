"""Attribute encoding exceptions."""

from ..core.error import BaseError


class EncodeError(BaseError):
    """Base class for attribute encoding errors."""


class MalformedInputError(EncodeError):
    """An input value could not be parsed into the expected source type."""


class DomainOverflowError(EncodeError):
    """A value does not fit the bounds of the target integer domain."""
