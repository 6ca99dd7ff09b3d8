"""Validators and schemas for attribute values supplied as data."""

import math
import re

from marshmallow import Schema, ValidationError, fields, validates_schema
from marshmallow.fields import Field
from marshmallow.validate import OneOf, Regexp

from .dates import RFC3339_PATTERN, parse_rfc3339
from .encoder import (
    ATTRIBUTE_KINDS,
    KIND_DAYS,
    KIND_FLOAT,
    KIND_TIMESTAMP,
    KIND_UNSIGNED,
)
from .error import MalformedInputError


class StrOrNumberField(Field):
    """String or Number field for Marshmallow."""

    def _deserialize(self, value, attr, data, **kwargs):
        if not isinstance(value, (str, float, int)):
            raise ValidationError("Field should be str or int or float")
        return super()._deserialize(value, attr, data, **kwargs)


class RFC3339DateTime(Regexp):
    """Validate value against RFC3339 datetime format."""

    EXAMPLE = "2018-01-26T18:30:09.453+00:00"
    PATTERN = re.compile(rf"{RFC3339_PATTERN.pattern}\Z", RFC3339_PATTERN.flags)

    def __init__(self):
        """Initializer."""

        super().__init__(
            RFC3339DateTime.PATTERN,
            error="Value {input} is not a date in valid format",
        )

    def __call__(self, value):
        """Validate the grammar, then the calendar and offset ranges."""
        super().__call__(value)
        try:
            parse_rfc3339(value)
        except MalformedInputError as err:
            raise ValidationError(self._format_error(value)) from err
        return value


RFC3339_DATETIME = {"validate": RFC3339DateTime(), "example": RFC3339DateTime.EXAMPLE}


def _as_double(value: int) -> float:
    try:
        return float(value)
    except OverflowError:
        return math.inf


class AttributeValueSchema(Schema):
    """A raw attribute value tagged with the kind of encoding to apply."""

    kind = fields.Str(
        required=True,
        validate=OneOf(list(ATTRIBUTE_KINDS)),
        metadata={"description": "Attribute kind", "example": KIND_FLOAT},
    )
    value = StrOrNumberField(
        required=True,
        metadata={"description": "Raw attribute value", "example": 1.33},
    )

    @validates_schema
    def validate_fields(self, data, **kwargs):
        """Check that the value type suits the attribute kind."""
        kind = data.get("kind")
        value = data.get("value")
        if kind in (KIND_TIMESTAMP, KIND_DAYS):
            if not isinstance(value, str):
                raise ValidationError(
                    f"Attribute of kind {kind} requires an RFC3339 string", "value"
                )
            RFC3339_DATETIME["validate"](value)
        elif kind == KIND_FLOAT:
            if isinstance(value, (str, bool)):
                raise ValidationError(
                    "Attribute of kind float requires a number", "value"
                )
            if isinstance(value, int) and not math.isfinite(_as_double(value)):
                raise ValidationError(
                    "Attribute of kind float is beyond the double range", "value"
                )
        elif not isinstance(value, int) or isinstance(value, bool):
            raise ValidationError(
                f"Attribute of kind {kind} requires an integer", "value"
            )
        elif kind == KIND_UNSIGNED and value < 0:
            raise ValidationError(
                "Attribute of kind unsigned requires a non-negative integer", "value"
            )


class AttributesSchema(Schema):
    """Named credential attributes to encode."""

    attributes = fields.Dict(
        keys=fields.Str(),
        values=fields.Nested(AttributeValueSchema()),
        required=True,
        metadata={"description": "Attribute values keyed by attribute name"},
    )
