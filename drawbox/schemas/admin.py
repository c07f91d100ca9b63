"""Schemas for admin login and override management."""

from __future__ import annotations

from marshmallow import Schema, ValidationError, fields, validate, validates_schema


class LoginSchema(Schema):
    username = fields.String(required=True)
    password = fields.String(required=True)


# Queued values land in a signed 64-bit column.
_stored = validate.Range(min=-(2**63), max=2**63 - 1)


class OverrideRequestSchema(Schema):
    """Either one ``value`` or an ordered ``values`` list."""

    value = fields.Integer(
        required=False, load_default=None, allow_none=True, strict=True, validate=_stored
    )
    values = fields.List(
        fields.Integer(strict=True, validate=_stored),
        required=False,
        load_default=None,
        validate=validate.Length(min=1, max=1000),
    )

    @validates_schema
    def _validate_one_of(self, data, **kwargs):  # type: ignore[no-untyped-def]
        has_value = data.get("value") is not None
        has_values = data.get("values") is not None
        if has_value == has_values:
            raise ValidationError({"value": ["Provide exactly one of value or values"]})
