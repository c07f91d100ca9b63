"""Schemas for the number drawing API."""

from __future__ import annotations

from marshmallow import EXCLUDE, Schema, fields, validate

from drawbox.services.history_ledger import Actor
from drawbox.services.override_resolver import DrawSource
from drawbox.services.range_spec import BOUND_LIMIT
from drawbox.services.reveal_scheduler import RevealEventKind


_bound = validate.Range(min=-BOUND_LIMIT, max=BOUND_LIMIT)


class DrawRequestSchema(Schema):
    """JSON body. Numbers must already be integers; 1.5 is rejected, not truncated."""

    class Meta:
        unknown = EXCLUDE

    # Bounds may come in either order; count is clamped by the service.
    min_value = fields.Integer(data_key="min", strict=True, required=False, load_default=1, validate=_bound)
    max_value = fields.Integer(data_key="max", strict=True, required=False, load_default=100, validate=_bound)
    count = fields.Integer(strict=True, required=False, load_default=1)
    unique = fields.Boolean(required=False, load_default=False)


class DrawQuerySchema(DrawRequestSchema):
    """Query string: values arrive as text, so "5" parses and "1.5" does not."""

    min_value = fields.Integer(data_key="min", required=False, load_default=1, validate=_bound)
    max_value = fields.Integer(data_key="max", required=False, load_default=100, validate=_bound)
    count = fields.Integer(required=False, load_default=1)


class DrawResponseSchema(Schema):
    values = fields.List(fields.Integer(), required=True)
    timestamp = fields.DateTime(required=True)

    # Only present for admin callers.
    source = fields.Enum(DrawSource, by_value=True, required=False)

    frames = fields.List(fields.List(fields.Integer()), required=False)


class RevealEventSchema(Schema):
    kind = fields.Enum(RevealEventKind, by_value=True)
    frame = fields.Integer()
    values = fields.List(fields.Integer())


class HistoryEntrySchema(Schema):
    value = fields.String()
    actor = fields.Enum(Actor, by_value=True)
    timestamp = fields.String()
