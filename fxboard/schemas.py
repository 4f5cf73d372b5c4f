"""Marshmallow schemas for request arguments and API responses."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class HealthStatusSchema(Schema):
    status = fields.String(required=True)
    app = fields.String()
    provider = fields.String()


class HistoryQuerySchema(Schema):
    base = fields.String(load_default=None)
    days = fields.Integer(load_default=None, validate=validate.Range(min=1))


class HistoryResponseSchema(Schema):
    success = fields.Boolean(required=True)
    base = fields.String(required=True)
    data = fields.Dict(
        keys=fields.String(),
        values=fields.List(fields.Float(allow_none=True)),
    )
    dates = fields.List(fields.Date())
    message = fields.String()


class LiveRateSchema(Schema):
    code = fields.String(required=True)
    rate = fields.String(required=True)


class LiveRatesResponseSchema(Schema):
    ok = fields.Boolean(required=True)
    base = fields.String(required=True)
    text = fields.String(required=True)
    rates = fields.List(fields.Nested(LiveRateSchema), required=True)


class SnapshotRowSchema(Schema):
    code = fields.String(required=True)
    rate = fields.String(required=True)


class SnapshotResponseSchema(Schema):
    available = fields.Boolean(required=True)
    rows = fields.List(fields.Nested(SnapshotRowSchema), required=True)
    message = fields.String()
