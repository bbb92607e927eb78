"""Schemas for draw management."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from lottery_admin.models.draw import DRAW_STATUSES
from lottery_admin.utils.formatting import format_currency


class DrawInputSchema(Schema):
    """Validate create payloads; load with ``partial=True`` for updates."""

    draw_date = fields.Date(required=True)
    jackpot_amount = fields.Float(required=True, validate=validate.Range(min=0))
    status = fields.String(
        required=False,
        load_default="upcoming",
        validate=validate.OneOf(DRAW_STATUSES),
    )


class DrawSchema(Schema):
    """Serialize DrawRecord."""

    id = fields.Int(required=True)
    draw_date = fields.Date(required=True)
    jackpot_amount = fields.Float(required=True)
    jackpot_display = fields.Function(lambda draw: format_currency(draw.jackpot_amount))
    status = fields.Str(required=True)
    created_at = fields.DateTime()
