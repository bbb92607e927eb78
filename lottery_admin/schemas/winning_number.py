"""Schemas for winning numbers."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from lottery_admin.schemas.draw import DrawSchema
from lottery_admin.utils.formatting import format_currency

_SELECT_DRAW = {"required": "Please select a draw first", "null": "Please select a draw first"}


class WinningNumberInputSchema(Schema):
    """Types only; format, range and uniqueness live in winning_number_rules."""

    draw_id = fields.Integer(required=True, strict=True, error_messages=_SELECT_DRAW)
    winning_number = fields.String(required=True)
    position = fields.Integer(required=True, strict=True)
    prize_amount = fields.Float(required=True, validate=validate.Range(min=0))


class BulkImportSchema(Schema):
    draw_id = fields.Integer(required=True, strict=True, error_messages=_SELECT_DRAW)
    lines = fields.String(required=True)


class AvailablePositionsQuerySchema(Schema):
    # Query-string values arrive as text; "2.5" still fails int() parsing.
    draw_id = fields.Integer(required=True, error_messages=_SELECT_DRAW)
    exclude_id = fields.Integer(required=False, load_default=None, allow_none=True)


class WinningNumberSchema(Schema):
    """Serialize WinningNumberRecord with its draw."""

    id = fields.Int(required=True)
    draw_id = fields.Int(required=True)
    winning_number = fields.Str(required=True)
    position = fields.Int(required=True)
    prize_amount = fields.Float(required=True)
    prize_display = fields.Function(lambda wn: format_currency(wn.prize_amount))
    created_at = fields.DateTime()
    draw = fields.Nested(DrawSchema, only=("id", "draw_date", "jackpot_amount", "status"), allow_none=True)


class WinningNumberSummarySchema(Schema):
    top_three_count = fields.Int()
    active_draws = fields.Int()
    total_prize_amount = fields.Float()
    total_prize_display = fields.Function(lambda s: format_currency(s.total_prize_amount))
