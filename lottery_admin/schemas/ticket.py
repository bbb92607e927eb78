"""Schemas for tickets."""

from __future__ import annotations

from marshmallow import Schema, fields, validate

from lottery_admin.models.ticket import TICKET_SOURCES, TICKET_STATUSES
from lottery_admin.utils.formatting import format_currency


class TicketInputSchema(Schema):
    """Validate create payloads; load with ``partial=True`` for updates."""

    user_id = fields.String(required=True, validate=validate.Length(min=1, max=36))
    draw_id = fields.Integer(required=True, strict=True)
    ticket_number = fields.String(required=True, validate=validate.Length(min=1, max=64))
    status = fields.String(required=False, load_default="active", validate=validate.OneOf(TICKET_STATUSES))
    source = fields.String(required=False, load_default="Manual", validate=validate.OneOf(TICKET_SOURCES))
    prize_amount = fields.Float(required=False, load_default=0.0, validate=validate.Range(min=0))


class TicketSchema(Schema):
    """Serialize TicketRecord."""

    id = fields.Int(required=True)
    user_id = fields.Str(required=True)
    user_email = fields.Str(allow_none=True)
    draw_id = fields.Int(required=True)
    draw_date = fields.Date(allow_none=True)
    ticket_number = fields.Str(required=True)
    status = fields.Str(required=True)
    source = fields.Str(required=True)
    prize_amount = fields.Float()
    prize_display = fields.Function(lambda t: format_currency(t.prize_amount))
    created_at = fields.DateTime()
