"""Schemas for lottery users."""

from __future__ import annotations

from marshmallow import Schema, fields

from lottery_admin.schemas.ticket import TicketSchema


class UserSchema(Schema):
    id = fields.Str(required=True)
    email = fields.Str(required=True)
    full_name = fields.Str(allow_none=True)
    phone_number = fields.Str(allow_none=True)
    created_at = fields.DateTime()


class UserDetailSchema(Schema):
    """A user with their tickets and ticket counts."""

    user = fields.Nested(UserSchema)
    tickets = fields.List(fields.Nested(TicketSchema))
    active_count = fields.Int()
    winner_count = fields.Int()
