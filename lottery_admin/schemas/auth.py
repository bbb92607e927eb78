"""Schemas for sign-in."""

from __future__ import annotations

from marshmallow import Schema, fields, validate


class LoginSchema(Schema):
    email = fields.Email(required=True)
    password = fields.String(required=True, validate=validate.Length(min=1))


class IdentitySchema(Schema):
    id = fields.Str()
    email = fields.Str()
    role = fields.Str(allow_none=True)


class AuthSessionSchema(Schema):
    user = fields.Nested(IdentitySchema)
    signed_in_at = fields.DateTime()
