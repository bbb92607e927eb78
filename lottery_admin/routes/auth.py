"""JSON sign-in API."""

from __future__ import annotations

from flask import Blueprint, request, session as cookie_session

from lottery_admin.db import get_session
from lottery_admin.errors import AuthenticationError
from lottery_admin.schemas.auth import AuthSessionSchema, LoginSchema
from lottery_admin.services.auth_service import AuthService
from lottery_admin.utils.responses import ok

auth_bp = Blueprint("auth", __name__)

_login_schema = LoginSchema()
_session_schema = AuthSessionSchema()
_service = AuthService()


@auth_bp.post("/auth/login")
def login():
    payload = request.get_json(silent=True) or {}
    data = _login_schema.load(payload)

    current = _service.sign_in_with_password(
        get_session(), cookie_session, email=data["email"], password=data["password"]
    )
    return ok(_session_schema.dump(current))


@auth_bp.get("/auth/session")
def current_session():
    current = _service.get_session(get_session(), cookie_session)
    if current is None:
        raise AuthenticationError("Not signed in")
    return ok(_session_schema.dump(current))


@auth_bp.post("/auth/logout")
def logout():
    _service.sign_out(cookie_session)
    return ok({"signed_out": True})
