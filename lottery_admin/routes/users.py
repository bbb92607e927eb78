"""User routes (controllers). Users are read and deleted, never edited here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lottery_admin.db import get_session
from lottery_admin.schemas.user import UserDetailSchema, UserSchema
from lottery_admin.security import require_admin
from lottery_admin.services.listings import users_view
from lottery_admin.services.user_service import UserService
from lottery_admin.utils.listing import apply_query
from lottery_admin.utils.responses import ok, page_payload

users_bp = Blueprint("users", __name__)

_schema = UserSchema()
_detail_schema = UserDetailSchema()
_service = UserService()


@users_bp.before_request
def _require_admin() -> None:
    require_admin()


@users_bp.get("/users")
def list_users():
    """Query params: q (email, name, phone or id), page."""

    view = users_view(get_session(), _service, current_app.config["PAGE_SIZE"])
    apply_query(view, request.args)
    return ok(page_payload(view, _schema))


@users_bp.get("/users/<user_id>")
def get_user(user_id: str):
    return ok(_detail_schema.dump(_service.get_user_detail(get_session(), user_id)))


@users_bp.delete("/users/<user_id>")
def delete_user(user_id: str):
    """Delete the user and every ticket they own."""

    removed = _service.delete_user(get_session(), user_id)
    return ok({"id": user_id, "deleted": True, "tickets_deleted": removed})
