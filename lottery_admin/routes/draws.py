"""Draw routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lottery_admin.db import get_session
from lottery_admin.errors import ValidationError
from lottery_admin.schemas.draw import DrawInputSchema, DrawSchema
from lottery_admin.security import require_admin
from lottery_admin.services.draw_service import DrawService
from lottery_admin.services.listings import DRAW_FILTERS, draws_view
from lottery_admin.utils.listing import apply_query
from lottery_admin.utils.responses import ok, page_payload

draws_bp = Blueprint("draws", __name__)

_input_schema = DrawInputSchema()
_draw_schema = DrawSchema()
_service = DrawService()


@draws_bp.before_request
def _require_admin() -> None:
    require_admin()


@draws_bp.get("/draws")
def list_draws():
    """List draws, newest draw date first.

    Query params: q (search), status, page.
    """

    view = draws_view(get_session(), _service, current_app.config["PAGE_SIZE"])
    apply_query(view, request.args, DRAW_FILTERS)
    return ok(page_payload(view, _draw_schema))


@draws_bp.get("/draws/<int:draw_id>")
def get_draw(draw_id: int):
    return ok(_draw_schema.dump(_service.get_draw(get_session(), draw_id)))


@draws_bp.post("/draws")
def create_draw():
    payload = request.get_json(silent=True) or {}
    data = _input_schema.load(payload)

    draw = _service.create_draw(get_session(), **data)

    # Commit occurs in teardown if no exception.
    return ok(_draw_schema.dump(draw), status_code=201)


@draws_bp.patch("/draws/<int:draw_id>")
def update_draw(draw_id: int):
    payload = request.get_json(silent=True) or {}
    data = _input_schema.load(payload, partial=True)
    if not data:
        raise ValidationError("No fields to update")

    draw = _service.update_draw(get_session(), draw_id, data)
    return ok(_draw_schema.dump(draw))


@draws_bp.delete("/draws/<int:draw_id>")
def delete_draw(draw_id: int):
    _service.delete_draw(get_session(), draw_id)
    return ok({"id": draw_id, "deleted": True})
