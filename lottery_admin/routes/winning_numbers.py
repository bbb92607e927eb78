"""Winning number routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lottery_admin.db import get_session
from lottery_admin.errors import ValidationError
from lottery_admin.schemas.winning_number import (
    AvailablePositionsQuerySchema,
    BulkImportSchema,
    WinningNumberInputSchema,
    WinningNumberSchema,
    WinningNumberSummarySchema,
)
from lottery_admin.security import require_admin
from lottery_admin.services.draw_service import DrawService
from lottery_admin.services.listings import WINNING_NUMBER_FILTERS, winning_numbers_view
from lottery_admin.services.winning_number_service import WinningNumberService
from lottery_admin.utils.listing import apply_query
from lottery_admin.utils.responses import ok, page_payload

winning_numbers_bp = Blueprint("winning_numbers", __name__)

_input_schema = WinningNumberInputSchema()
_bulk_schema = BulkImportSchema()
_positions_query_schema = AvailablePositionsQuerySchema()
_schema = WinningNumberSchema()
_summary_schema = WinningNumberSummarySchema()
_service = WinningNumberService()
_draw_service = DrawService()


@winning_numbers_bp.before_request
def _require_admin() -> None:
    require_admin()


@winning_numbers_bp.get("/winning-numbers")
def list_winning_numbers():
    """List winning numbers, newest first, with dashboard statistics.

    Query params: q (code, position or draw date), draw_id, position, page.
    """

    session = get_session()
    view = winning_numbers_view(session, _service, current_app.config["PAGE_SIZE"])
    apply_query(view, request.args, WINNING_NUMBER_FILTERS)

    summary = _service.summarize(view.items, _draw_service.list_draws(session))
    payload = page_payload(view, _schema)
    payload["summary"] = _summary_schema.dump(summary)
    return ok(payload)


@winning_numbers_bp.get("/winning-numbers/available-positions")
def available_positions():
    """Positions still free in a draw; ``exhausted`` disables the add form."""

    query = _positions_query_schema.load(request.args)
    positions = _service.available_positions(get_session(), query["draw_id"], query["exclude_id"])
    return ok(
        {
            "draw_id": query["draw_id"],
            "positions": positions,
            "exhausted": not positions and query["exclude_id"] is None,
        }
    )


@winning_numbers_bp.get("/winning-numbers/<int:winning_number_id>")
def get_winning_number(winning_number_id: int):
    return ok(_schema.dump(_service.get_winning_number(get_session(), winning_number_id)))


@winning_numbers_bp.post("/winning-numbers")
def create_winning_number():
    payload = request.get_json(silent=True) or {}
    data = _input_schema.load(payload)

    created = _service.create_winning_number(get_session(), **data)
    return ok(_schema.dump(created), status_code=201)


@winning_numbers_bp.post("/winning-numbers/bulk")
def bulk_import():
    """Add ``code,position,prize`` lines to one draw, all or nothing."""

    payload = request.get_json(silent=True) or {}
    data = _bulk_schema.load(payload)

    created = _service.bulk_import(get_session(), data["draw_id"], data["lines"])
    return ok({"created": len(created), "items": _schema.dump(created, many=True)}, status_code=201)


@winning_numbers_bp.patch("/winning-numbers/<int:winning_number_id>")
def update_winning_number(winning_number_id: int):
    payload = request.get_json(silent=True) or {}
    data = _input_schema.load(payload, partial=True)
    if not data:
        raise ValidationError("No fields to update")

    updated = _service.update_winning_number(get_session(), winning_number_id, data)
    return ok(_schema.dump(updated))


@winning_numbers_bp.delete("/winning-numbers/<int:winning_number_id>")
def delete_winning_number(winning_number_id: int):
    _service.delete_winning_number(get_session(), winning_number_id)
    return ok({"id": winning_number_id, "deleted": True})
