"""Ticket routes (controllers). No business logic here."""

from __future__ import annotations

from flask import Blueprint, current_app, request

from lottery_admin.db import get_session
from lottery_admin.errors import ValidationError
from lottery_admin.schemas.ticket import TicketInputSchema, TicketSchema
from lottery_admin.security import require_admin
from lottery_admin.services.listings import TICKET_FILTERS, tickets_view
from lottery_admin.services.ticket_service import TicketService
from lottery_admin.utils.listing import apply_query
from lottery_admin.utils.responses import ok, page_payload

tickets_bp = Blueprint("tickets", __name__)

_input_schema = TicketInputSchema()
_schema = TicketSchema()
_service = TicketService()


@tickets_bp.before_request
def _require_admin() -> None:
    require_admin()


@tickets_bp.get("/tickets")
def list_tickets():
    """Query params: q (number, email, status, source), status, source, page."""

    view = tickets_view(get_session(), _service, current_app.config["PAGE_SIZE"])
    apply_query(view, request.args, TICKET_FILTERS)
    return ok(page_payload(view, _schema))


@tickets_bp.get("/tickets/<int:ticket_id>")
def get_ticket(ticket_id: int):
    return ok(_schema.dump(_service.get_ticket(get_session(), ticket_id)))


@tickets_bp.post("/tickets")
def create_ticket():
    payload = request.get_json(silent=True) or {}
    data = _input_schema.load(payload)

    ticket = _service.create_ticket(get_session(), data)
    return ok(_schema.dump(ticket), status_code=201)


@tickets_bp.patch("/tickets/<int:ticket_id>")
def update_ticket(ticket_id: int):
    payload = request.get_json(silent=True) or {}
    data = _input_schema.load(payload, partial=True)
    if not data:
        raise ValidationError("No fields to update")

    ticket = _service.update_ticket(get_session(), ticket_id, data)
    return ok(_schema.dump(ticket))


@tickets_bp.delete("/tickets/<int:ticket_id>")
def delete_ticket(ticket_id: int):
    _service.delete_ticket(get_session(), ticket_id)
    return ok({"id": ticket_id, "deleted": True})
