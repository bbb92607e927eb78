"""Web page routes: the login form and the tabbed dashboard."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from flask import Blueprint, current_app, redirect, render_template, request, session as cookie_session, url_for
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.orm import Session

from lottery_admin.db import get_session
from lottery_admin.errors import AuthenticationError
from lottery_admin.models.draw import DRAW_STATUSES
from lottery_admin.models.ticket import TICKET_SOURCES, TICKET_STATUSES
from lottery_admin.schemas.auth import LoginSchema
from lottery_admin.security import current_identity, is_admin
from lottery_admin.services.auth_service import AuthService
from lottery_admin.services.draw_service import DrawService
from lottery_admin.services.listings import (
    DRAW_FILTERS,
    TICKET_FILTERS,
    WINNING_NUMBER_FILTERS,
    draws_view,
    tickets_view,
    users_view,
    winning_numbers_view,
)
from lottery_admin.services.winning_number_rules import ALL_POSITIONS
from lottery_admin.utils.formatting import format_currency, format_date, format_datetime
from lottery_admin.utils.listing import ListView, apply_query

web_bp = Blueprint("web", __name__)

TABS = ("draws", "winning_numbers", "users", "tickets")

_login_schema = LoginSchema()
_auth = AuthService()
_draw_service = DrawService()


@dataclass
class TabTable:
    title: str
    columns: list[str]
    rows: list[list[str]]
    pagination: dict[str, int]
    page_links: list[tuple[int, str]] = field(default_factory=list)
    filters: list[tuple[str, str, list[tuple[str, str]]]] = field(default_factory=list)


def _page_size() -> int:
    return int(current_app.config.get("PAGE_SIZE", 10))


def _currency(amount: float | None) -> str:
    return format_currency(amount, current_app.config.get("CURRENCY", "ETB"))


def _table(title: str, columns: list[str], view: ListView[Any], rows: list[list[str]], args: Mapping[str, str]) -> TabTable:
    query = {k: v for k, v in args.items() if k != "page"}
    links = [(n, url_for("web.dashboard", **query, page=n)) for n in range(1, view.total_pages + 1)]
    return TabTable(title=title, columns=columns, rows=rows, pagination=view.page_info(), page_links=links)


def _draws_tab(session: Session, args: Mapping[str, str]) -> TabTable:
    view = apply_query(draws_view(session, _draw_service, _page_size()), args, DRAW_FILTERS)
    rows = [
        [str(d.id), format_date(d.draw_date), _currency(d.jackpot_amount), d.status, format_date(d.created_at)]
        for d in view.page_items
    ]
    table = _table("Manage Draws", ["ID", "Draw Date", "Jackpot Amount", "Status", "Created At"], view, rows, args)
    table.filters = [("status", "Status", [("all", "All")] + [(s, s.title()) for s in DRAW_STATUSES])]
    return table


def _winning_numbers_tab(session: Session, args: Mapping[str, str]) -> TabTable:
    view = apply_query(winning_numbers_view(session, page_size=_page_size()), args, WINNING_NUMBER_FILTERS)
    rows = [
        [
            f"#{wn.id}",
            format_date(wn.draw.draw_date) if wn.draw else "",
            wn.winning_number,
            f"#{wn.position}",
            _currency(wn.prize_amount),
            format_date(wn.created_at),
        ]
        for wn in view.page_items
    ]
    table = _table(
        "Manage Winning Numbers",
        ["ID", "Draw", "Winning Number", "Position", "Prize Amount", "Created"],
        view,
        rows,
        args,
    )
    draws = _draw_service.list_draws(session)
    table.filters = [
        ("draw_id", "Draw", [("all", "All Draws")] + [(str(d.id), format_date(d.draw_date)) for d in draws]),
        ("position", "Position", [("all", "All Positions")] + [(str(p), f"Position {p}") for p in ALL_POSITIONS]),
    ]
    return table


def _users_tab(session: Session, args: Mapping[str, str]) -> TabTable:
    view = apply_query(users_view(session, page_size=_page_size()), args)
    rows = [
        [f"#{u.id}", u.email, u.full_name or "N/A", u.phone_number or "N/A", format_datetime(u.created_at)]
        for u in view.page_items
    ]
    return _table("User Management", ["User ID", "Email", "Full Name", "Phone Number", "Joined"], view, rows, args)


def _tickets_tab(session: Session, args: Mapping[str, str]) -> TabTable:
    view = apply_query(tickets_view(session, page_size=_page_size()), args, TICKET_FILTERS)
    rows = [
        [
            str(t.id),
            t.user_email or "",
            t.ticket_number,
            format_date(t.draw_date),
            t.status,
            t.source,
            _currency(t.prize_amount),
        ]
        for t in view.page_items
    ]
    table = _table(
        "Manage Tickets",
        ["ID", "User Email", "Ticket Number", "Draw Date", "Status", "Source", "Prize"],
        view,
        rows,
        args,
    )
    table.filters = [
        ("status", "Status", [("all", "All")] + [(s, s.title()) for s in TICKET_STATUSES]),
        ("source", "Source", [("all", "All")] + [(s, s) for s in TICKET_SOURCES]),
    ]
    return table


_TAB_BUILDERS: dict[str, Callable[[Session, Mapping[str, str]], TabTable]] = {
    "draws": _draws_tab,
    "winning_numbers": _winning_numbers_tab,
    "users": _users_tab,
    "tickets": _tickets_tab,
}


@web_bp.get("/")
def dashboard():
    identity = current_identity()
    if identity is None:
        return render_template("denied.html", message="Authentication failed"), 401
    if not is_admin(identity):
        return render_template("denied.html", message="Access denied: Admin only"), 403

    tab = request.args.get("tab", "draws")
    if tab not in _TAB_BUILDERS:
        tab = "draws"
    table = _TAB_BUILDERS[tab](get_session(), request.args)
    return render_template(
        "dashboard.html",
        identity=identity,
        tabs=TABS,
        active_tab=tab,
        table=table,
        args=request.args,
    )


@web_bp.get("/login")
def login_form():
    return render_template("login.html", error=None, email="")


@web_bp.post("/login")
def login_submit():
    email = request.form.get("email", "")
    try:
        data = _login_schema.load({"email": email, "password": request.form.get("password", "")})
        _auth.sign_in_with_password(get_session(), cookie_session, email=data["email"], password=data["password"])
    except MarshmallowValidationError:
        return render_template("login.html", error="Enter a valid email and password", email=email), 400
    except AuthenticationError as exc:
        return render_template("login.html", error=exc.message, email=email), 401
    return redirect(url_for("web.dashboard"))


@web_bp.post("/logout")
def logout():
    _auth.sign_out(cookie_session)
    return redirect(url_for("web.login_form"))
