"""Dashboard list views: which fields each tab searches and filters on."""

from __future__ import annotations

from sqlalchemy.orm import Session

from lottery_admin.repositories.draw_repository import DrawRecord
from lottery_admin.repositories.ticket_repository import TicketRecord
from lottery_admin.repositories.user_repository import UserRecord
from lottery_admin.repositories.winning_number_repository import WinningNumberRecord
from lottery_admin.services.draw_service import DrawService
from lottery_admin.services.ticket_service import TicketService
from lottery_admin.services.user_service import UserService
from lottery_admin.services.winning_number_service import WinningNumberService
from lottery_admin.utils.listing import DEFAULT_PAGE_SIZE, ListView

DRAW_FILTERS = ("status",)
WINNING_NUMBER_FILTERS = ("draw_id", "position")
TICKET_FILTERS = ("status", "source")


def draws_view(
    session: Session,
    service: DrawService | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ListView[DrawRecord]:
    svc = service or DrawService()
    return ListView(
        lambda: svc.list_draws(session),
        search_fields=(lambda d: d.id, lambda d: d.draw_date, lambda d: d.status),
        filter_fields={"status": lambda d: d.status},
        page_size=page_size,
    ).refresh()


def winning_numbers_view(
    session: Session,
    service: WinningNumberService | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ListView[WinningNumberRecord]:
    svc = service or WinningNumberService()
    return ListView(
        lambda: svc.list_winning_numbers(session),
        search_fields=(
            lambda wn: wn.winning_number,
            lambda wn: wn.position,
            lambda wn: wn.draw.draw_date if wn.draw else None,
        ),
        filter_fields={"draw_id": lambda wn: wn.draw_id, "position": lambda wn: wn.position},
        page_size=page_size,
    ).refresh()


def tickets_view(
    session: Session,
    service: TicketService | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ListView[TicketRecord]:
    svc = service or TicketService()
    return ListView(
        lambda: svc.list_tickets(session),
        search_fields=(
            lambda t: t.ticket_number,
            lambda t: t.user_email,
            lambda t: t.status,
            lambda t: t.source,
        ),
        filter_fields={"status": lambda t: t.status, "source": lambda t: t.source},
        page_size=page_size,
    ).refresh()


def users_view(
    session: Session,
    service: UserService | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> ListView[UserRecord]:
    svc = service or UserService()
    return ListView(
        lambda: svc.list_users(session),
        search_fields=(
            lambda u: u.email,
            lambda u: u.full_name,
            lambda u: u.phone_number,
            lambda u: u.id,
        ),
        page_size=page_size,
    ).refresh()
