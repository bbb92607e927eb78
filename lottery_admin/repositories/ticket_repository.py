"""Repository layer for Ticket persistence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lottery_admin.models.draw import Draw
from lottery_admin.models.ticket import Ticket
from lottery_admin.models.user import User


@dataclass(frozen=True)
class TicketRecord:
    id: int
    user_id: str
    draw_id: int
    ticket_number: str
    status: str
    source: str
    prize_amount: float
    created_at: datetime
    user_email: str | None = None
    draw_date: date | None = None


class TicketRepository:
    """CRUD operations for Ticket, joined with the owner's email and draw date."""

    def _select(self):  # type: ignore[no-untyped-def]
        return (
            select(Ticket, User.email, Draw.draw_date)
            .outerjoin(User, Ticket.user_id == User.id)
            .outerjoin(Draw, Ticket.draw_id == Draw.id)
            .order_by(Ticket.created_at.desc(), Ticket.id.desc())
        )

    @staticmethod
    def _to_record(ticket: Ticket, email: str | None, draw_date: date | None) -> TicketRecord:
        return TicketRecord(
            id=int(ticket.id),
            user_id=str(ticket.user_id),
            draw_id=int(ticket.draw_id),
            ticket_number=str(ticket.ticket_number),
            status=str(ticket.status),
            source=str(ticket.source),
            prize_amount=float(ticket.prize_amount or 0),
            created_at=ticket.created_at,
            user_email=email,
            draw_date=draw_date,
        )

    def list_all(self, session: Session) -> list[TicketRecord]:
        return [self._to_record(*row) for row in session.execute(self._select()).all()]

    def list_for_user(self, session: Session, user_id: str) -> list[TicketRecord]:
        stmt = self._select().where(Ticket.user_id == user_id)
        return [self._to_record(*row) for row in session.execute(stmt).all()]

    def get_by_id(self, session: Session, ticket_id: int) -> TicketRecord | None:
        row = session.execute(self._select().where(Ticket.id == ticket_id)).first()
        return self._to_record(*row) if row is not None else None

    def create(self, session: Session, values: Mapping[str, Any]) -> TicketRecord:
        ticket = Ticket(**dict(values))
        session.add(ticket)
        session.flush()  # assign PK
        record = self.get_by_id(session, ticket.id)
        if record is None:
            raise RuntimeError(f"Ticket {ticket.id} missing right after insert")
        return record

    def update(self, session: Session, ticket_id: int, values: Mapping[str, Any]) -> TicketRecord | None:
        ticket = session.get(Ticket, ticket_id)
        if ticket is None:
            return None
        for key, value in values.items():
            setattr(ticket, key, value)
        session.flush()
        return self.get_by_id(session, ticket_id)

    def delete(self, session: Session, ticket_id: int) -> bool:
        result = session.execute(delete(Ticket).where(Ticket.id == ticket_id))
        return bool(result.rowcount)

    def delete_for_user(self, session: Session, user_id: str) -> int:
        result = session.execute(delete(Ticket).where(Ticket.user_id == user_id))
        return int(result.rowcount or 0)
