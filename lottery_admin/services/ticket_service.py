"""Service layer for ticket management."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from lottery_admin.errors import NotFoundError
from lottery_admin.repositories.draw_repository import DrawRepository
from lottery_admin.repositories.ticket_repository import TicketRecord, TicketRepository
from lottery_admin.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class TicketService:
    """Ticket use-cases."""

    def __init__(
        self,
        repository: TicketRepository | None = None,
        user_repository: UserRepository | None = None,
        draw_repository: DrawRepository | None = None,
    ) -> None:
        self._repo = repository or TicketRepository()
        self._users = user_repository or UserRepository()
        self._draws = draw_repository or DrawRepository()

    def _check_references(self, session: Session, values: Mapping[str, Any]) -> None:
        if "user_id" in values and self._users.get_by_id(session, values["user_id"]) is None:
            raise NotFoundError(message=f"User {values['user_id']} not found")
        if "draw_id" in values and self._draws.get_by_id(session, values["draw_id"]) is None:
            raise NotFoundError(message=f"Draw {values['draw_id']} not found")

    def list_tickets(self, session: Session) -> list[TicketRecord]:
        return self._repo.list_all(session)

    def get_ticket(self, session: Session, ticket_id: int) -> TicketRecord:
        ticket = self._repo.get_by_id(session, ticket_id)
        if ticket is None:
            raise NotFoundError(message=f"Ticket {ticket_id} not found")
        return ticket

    def create_ticket(self, session: Session, values: Mapping[str, Any]) -> TicketRecord:
        self._check_references(session, values)
        ticket = self._repo.create(session, values)
        logger.info("Ticket created id=%s user=%s draw=%s", ticket.id, ticket.user_id, ticket.draw_id)
        return ticket

    def update_ticket(self, session: Session, ticket_id: int, changes: Mapping[str, Any]) -> TicketRecord:
        self.get_ticket(session, ticket_id)
        self._check_references(session, changes)
        ticket = self._repo.update(session, ticket_id, changes)
        if ticket is None:
            raise NotFoundError(message=f"Ticket {ticket_id} not found")
        logger.info("Ticket updated id=%s fields=%s", ticket_id, sorted(changes))
        return ticket

    def delete_ticket(self, session: Session, ticket_id: int) -> None:
        if not self._repo.delete(session, ticket_id):
            raise NotFoundError(message=f"Ticket {ticket_id} not found")
        logger.info("Ticket deleted id=%s", ticket_id)
