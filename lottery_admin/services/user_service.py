"""Service layer for browsing and removing lottery users."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from lottery_admin.errors import NotFoundError
from lottery_admin.repositories.ticket_repository import TicketRecord, TicketRepository
from lottery_admin.repositories.user_repository import UserRecord, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserDetail:
    user: UserRecord
    tickets: list[TicketRecord]

    @property
    def active_count(self) -> int:
        return sum(1 for t in self.tickets if t.status == "active")

    @property
    def winner_count(self) -> int:
        return sum(1 for t in self.tickets if t.status == "winner")


class UserService:
    """User use-cases."""

    def __init__(
        self,
        repository: UserRepository | None = None,
        ticket_repository: TicketRepository | None = None,
    ) -> None:
        self._repo = repository or UserRepository()
        self._tickets = ticket_repository or TicketRepository()

    def list_users(self, session: Session) -> list[UserRecord]:
        return self._repo.list_all(session)

    def get_user(self, session: Session, user_id: str) -> UserRecord:
        user = self._repo.get_by_id(session, user_id)
        if user is None:
            raise NotFoundError(message=f"User {user_id} not found")
        return user

    def get_user_detail(self, session: Session, user_id: str) -> UserDetail:
        user = self.get_user(session, user_id)
        return UserDetail(user=user, tickets=self._tickets.list_for_user(session, user_id))

    def delete_user(self, session: Session, user_id: str) -> int:
        """Delete the user's tickets, then the user. Returns the ticket count.

        Two separate store calls: if the ticket delete raises, the user
        delete is never attempted. Only the surrounding request transaction
        makes the pair all-or-nothing; outside one, a failure of the second
        call leaves the user without tickets.
        """

        self.get_user(session, user_id)
        removed = self._tickets.delete_for_user(session, user_id)
        if not self._repo.delete(session, user_id):
            raise NotFoundError(message=f"User {user_id} not found")
        logger.info("User deleted id=%s tickets_removed=%d", user_id, removed)
        return removed
