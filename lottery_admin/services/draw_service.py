"""Service layer for draw management."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from sqlalchemy.orm import Session

from lottery_admin.errors import NotFoundError
from lottery_admin.repositories.draw_repository import DrawRecord, DrawRepository

logger = logging.getLogger(__name__)


class DrawService:
    """Draw use-cases."""

    def __init__(self, repository: DrawRepository | None = None) -> None:
        self._repo = repository or DrawRepository()

    def list_draws(self, session: Session) -> list[DrawRecord]:
        return self._repo.list_all(session)

    def get_draw(self, session: Session, draw_id: int) -> DrawRecord:
        draw = self._repo.get_by_id(session, draw_id)
        if draw is None:
            raise NotFoundError(message=f"Draw {draw_id} not found")
        return draw

    def create_draw(
        self,
        session: Session,
        *,
        draw_date: date,
        jackpot_amount: float,
        status: str = "upcoming",
    ) -> DrawRecord:
        draw = self._repo.create(session, draw_date=draw_date, jackpot_amount=jackpot_amount, status=status)
        logger.info("Draw created id=%s date=%s status=%s", draw.id, draw.draw_date, draw.status)
        return draw

    def update_draw(self, session: Session, draw_id: int, changes: Mapping[str, Any]) -> DrawRecord:
        draw = self._repo.update(session, draw_id, changes)
        if draw is None:
            raise NotFoundError(message=f"Draw {draw_id} not found")
        logger.info("Draw updated id=%s fields=%s", draw_id, sorted(changes))
        return draw

    def delete_draw(self, session: Session, draw_id: int) -> None:
        if not self._repo.delete(session, draw_id):
            raise NotFoundError(message=f"Draw {draw_id} not found")
        logger.info("Draw deleted id=%s", draw_id)
