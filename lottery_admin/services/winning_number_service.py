"""Service layer for publishing winning numbers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from sqlalchemy.orm import Session

from lottery_admin.errors import NotFoundError, ValidationError
from lottery_admin.repositories.draw_repository import DrawRecord, DrawRepository
from lottery_admin.repositories.winning_number_repository import (
    WinningNumberRecord,
    WinningNumberRepository,
)
from lottery_admin.services import winning_number_rules as rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WinningNumberSummary:
    top_three_count: int
    active_draws: int
    total_prize_amount: float


class WinningNumberService:
    """Winning number use-cases.

    The duplicate-position check reads the draw's current entries and then
    writes; two admins submitting at once can both pass it. The store's
    unique constraint on (draw_id, position) turns the loser into a 409.
    """

    def __init__(
        self,
        repository: WinningNumberRepository | None = None,
        draw_repository: DrawRepository | None = None,
    ) -> None:
        self._repo = repository or WinningNumberRepository()
        self._draws = draw_repository or DrawRepository()

    def list_winning_numbers(self, session: Session) -> list[WinningNumberRecord]:
        return self._repo.list_all(session)

    def get_winning_number(self, session: Session, winning_number_id: int) -> WinningNumberRecord:
        wn = self._repo.get_by_id(session, winning_number_id)
        if wn is None:
            raise NotFoundError(message=f"Winning number {winning_number_id} not found")
        return wn

    def _require_draw(self, session: Session, draw_id: int) -> DrawRecord:
        draw = self._draws.get_by_id(session, draw_id)
        if draw is None:
            raise NotFoundError(message=f"Draw {draw_id} not found")
        return draw

    def create_winning_number(
        self,
        session: Session,
        *,
        draw_id: int,
        winning_number: str,
        position: int,
        prize_amount: float,
    ) -> WinningNumberRecord:
        draft = rules.WinningNumberDraft(
            draw_id=draw_id,
            winning_number=winning_number,
            position=position,
            prize_amount=prize_amount,
        )
        rules.check_fields(draft.as_row())
        self._require_draw(session, draw_id)
        rules.check_position_free(self._repo.list_for_draw(session, draw_id), draft)

        created = self._repo.create(session, **draft.as_row())
        logger.info("Winning number created id=%s draw=%s position=%s", created.id, draw_id, position)
        return created

    def update_winning_number(
        self, session: Session, winning_number_id: int, changes: Mapping[str, Any]
    ) -> WinningNumberRecord:
        rules.check_fields(changes)
        current = self.get_winning_number(session, winning_number_id)
        draft = rules.WinningNumberDraft(
            draw_id=int(changes.get("draw_id", current.draw_id)),
            winning_number=changes.get("winning_number", current.winning_number),
            position=changes.get("position", current.position),
            prize_amount=float(changes.get("prize_amount", current.prize_amount)),
        )
        if draft.draw_id != current.draw_id:
            self._require_draw(session, draft.draw_id)
        rules.check_position_free(
            self._repo.list_for_draw(session, draft.draw_id),
            draft,
            exclude_id=winning_number_id,
        )

        updated = self._repo.update(session, winning_number_id, draft.as_row())
        if updated is None:
            raise NotFoundError(message=f"Winning number {winning_number_id} not found")
        logger.info("Winning number updated id=%s", winning_number_id)
        return updated

    def delete_winning_number(self, session: Session, winning_number_id: int) -> None:
        if not self._repo.delete(session, winning_number_id):
            raise NotFoundError(message=f"Winning number {winning_number_id} not found")
        logger.info("Winning number deleted id=%s", winning_number_id)

    def bulk_import(self, session: Session, draw_id: int | None, text: str) -> list[WinningNumberRecord]:
        """Validate every line, then insert the whole batch or nothing."""

        if draw_id is None:
            raise ValidationError("Please select a draw first")
        drafts = rules.parse_bulk_lines(text, draw_id)
        self._require_draw(session, draw_id)

        existing = self._repo.list_for_draw(session, draw_id)
        taken = [d.position for d in drafts if rules.find_position_conflict(existing, draw_id, d.position)]
        if taken:
            messages = [f"Position {p} already exists for this draw" for p in taken]
            raise ValidationError("\n".join(messages), details=messages)

        created = self._repo.insert_many(session, [d.as_row() for d in drafts])
        logger.info("Bulk import added %d winning numbers to draw %s", len(created), draw_id)
        return created

    def available_positions(
        self, session: Session, draw_id: int, exclude_id: int | None = None
    ) -> list[int]:
        self._require_draw(session, draw_id)
        return rules.available_positions(self._repo.list_for_draw(session, draw_id), draw_id, exclude_id)

    @staticmethod
    def summarize(
        numbers: Sequence[WinningNumberRecord], draws: Sequence[DrawRecord]
    ) -> WinningNumberSummary:
        return WinningNumberSummary(
            top_three_count=sum(1 for wn in numbers if wn.position <= 3),
            active_draws=sum(1 for d in draws if d.status == "active"),
            total_prize_amount=round(sum(wn.prize_amount for wn in numbers), 2),
        )
