"""Repository layer for WinningNumber persistence."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lottery_admin.models.draw import Draw
from lottery_admin.models.winning_number import WinningNumber
from lottery_admin.repositories.draw_repository import DrawRecord, to_draw_record


@dataclass(frozen=True)
class WinningNumberRecord:
    id: int
    draw_id: int
    winning_number: str
    position: int
    prize_amount: float
    created_at: datetime
    draw: DrawRecord | None = None


def _to_record(wn: WinningNumber, draw: Draw | None = None) -> WinningNumberRecord:
    return WinningNumberRecord(
        id=int(wn.id),
        draw_id=int(wn.draw_id),
        winning_number=str(wn.winning_number),
        position=int(wn.position),
        prize_amount=float(wn.prize_amount),
        created_at=wn.created_at,
        draw=to_draw_record(draw) if draw is not None else None,
    )


class WinningNumberRepository:
    """CRUD operations for WinningNumber, joined with their draw for display."""

    def _select(self):  # type: ignore[no-untyped-def]
        return (
            select(WinningNumber, Draw)
            .outerjoin(Draw, WinningNumber.draw_id == Draw.id)
            .order_by(WinningNumber.created_at.desc(), WinningNumber.id.desc())
        )

    def list_all(self, session: Session) -> list[WinningNumberRecord]:
        return [_to_record(wn, draw) for wn, draw in session.execute(self._select()).all()]

    def list_for_draw(self, session: Session, draw_id: int) -> list[WinningNumberRecord]:
        stmt = self._select().where(WinningNumber.draw_id == draw_id)
        return [_to_record(wn, draw) for wn, draw in session.execute(stmt).all()]

    def get_by_id(self, session: Session, winning_number_id: int) -> WinningNumberRecord | None:
        row = session.execute(self._select().where(WinningNumber.id == winning_number_id)).first()
        if row is None:
            return None
        return _to_record(row[0], row[1])

    def create(
        self,
        session: Session,
        *,
        draw_id: int,
        winning_number: str,
        position: int,
        prize_amount: float,
    ) -> WinningNumberRecord:
        created = self.insert_many(
            session,
            [
                {
                    "draw_id": draw_id,
                    "winning_number": winning_number,
                    "position": position,
                    "prize_amount": prize_amount,
                }
            ],
        )
        return created[0]

    def insert_many(self, session: Session, rows: Sequence[Mapping[str, Any]]) -> list[WinningNumberRecord]:
        """Insert all rows in one flush (a single multi-row INSERT)."""

        objects = [WinningNumber(**dict(row)) for row in rows]
        session.add_all(objects)
        session.flush()
        return [_to_record(obj, session.get(Draw, obj.draw_id)) for obj in objects]

    def update(
        self, session: Session, winning_number_id: int, values: Mapping[str, Any]
    ) -> WinningNumberRecord | None:
        wn = session.get(WinningNumber, winning_number_id)
        if wn is None:
            return None
        for key, value in values.items():
            setattr(wn, key, value)
        session.flush()
        return _to_record(wn, session.get(Draw, wn.draw_id))

    def delete(self, session: Session, winning_number_id: int) -> bool:
        result = session.execute(delete(WinningNumber).where(WinningNumber.id == winning_number_id))
        return bool(result.rowcount)
