"""Repository layer for Draw persistence."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lottery_admin.models.draw import Draw


@dataclass(frozen=True)
class DrawRecord:
    id: int
    draw_date: date
    jackpot_amount: float
    status: str
    created_at: datetime


def to_draw_record(draw: Draw) -> DrawRecord:
    return DrawRecord(
        id=int(draw.id),
        draw_date=draw.draw_date,
        jackpot_amount=float(draw.jackpot_amount),
        status=str(draw.status),
        created_at=draw.created_at,
    )


class DrawRepository:
    """CRUD operations for Draw."""

    def list_all(self, session: Session) -> list[DrawRecord]:
        stmt = select(Draw).order_by(Draw.draw_date.desc(), Draw.id.desc())
        return [to_draw_record(d) for d in session.scalars(stmt).all()]

    def get_by_id(self, session: Session, draw_id: int) -> DrawRecord | None:
        draw = session.get(Draw, draw_id)
        return to_draw_record(draw) if draw is not None else None

    def create(self, session: Session, *, draw_date: date, jackpot_amount: float, status: str) -> DrawRecord:
        draw = Draw(draw_date=draw_date, jackpot_amount=jackpot_amount, status=status)
        session.add(draw)
        session.flush()  # assign PK
        return to_draw_record(draw)

    def update(self, session: Session, draw_id: int, values: Mapping[str, Any]) -> DrawRecord | None:
        draw = session.get(Draw, draw_id)
        if draw is None:
            return None
        for key, value in values.items():
            setattr(draw, key, value)
        session.flush()
        return to_draw_record(draw)

    def delete(self, session: Session, draw_id: int) -> bool:
        # Statement-level delete so the store's ON DELETE CASCADE handles winning numbers.
        result = session.execute(delete(Draw).where(Draw.id == draw_id))
        return bool(result.rowcount)
