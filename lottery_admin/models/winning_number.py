"""Winning number ORM model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, SmallInteger, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from lottery_admin.models.base import Base, utcnow


class WinningNumber(Base):
    """A prize-bearing code at one position (1..10) of a draw."""

    __tablename__ = "winning_numbers"
    __table_args__ = (UniqueConstraint("draw_id", "position", name="uq_winning_numbers_draw_position"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    draw_id: Mapped[int] = mapped_column(Integer, ForeignKey("draws.id", ondelete="CASCADE"), index=True)
    winning_number: Mapped[str] = mapped_column(String(11), nullable=False)  # XXX-YYYYYYY
    position: Mapped[int] = mapped_column(SmallInteger, nullable=False)  # 1..10
    prize_amount: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
