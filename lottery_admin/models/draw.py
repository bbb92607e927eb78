"""Draw ORM model."""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from lottery_admin.models.base import Base, utcnow

DRAW_STATUSES = ("upcoming", "active", "completed")


class Draw(Base):
    """A scheduled lottery event with a jackpot and lifecycle status."""

    __tablename__ = "draws"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    draw_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    jackpot_amount: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="upcoming")
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
