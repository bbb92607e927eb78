"""Ticket ORM model."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from lottery_admin.models.base import Base, utcnow

TICKET_STATUSES = ("active", "winner", "expired")
TICKET_SOURCES = ("SMS", "Manual")


class Ticket(Base):
    """A participant's entry into a draw."""

    __tablename__ = "tickets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(36), ForeignKey("users.id"), index=True)
    draw_id: Mapped[int] = mapped_column(Integer, ForeignKey("draws.id"), index=True)
    ticket_number: Mapped[str] = mapped_column(String(64), nullable=False)
    status: Mapped[str] = mapped_column(String(16), nullable=False, default="active")
    source: Mapped[str] = mapped_column(String(16), nullable=False, default="Manual")
    prize_amount: Mapped[float] = mapped_column(Numeric(14, 2, asdecimal=False), nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
