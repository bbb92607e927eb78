"""SQLAlchemy declarative base."""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for ORM models."""

    pass


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every backend stores identically."""

    return datetime.now(timezone.utc).replace(tzinfo=None)
