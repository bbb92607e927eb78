"""Repository layer for lottery users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from lottery_admin.models.user import User


@dataclass(frozen=True)
class UserRecord:
    id: str
    email: str
    full_name: str | None
    phone_number: str | None
    created_at: datetime


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=str(user.id),
        email=str(user.email),
        full_name=user.full_name,
        phone_number=user.phone_number,
        created_at=user.created_at,
    )


class UserRepository:
    """Read/delete operations for User. Users register outside the dashboard."""

    def list_all(self, session: Session) -> list[UserRecord]:
        stmt = select(User).order_by(User.created_at.desc(), User.id.desc())
        return [_to_record(u) for u in session.scalars(stmt).all()]

    def get_by_id(self, session: Session, user_id: str) -> UserRecord | None:
        user = session.get(User, user_id)
        return _to_record(user) if user is not None else None

    def create(
        self,
        session: Session,
        *,
        email: str,
        full_name: str | None = None,
        phone_number: str | None = None,
    ) -> UserRecord:
        user = User(email=email, full_name=full_name, phone_number=phone_number)
        session.add(user)
        session.flush()
        return _to_record(user)

    def delete(self, session: Session, user_id: str) -> bool:
        result = session.execute(delete(User).where(User.id == user_id))
        return bool(result.rowcount)
