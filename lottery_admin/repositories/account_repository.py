"""Repository layer for staff login accounts."""

from __future__ import annotations

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from lottery_admin.models.account import Account
from lottery_admin.models.base import utcnow


class AccountRepository:
    def get_by_email(self, session: Session, email: str) -> Account | None:
        stmt = select(Account).where(func.lower(Account.email) == email.strip().lower())
        return session.scalars(stmt).first()

    def get_by_id(self, session: Session, account_id: str) -> Account | None:
        return session.get(Account, account_id)

    def create(
        self,
        session: Session,
        *,
        email: str,
        password_hash: str,
        user_metadata: dict[str, Any],
    ) -> Account:
        account = Account(email=email.strip().lower(), password_hash=password_hash, user_metadata=user_metadata)
        session.add(account)
        session.flush()
        return account

    def touch_sign_in(self, session: Session, account: Account) -> None:
        account.last_sign_in_at = utcnow()
        session.flush()
