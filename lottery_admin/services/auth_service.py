"""Password sign-in and cookie-backed sessions for dashboard staff."""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from sqlalchemy.orm import Session
from werkzeug.security import check_password_hash, generate_password_hash

from lottery_admin.errors import AuthenticationError, ConflictError, ValidationError
from lottery_admin.models.account import Account
from lottery_admin.models.base import utcnow
from lottery_admin.repositories.account_repository import AccountRepository

logger = logging.getLogger(__name__)

SESSION_KEY = "auth"


@dataclass(frozen=True)
class Identity:
    id: str
    email: str
    role: str | None
    user_metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AuthSession:
    user: Identity
    signed_in_at: datetime


def _identity(account: Account) -> Identity:
    # Only a JSON object can carry a role claim.
    metadata = dict(account.user_metadata) if isinstance(account.user_metadata, dict) else {}
    role = metadata.get("role")
    return Identity(
        id=str(account.id),
        email=str(account.email),
        role=str(role) if role is not None else None,
        user_metadata=metadata,
    )


class AuthService:
    """Sign in, look up and sign out the current identity.

    ``store`` is the per-client session mapping (``flask.session`` in the
    app); it only ever holds the account id and the sign-in time.
    """

    def __init__(self, repository: AccountRepository | None = None) -> None:
        self._repo = repository or AccountRepository()

    def create_account(
        self,
        session: Session,
        *,
        email: str,
        password: str,
        role: str | None = None,
    ) -> Identity:
        if not email or not password:
            raise ValidationError("Email and password are required")
        if self._repo.get_by_email(session, email) is not None:
            raise ConflictError(message=f"Account {email} already exists")
        metadata = {"role": role} if role else {}
        account = self._repo.create(
            session,
            email=email,
            password_hash=generate_password_hash(password),
            user_metadata=metadata,
        )
        logger.info("Account created email=%s role=%s", account.email, role)
        return _identity(account)

    def sign_in_with_password(
        self,
        session: Session,
        store: MutableMapping[str, Any],
        *,
        email: str,
        password: str,
    ) -> AuthSession:
        account = self._repo.get_by_email(session, email)
        if account is None or not check_password_hash(account.password_hash, password):
            logger.warning("Failed sign-in for %s", email)
            raise AuthenticationError("Invalid login credentials")

        self._repo.touch_sign_in(session, account)
        signed_in_at = utcnow()
        store.clear()
        store[SESSION_KEY] = {"account_id": account.id, "signed_in_at": signed_in_at.isoformat()}
        logger.info("Signed in %s", account.email)
        return AuthSession(user=_identity(account), signed_in_at=signed_in_at)

    def get_session(self, session: Session, store: MutableMapping[str, Any]) -> AuthSession | None:
        data = store.get(SESSION_KEY)
        if not isinstance(data, dict) or "account_id" not in data:
            return None

        account = self._repo.get_by_id(session, str(data["account_id"]))
        if account is None:
            store.pop(SESSION_KEY, None)
            return None

        try:
            signed_in_at = datetime.fromisoformat(str(data.get("signed_in_at")))
        except ValueError:
            signed_in_at = account.last_sign_in_at or utcnow()
        return AuthSession(user=_identity(account), signed_in_at=signed_in_at)

    def get_user(self, session: Session, store: MutableMapping[str, Any]) -> Identity | None:
        current = self.get_session(session, store)
        return current.user if current is not None else None

    def sign_out(self, store: MutableMapping[str, Any]) -> None:
        store.clear()
