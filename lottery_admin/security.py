"""Session gate: only identities carrying the admin role get through."""

from __future__ import annotations

import logging

from flask import current_app, g, request, session as cookie_session
from sqlalchemy.exc import SQLAlchemyError

from lottery_admin.db import get_session, rollback_session
from lottery_admin.errors import AppError, AuthenticationError, AuthorizationError
from lottery_admin.services.auth_service import AuthService, Identity

logger = logging.getLogger(__name__)

_auth_service = AuthService()


def current_identity() -> Identity | None:
    """Identity behind the request's cookie session; lookup failures count as none."""

    try:
        return _auth_service.get_user(get_session(), cookie_session)
    except (AppError, SQLAlchemyError) as exc:
        logger.warning("Identity lookup failed: %s", exc)
        rollback_session()
        return None


def is_admin(identity: Identity | None) -> bool:
    return identity is not None and identity.role == current_app.config.get("ADMIN_ROLE", "admin")


def require_admin() -> Identity:
    """Resolve the identity or raise 401/403. Use from ``before_request`` hooks."""

    identity = current_identity()
    if identity is None:
        raise AuthenticationError()
    if not is_admin(identity):
        logger.warning("Non-admin %s denied access to %s", identity.email, request.path)
        raise AuthorizationError()
    g.identity = identity
    return identity
