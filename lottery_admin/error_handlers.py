"""Centralized error handlers.

Every handler rolls back the request session first, so the teardown commit
never persists half of a failed action.
"""

from __future__ import annotations

import logging

from flask import Flask
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.exceptions import HTTPException

from lottery_admin.db import rollback_session
from lottery_admin.errors import AppError, ConflictError, StoreError, ValidationError
from lottery_admin.utils.responses import fail

logger = logging.getLogger(__name__)


def _first_message(messages: object) -> str | None:
    # {"field": ["msg", ...]} -> "msg"
    if isinstance(messages, dict):
        for value in messages.values():
            found = _first_message(value)
            if found:
                return found
    if isinstance(messages, list) and messages:
        return _first_message(messages[0])
    if isinstance(messages, str):
        return messages
    return None


def register_error_handlers(app: Flask) -> None:
    """Register error handlers for the Flask app."""

    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        rollback_session()
        return fail(exc.code, exc.message, exc.status_code, exc.details)

    @app.errorhandler(MarshmallowValidationError)
    def _handle_schema_error(exc: MarshmallowValidationError):
        rollback_session()
        # exc.messages is a dict of field -> list[str]
        wrapped = ValidationError(message=_first_message(exc.messages) or "Validation error", details=exc.messages)
        return fail(wrapped.code, wrapped.message, wrapped.status_code, wrapped.details)

    @app.errorhandler(IntegrityError)
    def _handle_integrity_error(exc: IntegrityError):
        rollback_session()
        logger.info("Integrity error", exc_info=exc)
        wrapped = ConflictError(details=str(exc.orig) if exc.orig else str(exc))
        return fail(wrapped.code, wrapped.message, wrapped.status_code, wrapped.details)

    @app.errorhandler(SQLAlchemyError)
    def _handle_store_error(exc: SQLAlchemyError):
        rollback_session()
        logger.error("Store request failed", exc_info=exc)
        wrapped = StoreError(details=exc.__class__.__name__)
        return fail(wrapped.code, wrapped.message, wrapped.status_code, wrapped.details)

    @app.errorhandler(HTTPException)
    def _handle_http_exception(exc: HTTPException):
        rollback_session()
        status = int(getattr(exc, "code", 500) or 500)
        if status == 404:
            return fail("not_found", "Not found", 404)

        return fail(
            "http_error",
            getattr(exc, "description", "HTTP error"),
            status,
            details={"name": getattr(exc, "name", "HTTPException")},
        )

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        rollback_session()
        logger.exception("Unhandled exception")
        return fail("internal_error", "Internal server error", 500)
