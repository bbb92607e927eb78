"""Health check routes."""

from __future__ import annotations

from flask import Blueprint
from sqlalchemy import text

from lottery_admin.db import get_session
from lottery_admin.utils.responses import ok

health_bp = Blueprint("health", __name__)


@health_bp.get("/health")
def health_check():
    """Health check endpoint; also pings the store."""

    get_session().execute(text("SELECT 1"))
    return ok({"status": "ok"})
