"""SQLAlchemy engine + session management.

Uses a session-per-request pattern. The database plays the role of the hosted
table store: every repository call is one round trip against it.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from flask import Flask, current_app, g
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from lottery_admin.models.base import Base


def create_app_engine(database_url: str) -> Engine:
    url = make_url(database_url)
    engine = create_engine(database_url, pool_pre_ping=True, future=True)

    if url.get_backend_name() == "sqlite":
        # SQLite ignores foreign keys (and ON DELETE CASCADE) unless asked.
        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record) -> None:  # type: ignore[no-untyped-def]
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


def init_db(app: Flask) -> None:
    """Initialize database engine and per-request sessions."""

    engine = create_app_engine(str(app.config["DATABASE_URL"]))
    session_factory = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    # Import models so they register with Base.metadata
    from lottery_admin import models  # noqa: F401

    # Local/dev convenience; hosted databases are provisioned with scripts/create_tables.py.
    Base.metadata.create_all(bind=engine)

    app.extensions["engine"] = engine
    app.extensions["session_factory"] = session_factory

    @app.before_request
    def _open_session() -> None:
        g.db = session_factory()  # type: ignore[attr-defined]

    @app.teardown_request
    def _close_session(exc: BaseException | None) -> None:
        session: Session | None = getattr(g, "db", None)
        if session is None:
            return

        try:
            if exc is None:
                session.commit()
            else:
                session.rollback()
        finally:
            session.close()


def get_session() -> Session:
    """Get the current request's SQLAlchemy session."""

    session: Session | None = getattr(g, "db", None)
    if session is None:
        raise RuntimeError("Database session not initialized")
    return session


def rollback_session() -> None:
    """Discard pending work of the current request, if a session is open."""

    session: Session | None = getattr(g, "db", None)
    if session is not None:
        session.rollback()


@contextmanager
def session_scope(app: Flask | None = None) -> Iterator[Session]:
    """Transactional session outside of a request (scripts, tests)."""

    target = app or current_app
    session = target.extensions["session_factory"]()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
