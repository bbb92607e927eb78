"""Create database tables in the configured database.

Reads DATABASE_URL (or PG* variables) from .env / environment and creates all
registered ORM tables.

Usage:
  python scripts/create_tables.py
"""

from __future__ import annotations

import pathlib
import sys

from dotenv import load_dotenv
from sqlalchemy import text

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))

from lottery_admin.config import resolve_database_url  # noqa: E402
from lottery_admin.db import create_app_engine  # noqa: E402
from lottery_admin.models.base import Base  # noqa: E402

# Import models so they register with Base.metadata
from lottery_admin import models  # noqa: F401, E402


def main() -> int:
    """Create all ORM tables in the target database."""

    load_dotenv()
    env_local = PROJECT_ROOT / ".env.local"
    if env_local.exists():
        load_dotenv(dotenv_path=env_local, override=True)

    engine = create_app_engine(resolve_database_url())
    Base.metadata.create_all(bind=engine)

    # create_all() does not add constraints to tables that already exist.
    # For PostgreSQL, apply the (draw_id, position) guard idempotently.
    if engine.dialect.name == "postgresql":
        ddl = [
            "CREATE UNIQUE INDEX IF NOT EXISTS uq_winning_numbers_draw_position "
            "ON winning_numbers (draw_id, position)",
            "CREATE INDEX IF NOT EXISTS ix_tickets_user_id ON tickets (user_id)",
            "CREATE INDEX IF NOT EXISTS ix_tickets_draw_id ON tickets (draw_id)",
        ]
        with engine.begin() as conn:
            for stmt in ddl:
                conn.execute(text(stmt))

    print("Tables created (or already exist).")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
