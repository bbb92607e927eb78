"""Shared fixtures: a fresh app on in-memory SQLite per test."""

from __future__ import annotations

import unittest
from datetime import date

from sqlalchemy import func, select

from lottery_admin import create_app
from lottery_admin.db import session_scope
from lottery_admin.repositories.draw_repository import DrawRecord, DrawRepository
from lottery_admin.repositories.ticket_repository import TicketRecord, TicketRepository
from lottery_admin.repositories.user_repository import UserRecord, UserRepository
from lottery_admin.repositories.winning_number_repository import (
    WinningNumberRecord,
    WinningNumberRepository,
)
from lottery_admin.services.auth_service import AuthService, Identity

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "correct horse"


class AppTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.app = create_app(
            {
                "TESTING": True,
                "DATABASE_URL": "sqlite:///:memory:",
                "SECRET_KEY": "test-secret",
                "PAGE_SIZE": 10,
            }
        )
        self.client = self.app.test_client()

    def tearDown(self) -> None:
        self.app.extensions["engine"].dispose()

    # -- accounts ----------------------------------------------------------

    def create_account(
        self, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD, role: str | None = "admin"
    ) -> Identity:
        with session_scope(self.app) as session:
            return AuthService().create_account(session, email=email, password=password, role=role)

    def sign_in(self, email: str = ADMIN_EMAIL, password: str = ADMIN_PASSWORD):
        return self.client.post("/api/auth/login", json={"email": email, "password": password})

    def sign_in_as_admin(self) -> None:
        self.create_account()
        response = self.sign_in()
        self.assertEqual(response.status_code, 200, response.get_json())

    # -- records -----------------------------------------------------------

    def add_draw(
        self, draw_date: date = date(2025, 1, 5), jackpot_amount: float = 100000.0, status: str = "upcoming"
    ) -> DrawRecord:
        with session_scope(self.app) as session:
            return DrawRepository().create(
                session, draw_date=draw_date, jackpot_amount=jackpot_amount, status=status
            )

    def add_winning_number(
        self, draw_id: int, winning_number: str, position: int, prize_amount: float = 100.0
    ) -> WinningNumberRecord:
        with session_scope(self.app) as session:
            return WinningNumberRepository().create(
                session,
                draw_id=draw_id,
                winning_number=winning_number,
                position=position,
                prize_amount=prize_amount,
            )

    def add_user(
        self, email: str, full_name: str | None = None, phone_number: str | None = None
    ) -> UserRecord:
        with session_scope(self.app) as session:
            return UserRepository().create(session, email=email, full_name=full_name, phone_number=phone_number)

    def add_ticket(
        self,
        user_id: str,
        draw_id: int,
        ticket_number: str,
        status: str = "active",
        source: str = "Manual",
        prize_amount: float = 0.0,
    ) -> TicketRecord:
        with session_scope(self.app) as session:
            return TicketRepository().create(
                session,
                {
                    "user_id": user_id,
                    "draw_id": draw_id,
                    "ticket_number": ticket_number,
                    "status": status,
                    "source": source,
                    "prize_amount": prize_amount,
                },
            )

    def count(self, model, **where) -> int:  # type: ignore[no-untyped-def]
        stmt = select(func.count()).select_from(model)
        for column, value in where.items():
            stmt = stmt.where(getattr(model, column) == value)
        with session_scope(self.app) as session:
            return int(session.scalar(stmt) or 0)
