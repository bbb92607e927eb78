"""ORM models."""

from lottery_admin.models.account import Account
from lottery_admin.models.draw import DRAW_STATUSES, Draw
from lottery_admin.models.ticket import TICKET_SOURCES, TICKET_STATUSES, Ticket
from lottery_admin.models.user import User
from lottery_admin.models.winning_number import WinningNumber

__all__ = [
    "Account",
    "DRAW_STATUSES",
    "Draw",
    "TICKET_SOURCES",
    "TICKET_STATUSES",
    "Ticket",
    "User",
    "WinningNumber",
]
