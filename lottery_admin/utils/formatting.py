"""Display formatting for amounts and dates."""

from __future__ import annotations

from datetime import date, datetime

DEFAULT_CURRENCY = "ETB"


def format_currency(amount: float | int | None, currency: str = DEFAULT_CURRENCY) -> str:
    """``1234.5`` -> ``"ETB 1,234.50"``. Missing amounts render as zero."""

    value = float(amount or 0)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency} {abs(value):,.2f}"


def format_date(value: date | datetime | str | None) -> str:
    """Short human-readable date, e.g. ``Jan 5, 2025``."""

    if value is None:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{value:%b} {value.day}, {value.year}"


def format_datetime(value: datetime | str | None) -> str:
    """Date plus 12-hour clock time, e.g. ``Jan 5, 2025, 03:04 PM``."""

    if value is None:
        return ""
    if isinstance(value, str):
        value = datetime.fromisoformat(value)
    return f"{format_date(value)}, {value:%I:%M %p}"
