"""Winning-number allocation rules.

Pure functions over already-fetched records: code format, position range,
one entry per (draw, position), and the line format used by bulk import.
Everything here runs before any store call.
"""

from __future__ import annotations

import math
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from lottery_admin.errors import ValidationError

WINNING_NUMBER_PATTERN = re.compile(r"\d{3}-\d{7}", re.ASCII)
# Plain ASCII digits only; int() and float() would also take "1_0" or "١٠".
POSITION_TEXT_PATTERN = re.compile(r"\d+", re.ASCII)
PRIZE_TEXT_PATTERN = re.compile(r"\d+(?:\.\d*)?|\.\d+", re.ASCII)
MIN_POSITION = 1
MAX_POSITION = 10
ALL_POSITIONS = tuple(range(MIN_POSITION, MAX_POSITION + 1))

WINNING_NUMBER_FORMAT_ERROR = "Winning number must be in format XXX-YYYYYYY (e.g., 212-1212121)"
POSITION_RANGE_ERROR = f"Position must be between {MIN_POSITION} and {MAX_POSITION}"


class PositionedEntry(Protocol):
    id: int
    draw_id: int
    position: int


@dataclass(frozen=True)
class WinningNumberDraft:
    """A validated row waiting to be inserted."""

    draw_id: int
    winning_number: str
    position: int
    prize_amount: float

    def as_row(self) -> dict[str, Any]:
        return {
            "draw_id": self.draw_id,
            "winning_number": self.winning_number,
            "position": self.position,
            "prize_amount": self.prize_amount,
        }


def is_valid_winning_number(value: object) -> bool:
    """Three digits, a hyphen, seven digits; nothing before or after."""

    return isinstance(value, str) and WINNING_NUMBER_PATTERN.fullmatch(value) is not None


def is_valid_position(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return MIN_POSITION <= value <= MAX_POSITION


def find_position_conflict(
    existing: Iterable[PositionedEntry],
    draw_id: int,
    position: int,
    exclude_id: int | None = None,
) -> PositionedEntry | None:
    """First entry already holding ``position`` in ``draw_id``, ignoring ``exclude_id``."""

    for entry in existing:
        if entry.draw_id == draw_id and entry.position == position and entry.id != exclude_id:
            return entry
    return None


def available_positions(
    existing: Iterable[PositionedEntry],
    draw_id: int,
    exclude_id: int | None = None,
) -> list[int]:
    used = {e.position for e in existing if e.draw_id == draw_id and e.id != exclude_id}
    return [p for p in ALL_POSITIONS if p not in used]


def duplicate_positions(positions: Iterable[int]) -> list[int]:
    """Positions occurring more than once, in order of their first repeat."""

    seen: set[int] = set()
    repeated: list[int] = []
    for position in positions:
        if position in seen and position not in repeated:
            repeated.append(position)
        seen.add(position)
    return repeated


def check_fields(values: Mapping[str, Any]) -> None:
    """Format, range and prize checks for whichever fields ``values`` carries.

    Needs no stored data, so callers run it before touching the store.
    """

    if "winning_number" in values and not is_valid_winning_number(values["winning_number"]):
        raise ValidationError(WINNING_NUMBER_FORMAT_ERROR, details={"winning_number": [WINNING_NUMBER_FORMAT_ERROR]})
    if "position" in values and not is_valid_position(values["position"]):
        raise ValidationError(POSITION_RANGE_ERROR, details={"position": [POSITION_RANGE_ERROR]})
    if "prize_amount" in values:
        prize = values["prize_amount"]
        if isinstance(prize, bool) or not isinstance(prize, (int, float)) or prize < 0 or not math.isfinite(prize):
            raise ValidationError("Invalid prize amount", details={"prize_amount": ["Invalid prize amount"]})


def check_position_free(
    existing: Iterable[PositionedEntry],
    draft: WinningNumberDraft,
    exclude_id: int | None = None,
) -> None:
    conflict = find_position_conflict(existing, draft.draw_id, draft.position, exclude_id)
    if conflict is not None:
        message = f"Position {draft.position} already exists for this draw"
        raise ValidationError(message, details={"position": [message]})


def _parse_position(raw: str) -> int | None:
    if not POSITION_TEXT_PATTERN.fullmatch(raw):
        return None
    position = int(raw)
    return position if is_valid_position(position) else None


def _parse_prize(raw: str) -> float | None:
    if not PRIZE_TEXT_PATTERN.fullmatch(raw):
        return None
    prize = float(raw)
    return prize if math.isfinite(prize) else None


def parse_bulk_lines(text: str, draw_id: int) -> list[WinningNumberDraft]:
    """Parse ``code,position,prize`` lines; all-or-nothing.

    Raises ``ValidationError`` whose ``details`` lists one message per bad
    line, or names the positions repeated inside the batch.
    """

    lines = [(n, line.strip()) for n, line in enumerate((text or "").splitlines(), start=1)]
    lines = [(n, line) for n, line in lines if line]
    if not lines:
        raise ValidationError("Enter at least one winning number")

    drafts: list[WinningNumberDraft] = []
    errors: list[str] = []
    for number, line in lines:
        parts = [p.strip() for p in line.split(",")]
        if len(parts) != 3:
            errors.append(f'Line {number}: Must have format "number,position,prize"')
            continue
        code, raw_position, raw_prize = parts
        if not is_valid_winning_number(code):
            errors.append(f"Line {number}: Invalid number format (use XXX-YYYYYYY)")
            continue
        position = _parse_position(raw_position)
        if position is None:
            errors.append(f"Line {number}: Position must be {MIN_POSITION}-{MAX_POSITION}")
            continue
        prize = _parse_prize(raw_prize)
        if prize is None:
            errors.append(f"Line {number}: Invalid prize amount")
            continue
        drafts.append(WinningNumberDraft(draw_id=draw_id, winning_number=code, position=position, prize_amount=prize))

    if errors:
        raise ValidationError("\n".join(errors), details=errors)

    repeated = duplicate_positions(d.position for d in drafts)
    if repeated:
        message = "Duplicate positions found: " + ", ".join(str(p) for p in repeated)
        raise ValidationError(message, details=[message])

    return drafts
