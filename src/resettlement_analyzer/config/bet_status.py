"""Bet status code definitions and display names."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class BetStatus:
    code: int
    name: str


BET_STATUSES: dict[int, BetStatus] = {
    0: BetStatus(code=0, name="Opened"),
    1: BetStatus(code=1, name="Pending"),
    2: BetStatus(code=2, name="Won"),
    3: BetStatus(code=3, name="Draw"),
    4: BetStatus(code=4, name="Lost"),
    5: BetStatus(code=5, name="Cancelled"),
    6: BetStatus(code=6, name="Cashout"),
}

# Closed range of codes a ticket can only hold after a settlement
SETTLED_RANGE = (2, 4)


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def status_name(code: object) -> str:
    """Return the display name for a bet status code.

    Never fails: anything outside 0-6 (including None or strings) renders
    as ``Unknown(<code>)``.
    """
    key = code
    if isinstance(code, float) and code.is_integer():
        key = int(code)
    if _is_number(key) and key in BET_STATUSES:
        return BET_STATUSES[key].name
    return f"Unknown({code})"


def is_settled_status(code: object) -> bool:
    """True if ``code`` lies in the settled range (Won, Draw, Lost)."""
    if not _is_number(code):
        return False
    low, high = SETTLED_RANGE
    return low <= code <= high

