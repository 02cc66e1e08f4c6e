from __future__ import annotations
from datetime import date, timedelta
from typing import Optional


class SystemClock:
    def today(self) -> date:
        return date.today()


class FixedClock:
    """
    Clock pinned to a given day. Tests move it forward with advance().
    """

    def __init__(self, day: Optional[date] = None) -> None:
        self._day = day or date.today()

    def today(self) -> date:
        return self._day

    def set(self, day: date) -> None:
        self._day = day

    def advance(self, days: int) -> date:
        self._day = self._day + timedelta(days=days)
        return self._day
