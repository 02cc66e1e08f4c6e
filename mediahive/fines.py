from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from .domain import MediaCategory


class FineStrategy(ABC):
    @abstractmethod
    def calculate_fine(self, overdue_days: int) -> int:
        """Fine for the given number of overdue days. Zero when not overdue."""


class LinearFineStrategy(FineStrategy):
    def __init__(self, rate_per_day: int) -> None:
        if rate_per_day < 0:
            raise ValueError("rate_per_day cannot be negative")
        self.rate_per_day = rate_per_day

    def calculate_fine(self, overdue_days: int) -> int:
        if overdue_days <= 0:
            return 0
        return self.rate_per_day * overdue_days

    def __repr__(self) -> str:
        return f"LinearFineStrategy(rate_per_day={self.rate_per_day})"


class FinePolicy:
    """
    Resolves the fine strategy for a media category.
    """

    def __init__(self, strategies: Mapping[MediaCategory, FineStrategy]) -> None:
        self._strategies: Dict[MediaCategory, FineStrategy] = dict(strategies)

    @classmethod
    def from_rates(cls, rates: Mapping[MediaCategory, int]) -> "FinePolicy":
        return cls({cat: LinearFineStrategy(rate) for cat, rate in rates.items()})

    def strategy_for(self, category: MediaCategory) -> Optional[FineStrategy]:
        return self._strategies.get(category)

    def fine_for(self, category: MediaCategory, overdue_days: int) -> int:
        strategy = self.strategy_for(category)
        if strategy is None:
            return 0
        return strategy.calculate_fine(overdue_days)
