from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict

from .domain import MediaCategory

# ----------------- defaults -----------------
BOOK_LOAN_DAYS = 28
CD_LOAN_DAYS = 7
FALLBACK_LOAN_DAYS = 28

BOOK_FINE_PER_DAY = 10
CD_FINE_PER_DAY = 20

REMINDER_SUBJECT = "Library reminder"


def _default_loan_days() -> Dict[MediaCategory, int]:
    return {MediaCategory.BOOK: BOOK_LOAN_DAYS, MediaCategory.CD: CD_LOAN_DAYS}


def _default_fine_rates() -> Dict[MediaCategory, int]:
    return {MediaCategory.BOOK: BOOK_FINE_PER_DAY, MediaCategory.CD: CD_FINE_PER_DAY}


@dataclass(frozen=True)
class LibrarySettings:
    """
    Lending policy knobs. Categories missing from ``loan_days`` use
    ``fallback_loan_days``; categories missing from ``fine_rates`` carry no fine.
    """

    loan_days: Dict[MediaCategory, int] = field(default_factory=_default_loan_days)
    fallback_loan_days: int = FALLBACK_LOAN_DAYS
    fine_rates: Dict[MediaCategory, int] = field(default_factory=_default_fine_rates)
    reminder_subject: str = REMINDER_SUBJECT

    def loan_days_for(self, category: MediaCategory) -> int:
        return self.loan_days.get(category, self.fallback_loan_days)
