from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, Optional, Set

from .errors import BusinessRuleViolation


class MediaCategory(Enum):
    BOOK = "BOOK"
    CD = "CD"
    OTHER = "OTHER"


@dataclass
class User:
    user_id: str
    name: str
    email: Optional[str] = None
    outstanding_fine: int = 0

    @property
    def has_email(self) -> bool:
        return bool(self.email and self.email.strip())

    def add_fine(self, amount: int) -> None:
        if amount <= 0:
            return
        self.outstanding_fine += amount

    def pay_fine(self, amount: int) -> None:
        if amount <= 0:
            return
        self.outstanding_fine = max(0, self.outstanding_fine - amount)


@dataclass
class Media:
    media_id: str
    title: str
    category: MediaCategory = MediaCategory.OTHER
    available: bool = True

    @property
    def creator(self) -> Optional[str]:
        return None


@dataclass
class Book(Media):
    author: str = ""
    isbn: str = ""
    category: MediaCategory = MediaCategory.BOOK

    @property
    def creator(self) -> Optional[str]:
        return self.author


@dataclass
class CD(Media):
    artist: str = ""
    category: MediaCategory = MediaCategory.CD

    @property
    def creator(self) -> Optional[str]:
        return self.artist


@dataclass
class Loan:
    loan_id: str
    user_id: str
    media_id: str
    borrowed_on: date
    due_on: date
    returned_on: Optional[date] = None

    def __post_init__(self) -> None:
        if self.due_on < self.borrowed_on:
            raise ValueError("due date cannot be before borrow date")

    @property
    def is_returned(self) -> bool:
        return self.returned_on is not None

    def is_overdue(self, today: date) -> bool:
        return self.returned_on is None and today > self.due_on

    def overdue_days(self, today: date) -> int:
        if not self.is_overdue(today):
            return 0
        return (today - self.due_on).days

    def days_until_due(self, today: date) -> int:
        return (self.due_on - today).days

    def mark_returned(self, when: date) -> None:
        # a return date is set once and never cleared
        if self.returned_on is not None:
            raise BusinessRuleViolation("Already returned")
        self.returned_on = when


@dataclass
class Admin:
    admin_id: str
    username: str
    password: str


@dataclass
class OverdueReport:
    overdue_counts: Dict[str, int] = field(default_factory=dict)
    fine_totals: Dict[str, int] = field(default_factory=dict)

    def users(self) -> Set[str]:
        return set(self.overdue_counts) | set(self.fine_totals)
