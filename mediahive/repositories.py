from __future__ import annotations
import itertools
from datetime import date
from typing import Dict, Iterator, List, Optional

from .domain import Admin, Book, CD, Loan, Media, User


class _Sequence:
    """Per-repository id source: U1, U2, ..."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        self._counter: Iterator[int] = itertools.count(1)

    def next_id(self) -> str:
        return f"{self.prefix}{next(self._counter)}"


class UserRepo:
    def __init__(self) -> None:
        self._users: Dict[str, User] = {}
        self._ids = _Sequence("U")

    def next_id(self) -> str:
        return self._ids.next_id()

    def add(self, user: User) -> None:
        self._users[user.user_id] = user

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self._users.values() if u.email == email), None)

    def list_all(self) -> List[User]:
        return list(self._users.values())

    def delete(self, user: User) -> None:
        self._users.pop(user.user_id, None)


class MediaRepo:
    def __init__(self) -> None:
        self._items: Dict[str, Media] = {}
        self._ids = _Sequence("M")

    def next_id(self) -> str:
        return self._ids.next_id()

    def add(self, media: Media) -> None:
        self._items[media.media_id] = media

    def get(self, media_id: str) -> Optional[Media]:
        return self._items.get(media_id)

    def list_all(self) -> List[Media]:
        return list(self._items.values())

    def delete(self, media: Media) -> None:
        self._items.pop(media.media_id, None)

    def search(self, text: Optional[str]) -> List[Media]:
        t = (text or "").lower()

        def matches(m: Media) -> bool:
            if t in m.media_id.lower() or t in m.title.lower():
                return True
            if isinstance(m, Book):
                return t in m.author.lower() or t in m.isbn.lower()
            if isinstance(m, CD):
                return t in m.artist.lower()
            return False

        return [m for m in self._items.values() if matches(m)]


class LoanRepo:
    def __init__(self) -> None:
        self._loans: Dict[str, Loan] = {}
        self._ids = _Sequence("L")

    def next_id(self) -> str:
        return self._ids.next_id()

    def add(self, loan: Loan) -> None:
        self._loans[loan.loan_id] = loan

    def get(self, loan_id: str) -> Optional[Loan]:
        return self._loans.get(loan_id)

    def list_all(self) -> List[Loan]:
        return list(self._loans.values())

    def list_by_user(self, user_id: str) -> List[Loan]:
        return [l for l in self._loans.values() if l.user_id == user_id]

    def list_active(self) -> List[Loan]:
        return [l for l in self._loans.values() if l.returned_on is None]

    def list_overdue(self, today: date) -> List[Loan]:
        return [l for l in self._loans.values() if l.is_overdue(today)]

    def delete(self, loan: Loan) -> None:
        self._loans.pop(loan.loan_id, None)


class AdminRepo:
    def __init__(self) -> None:
        self._admins: Dict[str, Admin] = {}
        self._ids = _Sequence("A")

    def next_id(self) -> str:
        return self._ids.next_id()

    def add(self, admin: Admin) -> None:
        self._admins[admin.admin_id] = admin

    def find_by_username(self, username: str) -> Optional[Admin]:
        return next((a for a in self._admins.values() if a.username == username), None)

    def list_all(self) -> List[Admin]:
        return list(self._admins.values())
