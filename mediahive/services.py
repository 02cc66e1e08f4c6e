from __future__ import annotations
import logging
from collections import Counter
from datetime import timedelta
from typing import List, Optional

from .config import LibrarySettings
from .domain import Admin, Book, CD, Loan, Media, MediaCategory, OverdueReport, User
from .errors import BusinessRuleViolation, NotAuthorizedError, NotFoundError
from .fines import FinePolicy
from .notifications import Notifier
from .repositories import AdminRepo, LoanRepo, MediaRepo, UserRepo

logger = logging.getLogger(__name__)


class AdminSession:
    """
    Login state for one front end. Handed explicitly to admin-only operations.
    """

    def __init__(self, admins: AdminRepo) -> None:
        self.admins = admins
        self.current_admin: Optional[Admin] = None

    def login(self, username: str, password: str) -> bool:
        admin = self.admins.find_by_username(username)
        if admin is None or admin.password != password:
            logger.info("login failed | username=%s", username)
            return False
        self.current_admin = admin
        logger.info("login | username=%s", username)
        return True

    def logout(self) -> None:
        self.current_admin = None

    @property
    def is_logged_in(self) -> bool:
        return self.current_admin is not None

    def require_admin(self) -> Admin:
        if self.current_admin is None:
            raise NotAuthorizedError("Admin required")
        return self.current_admin


class UserService:
    def __init__(self, users: UserRepo) -> None:
        self.users = users

    def register_user(self, name: str, email: Optional[str] = None) -> User:
        u = User(user_id=self.users.next_id(), name=name, email=email)
        self.users.add(u)
        logger.info("user registered | user_id=%s", u.user_id)
        return u

    def get(self, user_id: str) -> Optional[User]:
        return self.users.get(user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.users.find_by_email(email)


class CatalogService:
    def __init__(self, media: MediaRepo) -> None:
        self.media = media

    def add_book(self, title: str, author: str, isbn: str) -> Book:
        b = Book(media_id=self.media.next_id(), title=title, author=author, isbn=isbn)
        self.media.add(b)
        return b

    def add_cd(self, title: str, artist: str) -> CD:
        cd = CD(media_id=self.media.next_id(), title=title, artist=artist)
        self.media.add(cd)
        return cd

    def get(self, media_id: str) -> Optional[Media]:
        return self.media.get(media_id)

    def search(self, query: Optional[str]) -> List[Media]:
        return self.media.search(query)

    def search_by_title(self, title: Optional[str]) -> List[Media]:
        t = (title or "").lower()
        return [m for m in self.media.list_all() if t in m.title.lower()]

    def search_by_author(self, author: Optional[str]) -> List[Media]:
        """Matches book authors and CD artists."""
        t = (author or "").lower()
        return [
            m
            for m in self.media.list_all()
            if m.creator is not None and t in m.creator.lower()
        ]

    def search_by_isbn(self, isbn: Optional[str]) -> List[Media]:
        if isbn is None:
            return []
        target = isbn.strip().lower()
        return [
            m
            for m in self.media.list_all()
            if isinstance(m, Book) and m.isbn.strip().lower() == target
        ]


class LendingService:
    """
    Borrow/return lifecycle and fine accounting.

    All checks of an operation run before its first mutation, so a failed call
    leaves users, media and loans untouched.
    """

    def __init__(
        self,
        users: UserRepo,
        media: MediaRepo,
        loans: LoanRepo,
        fines: FinePolicy,
        clock,
        settings: LibrarySettings,
    ) -> None:
        self.users = users
        self.media = media
        self.loans = loans
        self.fines = fines
        self.clock = clock
        self.settings = settings

    def _require_user(self, user_id: str) -> User:
        user = self.users.get(user_id)
        if user is None:
            raise NotFoundError("user not found")
        return user

    def borrow(self, user_id: str, media_id: str) -> Loan:
        user = self._require_user(user_id)
        media = self.media.get(media_id)
        if media is None:
            raise NotFoundError("media not found")

        today = self.clock.today()
        if user.outstanding_fine > 0:
            raise BusinessRuleViolation("User has outstanding fines")
        # any overdue loan blocks, whatever its category
        if any(l.is_overdue(today) for l in self.loans.list_by_user(user_id)):
            raise BusinessRuleViolation("User has overdue loans")
        if not media.available:
            raise BusinessRuleViolation("Media not available")

        loan = Loan(
            loan_id=self.loans.next_id(),
            user_id=user_id,
            media_id=media_id,
            borrowed_on=today,
            due_on=today + timedelta(days=self.settings.loan_days_for(media.category)),
        )
        self.loans.add(loan)
        media.available = False
        logger.info(
            "borrow | user_id=%s media_id=%s loan_id=%s due=%s",
            user_id, media_id, loan.loan_id, loan.due_on,
        )
        return loan

    def return_media(self, loan_id: str) -> Loan:
        loan = self.loans.get(loan_id)
        if loan is None:
            raise NotFoundError("loan not found")
        if loan.is_returned:
            raise BusinessRuleViolation("Already returned")

        today = self.clock.today()
        overdue_days = loan.overdue_days(today)
        loan.mark_returned(today)

        media = self.media.get(loan.media_id)
        if media is not None:
            media.available = True
        else:
            logger.warning("return of missing media | loan_id=%s media_id=%s", loan_id, loan.media_id)

        if overdue_days > 0:
            fine = self.fines.fine_for(media.category, overdue_days) if media else 0
            user = self.users.get(loan.user_id)
            if fine > 0 and user is not None:
                user.add_fine(fine)
                logger.info(
                    "fine assessed | user_id=%s loan_id=%s days=%s fine=%s",
                    user.user_id, loan_id, overdue_days, fine,
                )
        logger.info("return | loan_id=%s", loan_id)
        return loan

    def pay_fine(self, user_id: str, amount: int) -> int:
        user = self._require_user(user_id)
        user.pay_fine(amount)
        logger.info("pay_fine | user_id=%s amount=%s remaining=%s", user_id, amount, user.outstanding_fine)
        return user.outstanding_fine

    def unregister_user(self, session: AdminSession, user_id: str) -> None:
        session.require_admin()
        user = self._require_user(user_id)
        if any(not l.is_returned for l in self.loans.list_by_user(user_id)):
            raise BusinessRuleViolation("User cannot be unregistered while having active loans")
        if user.outstanding_fine > 0:
            raise BusinessRuleViolation("User cannot be unregistered while having unpaid fines")
        self.users.delete(user)
        logger.info("user unregistered | user_id=%s", user_id)

    def loans_for_user(self, user_id: str) -> List[Loan]:
        return self.loans.list_by_user(user_id)

    def active_loans(self) -> List[Loan]:
        return self.loans.list_active()


class ReminderService:
    """
    Overdue reminders and loan reports.

    Notifiers are called once per user; a notifier that raises is logged and
    skipped so the others still run.
    """

    def __init__(
        self,
        users: UserRepo,
        media: MediaRepo,
        loans: LoanRepo,
        fines: FinePolicy,
        clock,
    ) -> None:
        self.users = users
        self.media = media
        self.loans = loans
        self.fines = fines
        self.clock = clock
        self.notifiers: List[Notifier] = []

    def register_notifier(self, notifier: Optional[Notifier]) -> None:
        if notifier is not None:
            self.notifiers.append(notifier)

    def send_reminders(self) -> int:
        """Returns the number of users a reminder was built for."""
        today = self.clock.today()
        books: Counter = Counter()
        cds: Counter = Counter()
        for loan in self.loans.list_active():
            if not loan.is_overdue(today):
                continue
            media = self.media.get(loan.media_id)
            if media is None:
                continue
            if media.category is MediaCategory.BOOK:
                books[loan.user_id] += 1
            elif media.category is MediaCategory.CD:
                cds[loan.user_id] += 1

        reminded = 0
        for user_id in sorted(set(books) | set(cds)):
            user = self.users.get(user_id)
            if user is None or not user.has_email:
                continue
            message = f"You have {books[user_id]} overdue book(s) and {cds[user_id]} overdue CD(s)."
            self._deliver(user, message)
            reminded += 1
        logger.info("send_reminders | users=%s", reminded)
        return reminded

    def _deliver(self, user: User, message: str) -> None:
        for notifier in self.notifiers:
            try:
                notifier(user, message)
            except Exception:
                logger.exception("notifier failed | user_id=%s", user.user_id)

    def build_report(self) -> OverdueReport:
        today = self.clock.today()
        report = OverdueReport()
        for loan in self.loans.list_overdue(today):
            uid = loan.user_id
            report.overdue_counts[uid] = report.overdue_counts.get(uid, 0) + 1
            media = self.media.get(loan.media_id)
            fine = self.fines.fine_for(media.category, loan.overdue_days(today)) if media else 0
            report.fine_totals[uid] = report.fine_totals.get(uid, 0) + fine
        return report

    def borrowed_media_report(self) -> List[str]:
        today = self.clock.today()
        lines: List[str] = []
        total = 0
        for loan in self.loans.list_active():
            user = self.users.get(loan.user_id)
            media = self.media.get(loan.media_id)
            user_part = f"{user.user_id} ({user.email})" if user else loan.user_id
            media_part = f"{media.media_id} - {media.title}" if media else loan.media_id

            fine = 0
            if loan.is_overdue(today):
                days = loan.overdue_days(today)
                status = f"OVERDUE by {days} day(s)"
                if media is not None:
                    strategy = self.fines.strategy_for(media.category) or self.fines.strategy_for(MediaCategory.BOOK)
                    fine = strategy.calculate_fine(days) if strategy else 0
            else:
                status = f"DUE in {loan.days_until_due(today)} day(s)"

            total += fine
            fine_part = f" | fine={fine}" if fine > 0 else ""
            lines.append(
                f"{loan.loan_id} | {media_part} | {user_part} | due={loan.due_on.isoformat()} | {status}{fine_part}"
            )

        lines.append(f"TOTAL OUTSTANDING FINE (for active loans): {total}")
        return lines
