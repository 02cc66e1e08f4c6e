from __future__ import annotations
from typing import List, Optional

from .clock import SystemClock
from .config import LibrarySettings
from .domain import Book, CD, Loan, Media, OverdueReport, User
from .fines import FinePolicy
from .notifications import FakeEmailClient, Notifier, email_notifier
from .repositories import AdminRepo, LoanRepo, MediaRepo, UserRepo
from .services import AdminSession, CatalogService, LendingService, ReminderService, UserService


class LibrarySystem:
    """
    A simple facade that wires repos + services and offers a compact API.

    A ``FakeEmailClient`` is registered as the first reminder sink so sent
    reminders can be inspected through ``system.outbox.sent``.
    """

    def __init__(self, settings: Optional[LibrarySettings] = None, clock=None) -> None:
        self.settings = settings or LibrarySettings()
        self.clock = clock or SystemClock()

        # repos
        self.users = UserRepo()
        self.media = MediaRepo()
        self.loans = LoanRepo()
        self.admins = AdminRepo()

        # services
        self.fine_policy = FinePolicy.from_rates(self.settings.fine_rates)
        self.user_service = UserService(self.users)
        self.catalog = CatalogService(self.media)
        self.lending = LendingService(
            self.users, self.media, self.loans, self.fine_policy, self.clock, self.settings
        )
        self.reminders = ReminderService(
            self.users, self.media, self.loans, self.fine_policy, self.clock
        )

        self.outbox = FakeEmailClient()
        self.reminders.register_notifier(email_notifier(self.outbox, self.settings.reminder_subject))

    # ---- users / admins
    def register_user(self, name: str, email: Optional[str] = None) -> User:
        return self.user_service.register_user(name, email)

    def new_session(self) -> AdminSession:
        return AdminSession(self.admins)

    # ---- catalog
    def add_book(self, title: str, author: str, isbn: str) -> Book:
        return self.catalog.add_book(title, author, isbn)

    def add_cd(self, title: str, artist: str) -> CD:
        return self.catalog.add_cd(title, artist)

    def search(self, query: Optional[str] = None) -> List[Media]:
        return self.catalog.search(query)

    # ---- lending
    def borrow(self, user_id: str, media_id: str) -> Loan:
        return self.lending.borrow(user_id, media_id)

    def return_media(self, loan_id: str) -> Loan:
        return self.lending.return_media(loan_id)

    def pay_fine(self, user_id: str, amount: int) -> int:
        return self.lending.pay_fine(user_id, amount)

    def unregister_user(self, session: AdminSession, user_id: str) -> None:
        self.lending.unregister_user(session, user_id)

    # ---- reminders / reporting
    def register_notifier(self, notifier: Notifier) -> None:
        self.reminders.register_notifier(notifier)

    def send_reminders(self) -> int:
        return self.reminders.send_reminders()

    def build_report(self) -> OverdueReport:
        return self.reminders.build_report()

    def borrowed_media_report(self) -> List[str]:
        return self.reminders.borrowed_media_report()
