"""
MediaHive circulation package.

Exports key modules for convenient imports.
"""

from .domain import (
    MediaCategory,
    User,
    Media,
    Book,
    CD,
    Loan,
    Admin,
    OverdueReport,
)

from .errors import (
    LibraryError,
    NotFoundError,
    BusinessRuleViolation,
    NotAuthorizedError,
)

from .config import LibrarySettings
from .clock import SystemClock, FixedClock
from .fines import FineStrategy, LinearFineStrategy, FinePolicy

from .repositories import (
    UserRepo,
    MediaRepo,
    LoanRepo,
    AdminRepo,
)

from .notifications import (
    Notifier,
    EmailClient,
    FakeEmailClient,
    SentEmail,
    console_notifier,
    email_notifier,
)

from .services import (
    AdminSession,
    UserService,
    CatalogService,
    LendingService,
    ReminderService,
)

from .api import LibrarySystem
from .seed import seed_demo_data

__all__ = [
    # domain
    "MediaCategory",
    "User",
    "Media",
    "Book",
    "CD",
    "Loan",
    "Admin",
    "OverdueReport",
    # errors
    "LibraryError",
    "NotFoundError",
    "BusinessRuleViolation",
    "NotAuthorizedError",
    # config / clock / fines
    "LibrarySettings",
    "SystemClock",
    "FixedClock",
    "FineStrategy",
    "LinearFineStrategy",
    "FinePolicy",
    # repos
    "UserRepo",
    "MediaRepo",
    "LoanRepo",
    "AdminRepo",
    # notifications
    "Notifier",
    "EmailClient",
    "FakeEmailClient",
    "SentEmail",
    "console_notifier",
    "email_notifier",
    # services
    "AdminSession",
    "UserService",
    "CatalogService",
    "LendingService",
    "ReminderService",
    # api
    "LibrarySystem",
    # seed
    "seed_demo_data",
]
