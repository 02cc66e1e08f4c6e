class LibraryError(Exception):
    """Base exception for circulation errors."""


class NotFoundError(LibraryError):
    """A referenced user, media item or loan does not exist."""


class BusinessRuleViolation(LibraryError):
    """A lending rule blocked the operation. The message is meant for display."""


class NotAuthorizedError(LibraryError):
    """An admin-only operation was called without an admin session."""
