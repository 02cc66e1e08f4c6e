"""
Reminder delivery sinks.

A notifier is any callable taking ``(user, message)``. The reminder service
holds a list of them and calls each one per user.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List

from .config import REMINDER_SUBJECT
from .domain import User

Notifier = Callable[[User, str], None]


class EmailClient(ABC):
    @abstractmethod
    def send(self, to: str, subject: str, body: str) -> None:
        ...


@dataclass(frozen=True)
class SentEmail:
    to: str
    subject: str
    body: str


class FakeEmailClient(EmailClient):
    """Records outgoing mail instead of sending it."""

    def __init__(self) -> None:
        self._sent: List[SentEmail] = []

    def send(self, to: str, subject: str, body: str) -> None:
        self._sent.append(SentEmail(to=to, subject=subject, body=body))

    @property
    def sent(self) -> List[SentEmail]:
        return list(self._sent)

    def clear(self) -> None:
        self._sent.clear()


def email_notifier(client: EmailClient, subject: str = REMINDER_SUBJECT) -> Notifier:
    def notify(user: User, message: str) -> None:
        if not user.has_email:
            return
        client.send(user.email.strip(), subject, message)

    return notify


def console_notifier(user: User, message: str) -> None:
    print(f"Reminder -> {user.email} : {message}")
