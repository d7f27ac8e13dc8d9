from __future__ import annotations

import threading
from concurrent.futures import Executor, Future
from dataclasses import replace

from siteauth.domain.exceptions import ConflictError
from siteauth.domain.users.entities import MailMessage, User

TEST_SECRET = "test-secret-with-enough-entropy-0123456789"


class InlineExecutor(Executor):
    """Runs submitted work immediately so notification side effects are observable."""

    def submit(self, fn, /, *args, **kwargs):
        future: Future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except BaseException as exc:
            future.set_exception(exc)
        return future


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._seq = 1
        self._lock = threading.Lock()

    def find_by_email(self, email: str) -> User | None:
        return self._users.get(email)

    def find_by_id(self, user_id: int) -> User | None:
        return next((u for u in self._users.values() if u.id == user_id), None)

    def add(self, user: User) -> User:
        with self._lock:
            if user.email in self._users:
                raise ConflictError("email")
            new_user = replace(user, id=self._seq)
            self._seq += 1
            self._users[new_user.email] = new_user
            return new_user

    def count(self) -> int:
        return len(self._users)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[MailMessage] = []

    def dispatch(self, message: MailMessage) -> None:
        self.messages.append(message)


class RecordingMailer:
    def __init__(self, failures: int = 0) -> None:
        self.sent: list[MailMessage] = []
        self.attempts = 0
        self._failures = failures

    def send(self, message: MailMessage) -> None:
        self.attempts += 1
        if self.attempts <= self._failures:
            raise ConnectionError("smtp down")
        self.sent.append(message)


class DeterministicHasher:
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"

