# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol

from .entities import MailMessage, SessionToken, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: int) -> User | None: ...
    def add(self, user: User) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionIssuer(Protocol):
    def issue(
        self, subject_id: int, *, ttl: int | None = None, now: datetime | None = None
    ) -> SessionToken: ...
    def verify(self, token: str) -> dict[str, Any]: ...


class Mailer(Protocol):
    def send(self, message: MailMessage) -> None: ...


class Notifier(Protocol):
    def dispatch(self, message: MailMessage) -> None: ...
