# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from siteauth.application.services.notifications import (
    admin_registration_message,
    registration_message,
)
from siteauth.domain.exceptions import ConflictError
from siteauth.domain.users.entities import User
from siteauth.domain.users.exceptions import DuplicateAccountError
from siteauth.domain.users.repositories import Notifier, PasswordHasher, UserRepository
from siteauth.shared.logging import logger


@dataclass(slots=True, frozen=True)
class RegistrationInput:
    first_name: str
    last_name: str
    email: str
    password: str


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        notifications: Notifier,
        admin_email: str | None = None,
        include_password_in_mail: bool = False,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._notifications = notifications
        self._admin_email = admin_email
        self._include_password = include_password_in_mail

    def execute(self, data: RegistrationInput) -> User:
        if self._users.find_by_email(data.email):
            raise DuplicateAccountError()

        hashed = self._password_hasher.hash(data.password)
        user = User(
            id=0,
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            password_hash=hashed,
            created_at=datetime.now(UTC),
        )
        try:
            persisted = self._users.add(user)
        except ConflictError as exc:
            # A concurrent registration committed the same email first.
            raise DuplicateAccountError() from exc

        self._notify(persisted, data.password)
        return persisted

    def _notify(self, user: User, password: str) -> None:
        secret = password if self._include_password else None
        self._notifications.dispatch(registration_message(user, secret))
        if not self._admin_email:
            logger.warning(f"register: ADMIN_EMAIL not set, admin notice skipped user_id={user.id}")
            return
        self._notifications.dispatch(admin_registration_message(user, self._admin_email, secret))
