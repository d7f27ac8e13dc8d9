# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from siteauth.domain.users.entities import SessionToken
from siteauth.domain.users.exceptions import (
    InvalidCredentialsError,
    UserNotFoundError,
    WrongPasswordError,
)
from siteauth.domain.users.repositories import PasswordHasher, SessionIssuer, UserRepository


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
        issuer: SessionIssuer,
        unified_errors: bool = False,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._issuer = issuer
        self._unified_errors = unified_errors

    def execute(self, email: str, password: str) -> SessionToken:
        user = self._users.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError() if self._unified_errors else UserNotFoundError()

        if not self._password_hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError() if self._unified_errors else WrongPasswordError()

        return self._issuer.issue(user.id)
