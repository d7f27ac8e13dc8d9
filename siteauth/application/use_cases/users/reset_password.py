# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Reset-password request.

Only notifies the account owner. Stored credentials are one-way hashes and
are never mailed out; a signed single-use reset token would be the real fix.
"""

from __future__ import annotations

from siteauth.application.services.notifications import reset_requested_message
from siteauth.domain.users.entities import User
from siteauth.domain.users.exceptions import EmailNotFoundError
from siteauth.domain.users.repositories import Notifier, UserRepository


class ResetPasswordUseCase:
    def __init__(self, *, users: UserRepository, notifications: Notifier) -> None:
        self._users = users
        self._notifications = notifications

    def execute(self, email: str) -> User:
        user = self._users.find_by_email(email)
        if user is None:
            raise EmailNotFoundError()
        self._notifications.dispatch(reset_requested_message(user))
        return user
