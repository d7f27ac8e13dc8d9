# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from siteauth.shared.errors.base import DomainError


class DuplicateAccountError(DomainError):
    code = "email_in_use"
    message = "Email is used"


class AuthenticationError(DomainError):
    code = "authentication_failed"
    message = "Invalid email or password"


class UserNotFoundError(AuthenticationError):
    code = "user_not_found"
    message = "User not found"


class WrongPasswordError(AuthenticationError):
    code = "wrong_password"
    message = "Enter correct password"


class InvalidCredentialsError(AuthenticationError):
    code = "invalid_credentials"
    message = "Invalid email or password"


class EmailNotFoundError(DomainError):
    code = "email_not_found"
    message = "Email is not found"


class InvalidTokenError(DomainError):
    code = "invalid_token"
    status = HTTPStatus.UNAUTHORIZED
    message = "Token is invalid"


class TokenExpiredError(InvalidTokenError):
    code = "token_expired"
    message = "Token has expired"
