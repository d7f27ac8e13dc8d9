# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase, RegistrationInput
from .use_cases.users.reset_password import ResetPasswordUseCase

__all__ = [
    "LoginUserUseCase",
    "RegisterUserUseCase",
    "RegistrationInput",
    "ResetPasswordUseCase",
]
