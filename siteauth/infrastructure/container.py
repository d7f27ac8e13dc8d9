# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine

from siteauth.application.services.notifications import NotificationDispatcher
from siteauth.application.services.password_hashing import BcryptPasswordHasher
from siteauth.application.services.session_tokens import JwtSessionIssuer
from siteauth.application.use_cases.users.login_user import LoginUserUseCase
from siteauth.application.use_cases.users.register_user import RegisterUserUseCase
from siteauth.application.use_cases.users.reset_password import ResetPasswordUseCase
from siteauth.domain.users.repositories import Mailer
from siteauth.infrastructure.db import SessionFactory, build_engine, build_session_factory
from siteauth.infrastructure.mailer import build_mailer
from siteauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from siteauth.interfaces.http.controllers.auth_controller import AuthController
from siteauth.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or load_config()

    @cached_property
    def engine(self) -> Engine:
        return build_engine(self.config.database)

    @cached_property
    def session_factory(self) -> SessionFactory:
        return build_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.bcrypt_rounds)

    @cached_property
    def session_issuer(self) -> JwtSessionIssuer:
        return JwtSessionIssuer(self.config.jwt_secret, ttl=self.config.token_ttl_seconds)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def mailer(self) -> Mailer:
        return build_mailer(self.config.mail)

    @cached_property
    def notifications(self) -> NotificationDispatcher:
        mail = self.config.mail
        return NotificationDispatcher(
            self.mailer,
            retries=mail.retries,
            backoff_base=mail.backoff_base,
            backoff_cap=mail.backoff_cap,
            workers=mail.workers,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            notifications=self.notifications,
            admin_email=self.config.mail.admin_email,
            include_password_in_mail=self.config.mail.include_password,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
            issuer=self.session_issuer,
            unified_errors=self.config.unified_auth_errors,
        )

    @cached_property
    def reset_password_use_case(self) -> ResetPasswordUseCase:
        return ResetPasswordUseCase(
            users=self.user_repository,
            notifications=self.notifications,
        )

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            reset_password_use_case=self.reset_password_use_case,
        )
