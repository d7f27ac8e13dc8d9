# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from siteauth.application.use_cases.users.login_user import LoginUserUseCase
from siteauth.application.use_cases.users.register_user import (
    RegisterUserUseCase,
    RegistrationInput,
)
from siteauth.application.use_cases.users.reset_password import ResetPasswordUseCase
from siteauth.domain.users.exceptions import (
    AuthenticationError,
    DuplicateAccountError,
    EmailNotFoundError,
)
from siteauth.infrastructure.audit import AuditAction, audit_log
from siteauth.interfaces.http.dto.auth import (
    ResetPasswordRequestDTO,
    ResetPasswordSuccessDTO,
    SignInRequestDTO,
    SignInSuccessDTO,
    SignUpRequestDTO,
    SignUpSuccessDTO,
)
from siteauth.shared.errors.validation import raise_validation_error
from siteauth.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _json_body() -> dict:
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        reset_password_use_case: ResetPasswordUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._reset_password_use_case = reset_password_use_case

    def sign_up(self) -> tuple[Response, int]:
        try:
            dto = SignUpRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "Data isn't correct by register")

        try:
            user = self._register_use_case.execute(
                RegistrationInput(
                    first_name=dto.first_name,
                    last_name=dto.last_name,
                    email=dto.email,
                    password=dto.password,
                )
            )
        except DuplicateAccountError:
            audit_log(
                AuditAction.REGISTER_REJECTED,
                ip_address=_get_client_ip(),
                details={"reason": "email_in_use"},
                success=False,
            )
            raise

        audit_log(AuditAction.REGISTER, user_id=user.id, ip_address=_get_client_ip())
        logger.info(f"auth.sign_up: ok user_id={user.id}")
        return jsonify(SignUpSuccessDTO().model_dump()), 201

    def sign_in(self) -> tuple[Response, int]:
        try:
            dto = SignInRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "Enter into system isn't correct")

        ip_address = _get_client_ip()
        try:
            session = self._login_use_case.execute(dto.email, dto.password)
        except AuthenticationError as exc:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"reason": exc.code},
                success=False,
            )
            raise

        audit_log(AuditAction.LOGIN_SUCCESS, user_id=session.user_id, ip_address=ip_address)
        logger.info(f"auth.sign_in: ok user_id={session.user_id}")
        payload = SignInSuccessDTO(token=session.token, user_id=session.user_id)
        return jsonify(payload.model_dump(by_alias=True)), 200

    def reset_password(self) -> tuple[Response, int]:
        try:
            dto = ResetPasswordRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc, "User not found")

        try:
            user = self._reset_password_use_case.execute(dto.email)
        except EmailNotFoundError:
            audit_log(
                AuditAction.PASSWORD_RESET_REQUESTED,
                ip_address=_get_client_ip(),
                details={"reason": "email_not_found"},
                success=False,
            )
            raise

        audit_log(AuditAction.PASSWORD_RESET_REQUESTED, user_id=user.id, ip_address=_get_client_ip())
        return jsonify(ResetPasswordSuccessDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/v1/api/auth")
        bp.add_url_rule("/sign-up", view_func=self.sign_up, methods=["POST"])
        bp.add_url_rule("/sign-in", view_func=self.sign_in, methods=["POST"])
        bp.add_url_rule("/reset-password", view_func=self.reset_password, methods=["POST"])
        return bp
