# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from siteauth.shared.errors.base import ConfigurationError, InfrastructureError


class ConflictError(InfrastructureError):
    """Uniqueness constraint violated by a repository write."""

    def __init__(self, field: str) -> None:
        super().__init__("conflict", context={"field": field})
        self.field = field


class MailerError(InfrastructureError):
    def __init__(self, reason: str) -> None:
        super().__init__("mailer_error", context={"reason": reason})


class SigningError(ConfigurationError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason, code="signing_error")


class EncodingError(TypeError):
    pass
