# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from siteauth.shared.errors.base import ConfigurationError

_WEAK_SECRETS = ("dev", "development", "test", "secret", "changeme")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str = Field("sqlite:///siteauth.db", alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )


class MailConfig(BaseSettings):
    smtp_host: str | None = Field(None, alias="SMTP_HOST")
    smtp_port: int = Field(587, ge=1, le=65535, alias="SMTP_PORT")
    smtp_username: str | None = Field(None, alias="SMTP_USERNAME")
    smtp_password: str | None = Field(None, alias="SMTP_PASSWORD")
    smtp_use_tls: bool = Field(True, alias="SMTP_USE_TLS")
    smtp_timeout: float = Field(10.0, ge=0.1, alias="SMTP_TIMEOUT")
    sender: str = Field("no-reply@localhost", alias="MAIL_FROM")
    admin_email: str | None = Field(None, alias="ADMIN_EMAIL")

    # Legacy behaviour: registration mails carried the plaintext password.
    include_password: bool = Field(False, alias="NOTIFY_INCLUDE_PASSWORD")

    retries: int = Field(3, ge=0, alias="MAIL_RETRIES")
    backoff_base: float = Field(0.5, ge=0.0, alias="MAIL_BACKOFF_BASE")
    backoff_cap: float = Field(8.0, ge=0.0, alias="MAIL_BACKOFF_CAP")
    workers: int = Field(2, ge=1, alias="MAIL_WORKERS")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )

    @field_validator("smtp_use_tls", "include_password", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)


class SecurityConfig(BaseSettings):
    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = Field(["*"], alias="ALLOWED_ORIGINS")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, str):
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return value

    @field_validator("enable_hsts", mode="before")
    @classmethod
    def _parse_hsts(cls, value: str | bool) -> bool:
        return _parse_bool(value)


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _mail_config_factory() -> MailConfig:
    return MailConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    jwt_secret: str = Field("", alias="JWT_SECRET")
    token_ttl_seconds: int = Field(3600, ge=1, alias="TOKEN_TTL_SECONDS")
    bcrypt_rounds: int = Field(12, ge=4, le=31, alias="BCRYPT_ROUNDS")
    unified_auth_errors: bool = Field(False, alias="AUTH_UNIFIED_ERRORS")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    mail: MailConfig = Field(default_factory=_mail_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_by_name=True,
        validate_assignment=True,
    )

    @field_validator("debug_logging", "unified_auth_errors", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_production_settings(self) -> "AppConfig":
        if not self.is_production():
            return self

        if self.jwt_secret.strip().lower() in _WEAK_SECRETS or len(self.jwt_secret) < 32:
            raise ConfigurationError(
                "JWT_SECRET must be a strong random value (32+ chars) in production",
                code="insecure_jwt_secret",
            )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()


__all__ = ["AppConfig", "DatabaseConfig", "MailConfig", "SecurityConfig", "load_config"]
