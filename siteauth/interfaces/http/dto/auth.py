from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z0-9-]{2,}$")
MIN_PASSWORD_LENGTH = 6
BCRYPT_MAX_BYTES = 72


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not value:
        raise PydanticCustomError("missing", "Email cannot be empty", {})
    if len(value) > 320 or not EMAIL_PATTERN.match(value):
        raise PydanticCustomError("email_invalid", "Email isn't correct", {})
    return value


class SignUpRequestDTO(BaseModel):
    first_name: str = Field("", alias="firstName", max_length=128)
    last_name: str = Field("", alias="lastName", max_length=128)
    email: str
    password: str

    model_config = ConfigDict(validate_by_name=True)

    @field_validator("first_name", "last_name")
    @classmethod
    def strip_names(cls, value: str) -> str:
        return value.strip()

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, value: str) -> str:
        if len(value) < MIN_PASSWORD_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Min length of password is 6",
                {"min_length": MIN_PASSWORD_LENGTH},
            )
        if "\x00" in value:
            raise PydanticCustomError(
                "password_invalid_character",
                "Password must not contain NUL characters",
                {},
            )
        try:
            encoded = value.encode("utf-8")
        except UnicodeEncodeError:
            raise PydanticCustomError(
                "password_invalid_encoding",
                "Password contains invalid characters",
                {},
            ) from None
        if len(encoded) > BCRYPT_MAX_BYTES:
            raise PydanticCustomError(
                "password_too_long",
                "Password must be at most 72 bytes",
                {"max_bytes": BCRYPT_MAX_BYTES},
            )
        return value


class SignInRequestDTO(BaseModel):
    email: str
    password: str  # presence only, no strength check on sign-in

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        return _normalize_email(value)


class ResetPasswordRequestDTO(BaseModel):
    email: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        return value.strip().lower()


class SignUpSuccessDTO(BaseModel):
    message: str = "User was created"


class SignInSuccessDTO(BaseModel):
    token: str
    user_id: int = Field(serialization_alias="userId")


class ResetPasswordSuccessDTO(BaseModel):
    reseted: bool = True
