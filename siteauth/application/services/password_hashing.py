"""Password hashing strategies."""

from __future__ import annotations

from passlib.context import CryptContext

from siteauth.domain.exceptions import EncodingError
from siteauth.domain.users.repositories import PasswordHasher

DEFAULT_ROUNDS = 12


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt credentials; salt and cost factor travel inside every hash.

    Raising ``rounds`` only affects new hashes, existing credentials keep
    verifying with the cost factor they were created with.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__default_rounds=rounds,
        )

    def hash(self, password: str) -> str:
        if not isinstance(password, str):
            raise EncodingError(f"password must be str, got {type(password).__name__}")
        try:
            password.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise EncodingError("password is not valid UTF-8 text") from exc
        if "\x00" in password:
            raise EncodingError("password must not contain NUL characters")
        return str(self._context.hash(password))

    def verify(self, password: str, hashed: str) -> bool:
        if not isinstance(password, str) or not isinstance(hashed, str):
            return False
        try:
            return bool(self._context.verify(password, hashed))
        except (ValueError, TypeError):
            return False
