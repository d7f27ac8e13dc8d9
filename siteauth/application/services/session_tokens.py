# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens signed with the process-wide secret."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import ExpiredSignatureError, JWTError, jwt

from siteauth.domain.exceptions import SigningError
from siteauth.domain.users.entities import SessionToken
from siteauth.domain.users.exceptions import InvalidTokenError, TokenExpiredError
from siteauth.domain.users.repositories import SessionIssuer

ALGORITHM = "HS256"
DEFAULT_TTL_SECONDS = 60 * 60


class JwtSessionIssuer(SessionIssuer):
    def __init__(self, secret: str, ttl: int = DEFAULT_TTL_SECONDS) -> None:
        if not secret or not secret.strip():
            raise SigningError("JWT_SECRET is empty; every token would be forgeable")
        if ttl <= 0:
            raise SigningError(f"token ttl must be positive, got {ttl}")
        self._secret = secret
        self._ttl = ttl

    @property
    def ttl(self) -> int:
        return self._ttl

    def issue(
        self, subject_id: int, *, ttl: int | None = None, now: datetime | None = None
    ) -> SessionToken:
        ttl = ttl if ttl is not None else self._ttl
        if ttl <= 0:
            raise SigningError(f"token ttl must be positive, got {ttl}")
        issued_at = (now or datetime.now(UTC)).replace(microsecond=0)
        expires_at = issued_at + timedelta(seconds=ttl)
        claims = {
            "sub": str(subject_id),
            "userId": subject_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(claims, self._secret, algorithm=ALGORITHM)
        return SessionToken(
            user_id=subject_id,
            token=token,
            issued_at=issued_at,
            expires_at=expires_at,
        )

    def verify(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(token, self._secret, algorithms=[ALGORITHM])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            raise InvalidTokenError() from exc
        if "sub" not in claims or "exp" not in claims:
            raise InvalidTokenError()
        return claims
