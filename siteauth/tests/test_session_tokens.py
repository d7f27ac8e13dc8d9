from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest
from fakes import TEST_SECRET
from jose import jwt

from siteauth.application.services.session_tokens import JwtSessionIssuer
from siteauth.domain.exceptions import SigningError
from siteauth.domain.users.exceptions import InvalidTokenError, TokenExpiredError


def test_issue_and_verify_with_same_secret() -> None:
    issuer = JwtSessionIssuer(TEST_SECRET)

    session = issuer.issue(42)
    claims = JwtSessionIssuer(TEST_SECRET).verify(session.token)

    assert session.user_id == 42
    assert claims["sub"] == "42"
    assert claims["userId"] == 42
    assert claims["exp"] - claims["iat"] == 3600


def test_expiry_defaults_to_one_hour() -> None:
    now = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    session = JwtSessionIssuer(TEST_SECRET).issue(1, now=now)

    assert session.issued_at == now
    assert session.expires_at == now + timedelta(hours=1)


def test_token_rejected_after_expiry() -> None:
    issuer = JwtSessionIssuer(TEST_SECRET)
    session = issuer.issue(1, now=datetime.now(UTC) - timedelta(hours=1, seconds=5))

    with pytest.raises(TokenExpiredError):
        issuer.verify(session.token)


def test_token_still_valid_before_expiry() -> None:
    issuer = JwtSessionIssuer(TEST_SECRET)
    session = issuer.issue(1, now=datetime.now(UTC) - timedelta(minutes=59))

    assert issuer.verify(session.token)["sub"] == "1"


def test_token_rejected_with_other_secret() -> None:
    session = JwtSessionIssuer(TEST_SECRET).issue(7)

    with pytest.raises(InvalidTokenError):
        JwtSessionIssuer("another-secret").verify(session.token)


def test_tampered_token_rejected() -> None:
    issuer = JwtSessionIssuer(TEST_SECRET)
    forged = jwt.encode({"sub": "1", "userId": 1, "exp": 4102444800}, "guess", algorithm="HS256")

    with pytest.raises(InvalidTokenError):
        issuer.verify(forged)
    with pytest.raises(InvalidTokenError):
        issuer.verify("not.a.token")


def test_custom_ttl() -> None:
    issuer = JwtSessionIssuer(TEST_SECRET, ttl=60)
    now = datetime(2026, 1, 1, tzinfo=UTC)

    assert issuer.issue(1, now=now).expires_at == now + timedelta(minutes=1)
    assert issuer.issue(1, ttl=120, now=now).expires_at == now + timedelta(minutes=2)


@pytest.mark.parametrize("ttl", [0, -30])
def test_non_positive_ttl_override_rejected(ttl: int) -> None:
    issuer = JwtSessionIssuer(TEST_SECRET, ttl=60)

    with pytest.raises(SigningError):
        issuer.issue(1, ttl=ttl)


@pytest.mark.parametrize("secret", ["", "   "])
def test_empty_secret_is_fatal(secret: str) -> None:
    with pytest.raises(SigningError):
        JwtSessionIssuer(secret)
