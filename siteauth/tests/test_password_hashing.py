from __future__ import annotations

import pytest

from siteauth.application.services.password_hashing import BcryptPasswordHasher
from siteauth.domain.exceptions import EncodingError


@pytest.fixture(scope="module")
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_default_cost_factor_is_twelve() -> None:
    hashed = BcryptPasswordHasher().hash("secret1")

    assert hashed.startswith("$2b$12$")
    assert "secret1" not in hashed


def test_verify_accepts_matching_password(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify("secret1", hashed) is True


def test_verify_rejects_other_password(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify("wrong12", hashed) is False
    assert hasher.verify("secret1 ", hashed) is False


def test_hash_is_salted_per_call(hasher: BcryptPasswordHasher) -> None:
    first = hasher.hash("secret1")
    second = hasher.hash("secret1")

    assert first != second
    assert hasher.verify("secret1", first)
    assert hasher.verify("secret1", second)


def test_credentials_survive_cost_factor_change(hasher: BcryptPasswordHasher) -> None:
    old = hasher.hash("secret1")
    stronger = BcryptPasswordHasher(rounds=5)

    assert stronger.verify("secret1", old) is True
    assert stronger.hash("secret1").startswith("$2b$05$")


def test_hash_rejects_non_string(hasher: BcryptPasswordHasher) -> None:
    with pytest.raises(EncodingError):
        hasher.hash(b"secret1")  # type: ignore[arg-type]


@pytest.mark.parametrize("password", ["abc\ud800def", "secret\x00x"])
def test_hash_rejects_unencodable_text(hasher: BcryptPasswordHasher, password: str) -> None:
    with pytest.raises(EncodingError):
        hasher.hash(password)


@pytest.mark.parametrize("stored", ["", "not-a-hash", "hashed:secret1"])
def test_verify_malformed_credential_is_false(hasher: BcryptPasswordHasher, stored: str) -> None:
    assert hasher.verify("secret1", stored) is False


def test_verify_non_string_candidate_is_false(hasher: BcryptPasswordHasher) -> None:
    hashed = hasher.hash("secret1")

    assert hasher.verify(None, hashed) is False  # type: ignore[arg-type]
