from __future__ import annotations

import pytest

from siteauth.shared.config import AppConfig, SecurityConfig
from siteauth.shared.errors import ConfigurationError
from siteauth.shared.logging import sanitize_message
from siteauth.shared.logging.logger import _log_file_path


def test_defaults() -> None:
    config = AppConfig(jwt_secret="x")

    assert config.token_ttl_seconds == 3600
    assert config.bcrypt_rounds == 12
    assert config.unified_auth_errors is False
    assert config.mail.include_password is False


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("AUTH_UNIFIED_ERRORS", "yes")
    monkeypatch.setenv("BCRYPT_ROUNDS", "10")
    monkeypatch.setenv("ADMIN_EMAIL", "ops@site.test")

    config = AppConfig()

    assert config.jwt_secret == "from-env"
    assert config.unified_auth_errors is True
    assert config.bcrypt_rounds == 10
    assert config.mail.admin_email == "ops@site.test"


def test_allowed_origins_from_csv(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.test, https://b.test")

    assert SecurityConfig().allowed_origins == ["https://a.test", "https://b.test"]


@pytest.mark.parametrize("secret", ["dev", "short-secret"])
def test_production_rejects_weak_secret(secret: str) -> None:
    with pytest.raises(ConfigurationError):
        AppConfig(app_env="production", jwt_secret=secret)


def test_production_accepts_strong_secret() -> None:
    config = AppConfig(app_env="production", jwt_secret="s" * 48)

    assert config.is_production()


def test_sanitizer_redacts_credentials() -> None:
    line = sanitize_message(
        "user a@x.com password=secret1 hash=$2b$12$" + "a" * 53 + " token=" + "t" * 24
    )

    assert "secret1" not in line
    assert "a@x.com" not in line
    assert "$2b$12$" not in line
    assert "t" * 24 not in line


def test_log_file_sink_only_when_configured(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv("LOG_FILE", raising=False)
    assert _log_file_path() is None

    monkeypatch.setenv("LOG_FILE", "")
    assert _log_file_path() is None

    target = tmp_path / "logs" / "siteauth.log"
    monkeypatch.setenv("LOG_FILE", str(target))
    assert _log_file_path() == str(target)
    assert not target.parent.exists()
