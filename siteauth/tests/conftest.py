from __future__ import annotations

import os

os.environ.setdefault("JWT_SECRET", "test-secret-with-enough-entropy-0123456789")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

import pytest
from fakes import TEST_SECRET, InMemoryUserRepository, RecordingNotifier

from siteauth.shared.config import AppConfig, DatabaseConfig, MailConfig


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def app_config(tmp_path) -> AppConfig:
    return AppConfig(
        jwt_secret=TEST_SECRET,
        bcrypt_rounds=4,
        database=DatabaseConfig(url=f"sqlite:///{tmp_path / 'siteauth.db'}"),
        mail=MailConfig(admin_email="admin@site.test", retries=0, backoff_base=0.0),
    )
