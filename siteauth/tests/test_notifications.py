from __future__ import annotations

from datetime import UTC, datetime

from fakes import InlineExecutor, RecordingMailer

from siteauth.application.services.notifications import (
    NotificationDispatcher,
    admin_registration_message,
    registration_message,
)
from siteauth.domain.users.entities import MailMessage, User
from siteauth.infrastructure.mailer import LoggingMailer, SmtpMailer, build_mailer
from siteauth.shared.config import MailConfig


def _user() -> User:
    return User(
        id=3,
        first_name="Ann",
        last_name="Lee",
        email="a@x.com",
        password_hash="$2b$04$abc",
        created_at=datetime.now(UTC),
    )


def _message() -> MailMessage:
    return MailMessage(to="a@x.com", subject="hello", body="body")


def test_dispatch_delivers_message() -> None:
    mailer = RecordingMailer()
    dispatcher = NotificationDispatcher(mailer, executor=InlineExecutor(), backoff_base=0)

    dispatcher.dispatch(_message())

    assert mailer.sent == [_message()]


def test_dispatch_retries_transient_failures() -> None:
    mailer = RecordingMailer(failures=2)
    dispatcher = NotificationDispatcher(
        mailer, executor=InlineExecutor(), retries=3, backoff_base=0
    )

    dispatcher.dispatch(_message())

    assert mailer.attempts == 3
    assert len(mailer.sent) == 1


def test_dispatch_swallows_permanent_failure() -> None:
    mailer = RecordingMailer(failures=10)
    dispatcher = NotificationDispatcher(
        mailer, executor=InlineExecutor(), retries=2, backoff_base=0
    )

    dispatcher.dispatch(_message())

    assert mailer.attempts == 3
    assert mailer.sent == []


def test_dispatch_on_thread_pool() -> None:
    mailer = RecordingMailer()
    dispatcher = NotificationDispatcher(mailer, workers=1, backoff_base=0)

    dispatcher.dispatch(_message())
    dispatcher.shutdown(wait=True)

    assert mailer.sent == [_message()]


def test_dispatch_after_shutdown_is_dropped() -> None:
    mailer = RecordingMailer()
    dispatcher = NotificationDispatcher(mailer, workers=1)
    dispatcher.shutdown(wait=True)

    dispatcher.dispatch(_message())

    assert mailer.sent == []


def test_registration_messages_follow_legacy_layout() -> None:
    owner = registration_message(_user())
    admin = admin_registration_message(_user(), "admin@site.test", "secret1")

    assert owner.to == "a@x.com"
    assert owner.subject == 'Congratulations! You have registered on our "Site"!'
    assert owner.body == "Your email: a@x.com"
    assert admin.to == "admin@site.test"
    assert admin.body.splitlines() == [
        "name: Ann",
        "lastName: Lee",
        "email: a@x.com",
        "password: secret1",
    ]


def test_build_mailer_picks_transport() -> None:
    assert isinstance(build_mailer(MailConfig(smtp_host=None)), LoggingMailer)
    assert isinstance(build_mailer(MailConfig(smtp_host="smtp.site.test")), SmtpMailer)


def test_logging_mailer_records_messages() -> None:
    mailer = LoggingMailer()

    mailer.send(_message())

    assert list(mailer.sent) == [_message()]


def test_logging_mailer_history_is_bounded() -> None:
    mailer = LoggingMailer(history=3)

    for index in range(10):
        mailer.send(MailMessage(to=f"u{index}@x.com", subject="hello", body="body"))

    assert [m.to for m in mailer.sent] == ["u7@x.com", "u8@x.com", "u9@x.com"]
