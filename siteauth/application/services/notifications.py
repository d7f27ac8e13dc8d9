# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Fire-and-forget account notifications."""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor

from tenacity import RetryError, Retrying, stop_after_attempt, wait_exponential

from siteauth.domain.exceptions import MailerError
from siteauth.domain.users.entities import MailMessage, User
from siteauth.domain.users.repositories import Mailer, Notifier
from siteauth.shared.logging import get_correlation_id, logger, set_correlation_id

SITE_NAME = "Site"


def registration_message(user: User, password: str | None = None) -> MailMessage:
    lines = [f"Your email: {user.email}"]
    if password is not None:
        # Plaintext credential in mail; only sent when NOTIFY_INCLUDE_PASSWORD is on.
        lines.append(f"Your password: {password}")
    return MailMessage(
        to=user.email,
        subject=f'Congratulations! You have registered on our "{SITE_NAME}"!',
        body="\n".join(lines),
    )


def admin_registration_message(
    user: User, admin_email: str, password: str | None = None
) -> MailMessage:
    lines = [
        f"name: {user.first_name}",
        f"lastName: {user.last_name}",
        f"email: {user.email}",
    ]
    if password is not None:
        lines.append(f"password: {password}")
    return MailMessage(
        to=admin_email,
        subject=f'Congratulations! Another user registered on our "{SITE_NAME}"!',
        body="\n".join(lines),
    )


def reset_requested_message(user: User) -> MailMessage:
    return MailMessage(
        to=user.email,
        subject="Reset Password!",
        body=(
            f"A password reset was requested for {user.email}.\n"
            "Stored passwords cannot be recovered. Contact support to set a new one."
        ),
    )


class NotificationDispatcher(Notifier):
    """Sends mail off the request path; delivery failures are logged, never raised."""

    def __init__(
        self,
        mailer: Mailer,
        *,
        executor: Executor | None = None,
        retries: int = 3,
        backoff_base: float = 0.5,
        backoff_cap: float = 8.0,
        workers: int = 2,
    ) -> None:
        self._mailer = mailer
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix="mailer"
        )
        self._retries = retries
        self._backoff_base = backoff_base
        self._backoff_cap = backoff_cap

    def dispatch(self, message: MailMessage) -> None:
        correlation_id = get_correlation_id()
        try:
            future = self._executor.submit(self._deliver, message, correlation_id)
        except RuntimeError:
            logger.error(f"mailer: executor unavailable, dropped message subject={message.subject!r}")
            return
        future.add_done_callback(_log_unexpected)

    def _deliver(self, message: MailMessage, correlation_id: str) -> bool:
        set_correlation_id(correlation_id)
        retrying = Retrying(
            stop=stop_after_attempt(self._retries + 1),
            wait=wait_exponential(multiplier=self._backoff_base, max=self._backoff_cap),
            reraise=False,
        )
        try:
            for attempt in retrying:
                with attempt:
                    logger.debug(
                        f"mailer: attempt={attempt.retry_state.attempt_number} "
                        f"to={message.to} subject={message.subject!r}"
                    )
                    self._mailer.send(message)
        except RetryError as exc:
            last_exc = exc.last_attempt.exception()
            error = MailerError(f"{type(last_exc).__name__}: {last_exc}")
            logger.error(
                f"mailer: giving up after {self._retries + 1} attempts "
                f"to={message.to} reason={error.context}"
            )
            return False
        logger.info(f"mailer: sent to={message.to} subject={message.subject!r}")
        return True

    def shutdown(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)


def _log_unexpected(future: Future) -> None:
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.opt(exception=exc).error("mailer: delivery task crashed")


__all__ = [
    "NotificationDispatcher",
    "admin_registration_message",
    "registration_message",
    "reset_requested_message",
]
