# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Outbound mail transports."""

from __future__ import annotations

import smtplib
from collections import deque
from email.message import EmailMessage

from siteauth.domain.exceptions import MailerError
from siteauth.domain.users.entities import MailMessage
from siteauth.domain.users.repositories import Mailer
from siteauth.shared.config import MailConfig
from siteauth.shared.logging import logger


class SmtpMailer(Mailer):
    def __init__(self, config: MailConfig) -> None:
        if not config.smtp_host:
            raise ValueError("SmtpMailer requires SMTP_HOST")
        self._config = config

    def _build(self, message: MailMessage) -> EmailMessage:
        email = EmailMessage()
        email["Subject"] = message.subject
        email["From"] = self._config.sender
        email["To"] = message.to
        email.set_content(message.body)
        return email

    def send(self, message: MailMessage) -> None:
        config = self._config
        try:
            with smtplib.SMTP(
                config.smtp_host, config.smtp_port, timeout=config.smtp_timeout
            ) as server:
                if config.smtp_use_tls:
                    server.starttls()
                if config.smtp_username and config.smtp_password:
                    server.login(config.smtp_username, config.smtp_password)
                server.send_message(self._build(message))
        except (smtplib.SMTPException, OSError) as exc:
            raise MailerError(f"{type(exc).__name__}: {exc}") from exc


class LoggingMailer(Mailer):
    """Development transport: logs recipient and subject, never the body.

    Only the most recent ``history`` messages are kept in ``sent``.
    """

    def __init__(self, history: int = 50) -> None:
        self.sent: deque[MailMessage] = deque(maxlen=history)

    def send(self, message: MailMessage) -> None:
        self.sent.append(message)
        logger.info(f"mail.log: to={message.to} subject={message.subject!r}")


def build_mailer(config: MailConfig) -> Mailer:
    if config.smtp_host:
        return SmtpMailer(config)
    logger.warning("mail: SMTP_HOST not set, using logging mailer")
    return LoggingMailer()


__all__ = ["LoggingMailer", "SmtpMailer", "build_mailer"]
