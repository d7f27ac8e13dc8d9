# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import ConflictError, EncodingError, MailerError, SigningError
from .users.entities import MailMessage, SessionToken, User

__all__ = [
    "ConflictError",
    "EncodingError",
    "MailMessage",
    "MailerError",
    "SessionToken",
    "SigningError",
    "User",
]
