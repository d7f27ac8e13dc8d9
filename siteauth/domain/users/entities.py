# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    first_name: str
    last_name: str
    email: str
    password_hash: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class SessionToken:

    user_id: int
    token: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class MailMessage:

    to: str
    subject: str
    body: str
