# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC

from sqlalchemy.exc import IntegrityError

from siteauth.domain.exceptions import ConflictError
from siteauth.domain.users.entities import User as DomainUser
from siteauth.domain.users.repositories import UserRepository
from siteauth.infrastructure.db.models import User
from siteauth.infrastructure.db.session import SessionFactory, session_scope
from siteauth.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    created_at = row.created_at
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=UTC)
    return DomainUser(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        email=row.email,
        password_hash=row.password_hash,
        created_at=created_at,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(self, session_factory: SessionFactory) -> None:
        self._session_factory = session_factory

    def find_by_email(self, email: str) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.query(User).filter(User.email == email).first()
            return _to_domain(row) if row else None

    def find_by_id(self, user_id: int) -> DomainUser | None:
        with session_scope(self._session_factory) as session:
            row = session.get(User, user_id)
            return _to_domain(row) if row else None

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope(self._session_factory) as session:
                row = User(
                    first_name=user.first_name,
                    last_name=user.last_name,
                    email=user.email,
                    password_hash=user.password_hash,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                persisted = _to_domain(row)
        except IntegrityError as exc:
            logger.info("users.add: unique constraint rejected insert")
            raise ConflictError("email") from exc
        return persisted
