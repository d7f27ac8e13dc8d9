# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from siteauth.shared.config import DatabaseConfig
from siteauth.shared.logging import logger

SessionFactory = Callable[[], Session]


class Base(DeclarativeBase):
    pass


def _is_memory_sqlite(url: str) -> bool:
    return url in ("sqlite://", "sqlite:///:memory:") or "mode=memory" in url


def build_engine(config: DatabaseConfig) -> Engine:
    if config.url.startswith("sqlite"):
        connect_args: dict[str, object] = {
            "check_same_thread": False,
            "timeout": int(config.pool_timeout),
        }
        if _is_memory_sqlite(config.url):
            return create_engine(
                config.url,
                echo=False,
                connect_args=connect_args,
                poolclass=StaticPool,
            )
        return create_engine(
            config.url,
            echo=False,
            pool_pre_ping=True,
            connect_args=connect_args,
        )

    return create_engine(
        config.url,
        echo=False,
        pool_pre_ping=True,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
    )


def build_session_factory(engine: Engine) -> SessionFactory:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@contextmanager
def session_scope(factory: SessionFactory) -> Iterator[Session]:
    session = factory()
    logger.debug("db.session: opened session")
    try:
        yield session
        session.commit()
        logger.debug("db.session: committed session")
    except Exception:
        logger.debug("db.session: error, rolling back")
        session.rollback()
        raise
    finally:
        session.close()
        logger.debug("db.session: closed session")


def init_db(engine: Engine) -> None:
    # Models must be imported so their tables are registered on Base.metadata.
    from siteauth.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured")
