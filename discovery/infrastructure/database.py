"""Database configuration and session management."""

from __future__ import annotations

from collections.abc import Generator

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from discovery.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


settings = get_settings()

logger = logging.getLogger(__name__)


def _is_sqlite(database_url: str) -> bool:
    return database_url.startswith("sqlite")


def build_engine(settings: Settings) -> Engine:
    """Create the SQLAlchemy engine for the configured database."""

    connect_args: dict[str, object] = {}
    if _is_sqlite(settings.database_url):
        # FastAPI serves sync routes from a threadpool.
        connect_args["check_same_thread"] = False

    built = create_engine(
        settings.database_url, pool_pre_ping=True, connect_args=connect_args
    )

    if _is_sqlite(settings.database_url):

        @event.listens_for(built, "connect")
        def _enable_sqlite_foreign_keys(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    logger.debug("Database engine created for %s", built.url.render_as_string())
    return built


engine = build_engine(settings)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from discovery.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=engine, checkfirst=True)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session and close it afterwards."""

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
