"""Database engine, schema and session helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterator

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from .config import Settings

logger = logging.getLogger(__name__)

SQLITE_BUSY_TIMEOUT_S = 15


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine backing the score store."""

    connect_args: Dict[str, Any] = {}
    if settings.database_url.startswith("sqlite"):
        connect_args = {
            "check_same_thread": False,
            "timeout": SQLITE_BUSY_TIMEOUT_S,
        }
    elif settings.pg_ssl:
        connect_args = {"sslmode": "require"}

    return create_engine(
        settings.database_url, connect_args=connect_args, pool_pre_ping=True
    )


def init_schema(engine: Engine) -> None:
    """Create missing tables; existing data is left untouched."""

    from .. import models  # noqa: F401 - ensure models are registered with SQLModel

    SQLModel.metadata.create_all(engine)
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


def get_session(request: Request) -> Iterator[Session]:
    """FastAPI dependency that yields a database session."""

    with Session(request.app.state.engine) as session:
        yield session


__all__ = ["create_db_engine", "get_session", "init_schema"]
