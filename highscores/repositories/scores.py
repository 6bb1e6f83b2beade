"""Score store operations.

Each function runs against the caller's session and converts any SQLAlchemy
failure into :class:`StoreError` after rolling the session back. Nothing here
retries.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Optional

from sqlalchemy import func
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from ..core.time import as_utc
from ..errors import StoreError
from ..models import ScoreRecord

logger = logging.getLogger(__name__)


def _to_record(row: Any) -> ScoreRecord:
    return ScoreRecord(
        name=row.name,
        best=int(row.best),
        updated_at=as_utc(row.updated_at),
    )


def _fail(session: Session, operation: str, exc: SQLAlchemyError) -> StoreError:
    session.rollback()
    logger.error("Store %s failed: %s", operation, exc)
    return StoreError(f"{operation} failed")


def _merge_insert(dialect: str, name: str, score: int, now: datetime):
    """Build ``INSERT ... ON CONFLICT DO UPDATE`` keeping the larger best."""

    table = ScoreRecord.__table__

    if dialect == "postgresql":
        stmt = postgresql.insert(table)
        merged_best = func.greatest(table.c.best, stmt.excluded.best)
    elif dialect == "sqlite":
        stmt = sqlite.insert(table)
        # two-argument max() is SQLite's scalar maximum
        merged_best = func.max(table.c.best, stmt.excluded.best)
    else:
        raise StoreError(f"Unsupported database dialect: {dialect}")

    stmt = stmt.values(name=name, best=score, updated_at=now)
    stmt = stmt.on_conflict_do_update(
        index_elements=[table.c.name],
        set_={
            "best": merged_best,
            "updated_at": stmt.excluded.updated_at,
        },
    )
    return stmt.returning(table.c.name, table.c.best, table.c.updated_at)


def upsert_best(session: Session, name: str, score: int, now: datetime) -> ScoreRecord:
    """Insert or max-merge the score for ``name`` in one statement.

    ``updated_at`` is always set to ``now``, whether or not ``best`` grew.
    """

    stmt = _merge_insert(session.get_bind().dialect.name, name, score, now)
    try:
        row = session.exec(stmt).one()
        session.commit()
    except SQLAlchemyError as exc:
        raise _fail(session, "upsert", exc) from exc
    return _to_record(row)


def fetch_best(session: Session, name: str) -> Optional[ScoreRecord]:
    """Exact-key lookup; ``None`` when the player has no record."""

    try:
        row = session.exec(
            select(ScoreRecord.name, ScoreRecord.best, ScoreRecord.updated_at).where(
                ScoreRecord.name == name
            )
        ).first()
    except SQLAlchemyError as exc:
        raise _fail(session, "lookup", exc) from exc
    return _to_record(row) if row else None


def fetch_top(session: Session, limit: int) -> List[ScoreRecord]:
    """Highest bests first; ties go to the most recent submission."""

    try:
        rows = session.exec(
            select(ScoreRecord.name, ScoreRecord.best, ScoreRecord.updated_at)
            .order_by(ScoreRecord.best.desc(), ScoreRecord.updated_at.desc())
            .limit(limit)
        ).all()
    except SQLAlchemyError as exc:
        raise _fail(session, "ranking", exc) from exc
    return [_to_record(row) for row in rows]


__all__ = ["fetch_best", "fetch_top", "upsert_best"]
