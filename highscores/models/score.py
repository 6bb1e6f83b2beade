"""Database model for per-player best scores."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, DateTime
from sqlmodel import Field as ORMField, SQLModel

from ..core.time import utcnow


class ScoreRecord(SQLModel, table=True):
    """A player's best accepted score and the time of their last submission."""

    __tablename__ = "scores"

    name: str = ORMField(primary_key=True)
    best: int = ORMField(default=0, nullable=False)
    updated_at: datetime = ORMField(
        default_factory=utcnow,
        sa_column=Column(DateTime(timezone=True), nullable=False),
    )


__all__ = ["ScoreRecord"]
