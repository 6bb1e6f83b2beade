"""Time helpers shared by models and services."""

from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime.

    SQLite hands timestamps back without tzinfo; they are always written in
    UTC so naive values are tagged rather than converted.
    """

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """Render ``value`` like ``2026-10-19T12:00:00.000Z``."""

    naive = as_utc(value).replace(tzinfo=None)
    return naive.isoformat(timespec="milliseconds") + "Z"


__all__ = ["as_utc", "isoformat_utc", "utcnow"]
