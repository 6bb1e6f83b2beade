"""Score submission, ranking and lookup."""

from __future__ import annotations

import logging
import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlmodel import Session

from ..core.time import as_utc, isoformat_utc, utcnow
from ..errors import NameRequired, ScoreInvalid
from ..models import ScoreRecord
from ..repositories import fetch_best, fetch_top, upsert_best
from .names import normalize_name

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 50
# upper bound of the INTEGER column
MAX_SCORE = 2**31 - 1


def coerce_score(raw: Any) -> int:
    """Turn a submitted score into the integer that gets stored.

    Missing, falsy and blank scores count as 0, ``True`` as 1. Fractions
    are floored.
    """

    if not raw or (isinstance(raw, str) and not raw.strip()):
        return 0
    if isinstance(raw, bool):
        return 1
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        raise ScoreInvalid("Score must be a number") from None
    if not math.isfinite(value) or value < 0:
        raise ScoreInvalid("Score must be a finite, non-negative number")
    score = math.floor(value)
    if score > MAX_SCORE:
        raise ScoreInvalid("Score is out of range")
    return score


def clamp_limit(raw: Any = None) -> int:
    """Clamp a requested ranking size into ``1..MAX_LIMIT``.

    Missing, unparsable or zero values fall back to ``DEFAULT_LIMIT``.
    """

    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_LIMIT
    if not math.isfinite(value):
        return MAX_LIMIT if value > 0 else DEFAULT_LIMIT
    limit = math.floor(value)
    if limit == 0:
        return DEFAULT_LIMIT
    return max(1, min(limit, MAX_LIMIT))


def submit_score(
    session: Session,
    raw_name: Any,
    raw_score: Any,
    now: Optional[datetime] = None,
) -> ScoreRecord:
    """Record a submission and return the player's post-merge record."""

    name = normalize_name(raw_name)
    if not name:
        raise NameRequired("Name is required")
    score = coerce_score(raw_score)
    submitted_at = as_utc(now) if now is not None else utcnow()

    record = upsert_best(session, name, score, submitted_at)
    logger.debug("Accepted %s for %r, best is now %s", score, name, record.best)
    return record


def get_best(session: Session, raw_name: Any) -> Optional[ScoreRecord]:
    """Look up a single player's best; ``None`` if they never submitted."""

    name = normalize_name(raw_name)
    if not name:
        raise NameRequired("Name is required")
    return fetch_best(session, name)


def top_scores(session: Session, limit: Any = None) -> List[ScoreRecord]:
    return fetch_top(session, clamp_limit(limit))


def record_to_dict(record: ScoreRecord) -> Dict[str, Any]:
    """Serialise a score record to an API-friendly dict."""

    return {
        "name": record.name,
        "best": record.best,
        "updated_at": isoformat_utc(record.updated_at),
    }


__all__ = [
    "DEFAULT_LIMIT",
    "MAX_LIMIT",
    "MAX_SCORE",
    "clamp_limit",
    "coerce_score",
    "get_best",
    "record_to_dict",
    "submit_score",
    "top_scores",
]
