"""Player name normalization."""

from __future__ import annotations

from typing import Any

MAX_NAME_LENGTH = 24


def normalize_name(raw: Any) -> str:
    """Canonical stored form of a player name.

    Returns ``""`` for anything that yields no usable name; callers decide
    whether that is an error.
    """

    text = str(raw or "").strip()
    return text[:MAX_NAME_LENGTH].rstrip()


__all__ = ["MAX_NAME_LENGTH", "normalize_name"]
