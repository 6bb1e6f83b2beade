"""Errors surfaced to clients with a stable machine-readable code."""

from __future__ import annotations


class LeaderboardError(Exception):
    """Base error carrying the response code and HTTP status."""

    code = "internal_error"
    status_code = 500

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.code)


class NameRequired(LeaderboardError):
    """The player name was empty after normalization."""

    code = "name_required"
    status_code = 400


class ScoreInvalid(LeaderboardError):
    """The score was not a finite, non-negative number in range."""

    code = "score_invalid"
    status_code = 400


class StoreError(LeaderboardError):
    """Any failure talking to or executing against the database."""

    code = "db_error"
    status_code = 500


__all__ = ["LeaderboardError", "NameRequired", "ScoreInvalid", "StoreError"]
