"""Persistence layer for score records."""

from .scores import fetch_best, fetch_top, upsert_best

__all__ = ["fetch_best", "fetch_top", "upsert_best"]
