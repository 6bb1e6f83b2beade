"""Database model exports."""

from .score import ScoreRecord

__all__ = ["ScoreRecord"]
