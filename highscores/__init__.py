"""High-score leaderboard API."""

__version__ = "1.0.0"
