"""Core configuration and infrastructure helpers."""

from .config import Settings, load_settings, normalize_database_url
from .database import create_db_engine, get_session, init_schema
from .logs import configure_logging
from .time import as_utc, isoformat_utc, utcnow

__all__ = [
    "Settings",
    "as_utc",
    "configure_logging",
    "create_db_engine",
    "get_session",
    "init_schema",
    "isoformat_utc",
    "load_settings",
    "normalize_database_url",
    "utcnow",
]
