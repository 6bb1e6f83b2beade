"""Application settings and environment helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from dotenv import load_dotenv


def _require_env(name: str) -> str:
    """Return a required environment variable or raise an error."""

    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


def normalize_database_url(url: str) -> str:
    """Point bare Postgres URLs at the psycopg 3 driver."""

    if url.startswith("postgres://"):
        return "postgresql+psycopg://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


@dataclass(frozen=True)
class Settings:
    """Process configuration supplied at start."""

    database_url: str
    port: int = 3000
    host: str = "0.0.0.0"
    pg_ssl: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Build settings from the environment (and ``.env`` if present).

    Raises ``RuntimeError`` when ``DATABASE_URL`` is missing or ``PORT`` is not
    an integer; the process must not serve traffic without a store.
    """

    load_dotenv(env_file, override=False)

    database_url = normalize_database_url(_require_env("DATABASE_URL"))

    port_raw = os.getenv("PORT", "3000")
    try:
        port = int(port_raw)
    except ValueError as exc:
        raise RuntimeError("PORT must be an integer") from exc

    cors_origins = _unique(_split_csv(os.getenv("CORS_ORIGINS"))) or ["*"]

    return Settings(
        database_url=database_url,
        port=port,
        host=os.getenv("HOST", "0.0.0.0"),
        pg_ssl=_env_bool("PG_SSL", False),
        cors_origins=cors_origins,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


__all__ = ["Settings", "load_settings", "normalize_database_url"]
