import pytest

from highscores.app import create_app, main
from highscores.core import isoformat_utc, load_settings, normalize_database_url
from highscores.core.time import as_utc

ENV_KEYS = ("DATABASE_URL", "PORT", "HOST", "PG_SSL", "CORS_ORIGINS", "LOG_LEVEL")


@pytest.fixture()
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_missing_database_url_is_fatal(clean_env):
    with pytest.raises(RuntimeError, match="DATABASE_URL"):
        load_settings()


def test_create_app_refuses_to_start_without_store(clean_env):
    with pytest.raises(RuntimeError):
        create_app()


def test_main_exits_without_store(clean_env):
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1


def test_settings_from_env(clean_env):
    clean_env.setenv("DATABASE_URL", "postgres://user:pw@db:5432/snake")
    clean_env.setenv("PORT", "8080")
    clean_env.setenv("PG_SSL", "true")
    clean_env.setenv("CORS_ORIGINS", "https://a.example, https://b.example,https://a.example")

    settings = load_settings()

    assert settings.database_url == "postgresql+psycopg://user:pw@db:5432/snake"
    assert settings.port == 8080
    assert settings.pg_ssl is True
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_settings_defaults(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite:///scores.db")

    settings = load_settings()

    assert settings.port == 3000
    assert settings.pg_ssl is False
    assert settings.cors_origins == ["*"]


def test_bad_port_is_fatal(clean_env):
    clean_env.setenv("DATABASE_URL", "sqlite:///scores.db")
    clean_env.setenv("PORT", "eighty")

    with pytest.raises(RuntimeError, match="PORT"):
        load_settings()


@pytest.mark.parametrize(
    "url, expected",
    [
        ("postgres://h/db", "postgresql+psycopg://h/db"),
        ("postgresql://h/db", "postgresql+psycopg://h/db"),
        ("postgresql+psycopg://h/db", "postgresql+psycopg://h/db"),
        ("sqlite:///x.db", "sqlite:///x.db"),
    ],
)
def test_normalize_database_url(url, expected):
    assert normalize_database_url(url) == expected


def test_schema_creation_keeps_existing_rows(settings):
    from fastapi.testclient import TestClient

    with TestClient(create_app(settings)) as client:
        client.post("/score", json={"name": "Keep", "score": 3})

    with TestClient(create_app(settings)) as client:
        item = client.get("/best", params={"name": "Keep"}).json()["item"]

    assert item["best"] == 3


def test_isoformat_utc_matches_client_format():
    from datetime import datetime, timedelta, timezone

    value = datetime(2026, 10, 19, 14, 30, 5, 123456, tzinfo=timezone(timedelta(hours=2)))

    assert isoformat_utc(value) == "2026-10-19T12:30:05.123Z"
    assert as_utc(datetime(2026, 1, 1)).tzinfo == timezone.utc


def test_schema_failure_stops_startup(settings, monkeypatch):
    from fastapi.testclient import TestClient
    from sqlalchemy.exc import OperationalError

    import highscores.app as app_module

    def broken(engine):
        raise OperationalError("CREATE TABLE scores", {}, Exception("disk I/O error"))

    monkeypatch.setattr(app_module, "init_schema", broken)
    client = TestClient(create_app(settings))
    served = []

    with pytest.raises(OperationalError):
        with client:
            served.append(client.get("/health"))

    assert served == []
