from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from highscores.app import create_app
from highscores.core import Settings, create_db_engine, init_schema


@pytest.fixture()
def settings(tmp_path):
    return Settings(database_url=f"sqlite:///{tmp_path / 'scores.db'}")


@pytest.fixture()
def engine(settings):
    engine = create_db_engine(settings)
    init_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture()
def clock():
    """Strictly increasing submission times, one second apart."""

    start = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)
    ticks = iter(range(10_000))

    def tick():
        return start + timedelta(seconds=next(ticks))

    return tick
