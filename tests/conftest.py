"""Shared fixtures: in-memory database, file store and a fake upstream."""
import pytest
import requests
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.db.database import create_tables
from src.media.storage import FileStorage
from tests.fakes import FakeUpstream


@pytest.fixture(autouse=True)
def api_keys(monkeypatch):
    monkeypatch.setenv("NPS_API_KEY", "nps-test-key")
    monkeypatch.setenv("OWM_API_KEY", "owm-test-key")
    monkeypatch.setenv("MAPBOX_ACCESS_TOKEN", "mapbox-test-token")


@pytest.fixture
def upstream(monkeypatch):
    fake = FakeUpstream()
    monkeypatch.setattr(requests, "get", fake)
    return fake


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    create_tables(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture
def storage(tmp_path):
    return FileStorage(str(tmp_path / "media"))
