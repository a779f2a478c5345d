from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from taskboard import crud
from taskboard.database import create_tables, get_db, make_engine
from taskboard.main import app

from .fakes import FakeClock


def _sqlite_engine(path: Path):
    return make_engine(f"sqlite:///{path}")


def _client_for(engine) -> TestClient:
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    # Not used as a context manager, so the startup hook never touches the real database.
    return TestClient(app)


@pytest.fixture()
def engine(tmp_path: Path):
    """SQLite engine on a fresh file with the tasks table provisioned."""
    engine = _sqlite_engine(tmp_path / "tasks.sqlite3")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def bare_engine(tmp_path: Path):
    """SQLite engine on a fresh file with no tables at all."""
    engine = _sqlite_engine(tmp_path / "empty.sqlite3")
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    yield session
    session.close()


@pytest.fixture()
def client(engine):
    yield _client_for(engine)
    app.dependency_overrides.clear()


@pytest.fixture()
def bare_client(bare_engine):
    yield _client_for(bare_engine)
    app.dependency_overrides.clear()


@pytest.fixture()
def clock(monkeypatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(crud, "utcnow", fake)
    return fake
