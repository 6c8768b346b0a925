import pytest
from fastapi.testclient import TestClient

from todoapp.core.config import Settings
from todoapp.core.database import Database
from todoapp.db.store import TodoStore
from todoapp.main import create_app


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.connect()
    yield db
    db.dispose()


@pytest.fixture
def store(database):
    return TodoStore(database)


@pytest.fixture
def settings():
    return Settings(database_url="sqlite://", cors_origins=("http://localhost:3000",))


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c
