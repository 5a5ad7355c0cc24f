import pytest
from fastapi.testclient import TestClient

from sprint_api.main import app
from sprint_api.services.sprint_endpoint import get_sprint_store
from sprint_api.store.database import create_db_engine
from sprint_api.store.sprint_store import SqlSprintStore


@pytest.fixture
def store():
    s = SqlSprintStore(create_db_engine("sqlite://", sql_log_enabled=False))
    s.create_schema()
    return s


@pytest.fixture
def client(store):
    app.dependency_overrides[get_sprint_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
