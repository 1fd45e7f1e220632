"""Shared fixtures: every test gets its own empty store."""
import pytest
from fastapi.testclient import TestClient

from app.crud.strings import StringStore
from app.main import create_app


@pytest.fixture
def store():
    s = StringStore()
    yield s
    s.close()


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client(client):
    for value in ["madam", "noon", "hello", "Racecar", "hello world", "a toyota"]:
        resp = client.post("/strings", json={"value": value})
        assert resp.status_code == 201
    return client
