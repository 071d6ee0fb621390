import pytest
from fastapi.testclient import TestClient

import store
from main import app


@pytest.fixture(name="db")
def db_fixture(tmp_path, monkeypatch):
    """Point the app at a fresh data file for each test."""
    db = store.JsonStore(tmp_path / "db.json")
    db.init()
    monkeypatch.setattr(store, "db", db)
    return db


@pytest.fixture(name="client")
def client_fixture(db):
    return TestClient(app)


@pytest.fixture
def session_id(client):
    """An active session hosted by Alice."""
    resp = client.post("/api/sessions", json={"hostName": "Alice", "sessionId": "abc"})
    assert resp.status_code == 200
    return "abc"
