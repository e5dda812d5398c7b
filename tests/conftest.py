"""Shared fixtures: every test gets its own database file and upload directory."""

import pytest
from fastapi.testclient import TestClient

from familyhub.app import create_app
from familyhub.config import Settings


@pytest.fixture
def settings(tmp_path):
    return Settings(
        data_dir=tmp_path / "data",
        upload_dir=tmp_path / "uploads",
        db_path=tmp_path / "data" / "test.db",
        jwt_secret="test-secret",
        cors_origins=["http://testserver"],
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def engine(app):
    return app.state.engine


@pytest.fixture
def register(client):
    """Register a user and return (headers, user_json)."""

    def _register(username: str, password: str = "secret123"):
        r = client.post("/api/auth/register", json={
            "username": username,
            "email": f"{username}@example.com",
            "password": password,
            "fullName": username.title(),
        })
        assert r.status_code == 201, r.text
        data = r.json()
        return {"Authorization": f"Bearer {data['token']}"}, data["user"]

    return _register


@pytest.fixture
def make_family(client):
    """Create a family as the given user and return its JSON."""

    def _make(headers: dict, name: str = "Smiths"):
        r = client.post("/api/family", json={"name": name}, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()

    return _make


@pytest.fixture
def join(client):
    def _join(headers: dict, invite_code: str):
        return client.post("/api/family/join", json={"inviteCode": invite_code}, headers=headers)

    return _join
