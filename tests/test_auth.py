"""Registration, login and bearer-token handling."""

from datetime import datetime, timedelta, timezone

import jwt


def test_register_returns_token_and_camel_case_user(client):
    r = client.post("/api/auth/register", json={
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
        "fullName": "Alice Smith",
    })
    assert r.status_code == 201
    data = r.json()
    assert data["token"]
    assert data["user"]["username"] == "alice"
    assert data["user"]["fullName"] == "Alice Smith"
    assert data["user"]["avatarColor"] == "#3B82F6"
    assert "password" not in str(data["user"]).lower()


def test_register_rejects_duplicate_username_or_email(client, register):
    register("alice")
    r = client.post("/api/auth/register", json={
        "username": "alice",
        "email": "other@example.com",
        "password": "secret123",
        "fullName": "Other",
    })
    assert r.status_code == 409
    assert r.json() == {"error": "Username or email already exists"}

    r = client.post("/api/auth/register", json={
        "username": "alice2",
        "email": "alice@example.com",
        "password": "secret123",
        "fullName": "Other",
    })
    assert r.status_code == 409


def test_register_validation_errors_are_listed_per_field(client):
    r = client.post("/api/auth/register", json={
        "username": "al",
        "email": "not-an-email",
        "password": "123",
        "fullName": "   ",
    })
    assert r.status_code == 400
    fields = {e["field"] for e in r.json()["errors"]}
    assert fields == {"username", "email", "password", "fullName"}


def test_login_and_me(client, register):
    register("bob", password="hunter22")

    r = client.post("/api/auth/login", json={"username": "bob", "password": "hunter22"})
    assert r.status_code == 200
    token = r.json()["token"]

    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["username"] == "bob"


def test_login_with_wrong_password_or_unknown_user(client, register):
    register("bob", password="hunter22")

    r = client.post("/api/auth/login", json={"username": "bob", "password": "wrong"})
    assert r.status_code == 401
    assert r.json() == {"error": "Invalid credentials"}

    r = client.post("/api/auth/login", json={"username": "nobody", "password": "hunter22"})
    assert r.status_code == 401


def test_protected_routes_need_a_valid_token(client, settings, register):
    assert client.get("/api/auth/me").status_code == 401
    assert client.get("/api/family").status_code == 401

    r = client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert r.status_code == 401
    assert "error" in r.json()

    _, user = register("carol")
    expired = jwt.encode(
        {
            "sub": user["id"],
            "type": "access",
            "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {expired}"})
    assert r.status_code == 401

    wrong_type = jwt.encode(
        {"sub": user["id"], "type": "refresh"},
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )
    r = client.get("/api/auth/me", headers={"Authorization": f"Bearer {wrong_type}"})
    assert r.status_code == 401


def test_update_profile(client, register):
    headers, _ = register("dave")
    register("erin")

    r = client.patch("/api/auth/me", json={"fullName": "David", "avatarColor": "#10B981"}, headers=headers)
    assert r.status_code == 200
    assert r.json()["fullName"] == "David"
    assert r.json()["avatarColor"] == "#10B981"

    r = client.patch("/api/auth/me", json={"email": "erin@example.com"}, headers=headers)
    assert r.status_code == 409

    r = client.patch("/api/auth/me", json={"avatarColor": "blue"}, headers=headers)
    assert r.status_code == 400


def test_health(client):
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
