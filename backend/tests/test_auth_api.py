"""Tests for token issuance and bearer token handling."""

import jwt
import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration

NEW_USER = {
    "username": "new",
    "password": "password",
    "firstName": "first",
    "lastName": "last",
    "email": "new@email.com",
}


def test_token_for_valid_credentials(client: TestClient, settings) -> None:
    resp = client.post("/auth/token", json={"username": "u1", "password": "password1"})
    assert resp.status_code == 200
    claims = jwt.decode(resp.json()["token"], settings.secret_key, algorithms=["HS256"])
    assert claims == {"username": "u1", "isAdmin": True}


@pytest.mark.parametrize(
    "credentials",
    [
        {"username": "u1", "password": "nope"},
        {"username": "no-such-user", "password": "password1"},
    ],
)
def test_token_rejects_bad_credentials(client: TestClient, credentials) -> None:
    resp = client.post("/auth/token", json=credentials)
    assert resp.status_code == 401
    assert resp.json() == {"error": {"message": "Invalid username/password", "status": 401}}


def test_token_requires_both_fields(client: TestClient) -> None:
    resp = client.post("/auth/token", json={"username": "u1"})
    assert resp.status_code == 400


def test_register_returns_non_admin_token(client: TestClient, settings) -> None:
    resp = client.post("/auth/register", json=NEW_USER)
    assert resp.status_code == 201
    claims = jwt.decode(resp.json()["token"], settings.secret_key, algorithms=["HS256"])
    assert claims == {"username": "new", "isAdmin": False}

    login = client.post("/auth/token", json={"username": "new", "password": "password"})
    assert login.status_code == 200


def test_register_cannot_grant_admin(client: TestClient) -> None:
    resp = client.post("/auth/register", json={**NEW_USER, "isAdmin": True})
    assert resp.status_code == 400


def test_register_duplicate_username(client: TestClient) -> None:
    resp = client.post("/auth/register", json={**NEW_USER, "username": "u2"})
    assert resp.status_code == 400
    assert resp.json()["error"]["message"] == "Duplicate username: u2"


def test_registered_user_cannot_mutate(client: TestClient) -> None:
    token = client.post("/auth/register", json=NEW_USER).json()["token"]
    resp = client.delete("/companies/c1", headers={"authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_forged_token_is_anonymous(client: TestClient) -> None:
    forged = jwt.encode({"username": "u1", "isAdmin": True}, "wrong-secret", algorithm="HS256")
    headers = {"authorization": f"Bearer {forged}"}

    assert client.get("/companies", headers=headers).status_code == 200
    assert client.delete("/companies/c1", headers=headers).status_code == 401


def test_malformed_header_is_anonymous(client: TestClient, admin_token) -> None:
    resp = client.delete("/companies/c1", headers={"authorization": admin_token})
    assert resp.status_code == 401
