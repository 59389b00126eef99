"""Signup — POST /api/signup.

Invariants:
    - 201 with userid and public fields, never the password or its digest
    - Field rules applied in order name → email → mobile → password (400)
    - Existing email OR mobile → 409, including when only the store constraint catches it
    - Store failure on insert → 500 "Failed to create user"
"""

from unittest.mock import AsyncMock

from sqlalchemy import select

from account_service.core.errors import StoreError
from account_service.infrastructure.user_repository import SqlAlchemyUserRepository
from account_service.models.user import User
from tests.services.account_payloads import SIGNUP_PAYLOAD


async def test_signup_returns_201_with_public_user(client):
    res = await client.post("/api/signup", json=SIGNUP_PAYLOAD)
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "User created successfully"
    user = body["user"]
    assert isinstance(user["userid"], int) and user["userid"] > 0
    assert user["name"] == "Al"
    assert user["email"] == "a@b.com"
    assert user["mobileno"] == "1234567890"
    assert user["profilepic"] is None
    assert user["createdAt"]
    assert "password" not in user


async def test_signup_stores_digest_not_plaintext(client, test_db, hasher):
    await client.post("/api/signup", json=SIGNUP_PAYLOAD)
    result = await test_db.execute(select(User).where(User.email == "a@b.com"))
    stored = result.scalar_one()
    assert stored.password != "secret1"
    assert stored.password == hasher.hash("secret1")


async def test_signup_trims_name(client):
    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "name": "  Alice  "},
    )
    assert res.json()["user"]["name"] == "Alice"


async def test_signup_keeps_profilepic(client):
    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "profilepic": "https://img/al.png"},
    )
    assert res.json()["user"]["profilepic"] == "https://img/al.png"


async def test_signup_accepts_numeric_mobile(client):
    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "mobileno": 1234567890},
    )
    assert res.status_code == 201
    assert res.json()["user"]["mobileno"] == "1234567890"


async def test_signup_validation_order(client):
    res = await client.post("/api/signup", json={"email": "bad", "password": "1"})
    assert res.status_code == 400
    assert res.json() == {"error": "Name must be at least 2 characters long"}

    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "email": "bad", "mobileno": "1"},
    )
    assert res.json() == {"error": "Please provide a valid email address"}

    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "mobileno": "12345", "password": "1"},
    )
    assert res.json() == {"error": "Please provide a valid 10-digit mobile number"}

    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "password": "12345"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Password must be at least 6 characters long"}


async def test_signup_same_email_different_mobile_conflicts(client, registered_user):
    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "mobileno": "0987654321"},
    )
    assert res.status_code == 409
    assert "already exists" in res.json()["error"]


async def test_signup_same_mobile_different_email_conflicts(client, registered_user):
    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "email": "other@b.com"},
    )
    assert res.status_code == 409


async def test_signup_race_caught_by_unique_constraint(
    client, registered_user, monkeypatch,
):
    """Existence check misses (concurrent insert) — the store constraint still yields 409."""
    monkeypatch.setattr(
        SqlAlchemyUserRepository, "find_by_email_or_mobile",
        AsyncMock(return_value=None),
    )
    res = await client.post("/api/signup", json=SIGNUP_PAYLOAD)
    assert res.status_code == 409
    assert res.json() == {
        "error": "User with this email or mobile number already exists",
    }


async def test_signup_store_failure_returns_500(client, monkeypatch):
    monkeypatch.setattr(
        SqlAlchemyUserRepository, "insert",
        AsyncMock(side_effect=StoreError("insert")),
    )
    res = await client.post("/api/signup", json=SIGNUP_PAYLOAD)
    assert res.status_code == 500
    assert res.json() == {"error": "Failed to create user"}


async def test_signup_non_object_body_returns_400(client):
    res = await client.post("/api/signup", json=["Al", "a@b.com"])
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request data"}


async def test_signup_rejects_numeric_password(client):
    res = await client.post(
        "/api/signup", json={**SIGNUP_PAYLOAD, "password": 123456},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Password must be at least 6 characters long"}


async def test_signup_accepts_password_with_lone_surrogate(client):
    body = (
        b'{"name": "Al", "email": "a@b.com", "mobileno": "1234567890",'
        b' "password": "\\ud800abcdef"}'
    )
    headers = {"Content-Type": "application/json"}
    res = await client.post("/api/signup", content=body, headers=headers)
    assert res.status_code == 201

    login = (
        b'{"email": "a@b.com", "password": "\\ud800abcdef"}'
    )
    res = await client.post("/api/login", content=login, headers=headers)
    assert res.status_code == 200
