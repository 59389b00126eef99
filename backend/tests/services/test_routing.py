"""Routing & Boundary — route table, preflight, CORS headers, failure boundary.

Invariants:
    - OPTIONS on any path → 200 with empty body and CORS headers
    - Unknown path or wrong method → 404 "Endpoint not found"
    - Malformed JSON → 500 "Internal server error" (no detail leaked)
    - Every response carries the CORS headers
    - Health never touches the database
"""

import pytest
from httpx import ASGITransport, AsyncClient

import account_service.infrastructure.database as db_module
from account_service.main import app

CORS = {
    "access-control-allow-origin": "*",
    "access-control-allow-methods": "GET, POST, OPTIONS",
    "access-control-allow-headers": "Content-Type",
}


def _assert_cors(res):
    for header, value in CORS.items():
        assert res.headers[header] == value


async def test_health_returns_ok(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json() == {"status": "OK", "message": "API is running"}
    assert res.headers["content-type"] == "application/json"
    _assert_cors(res)


async def test_health_works_without_database():
    """No get_db override and no init_db: the liveness route must still answer."""
    assert db_module.db_manager is None
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        res = await c.get("/api/health")
    assert res.status_code == 200


@pytest.mark.parametrize(
    "path", ["/api/signup", "/api/user/1", "/anything/at/all", "/"],
)
async def test_options_preflight_on_any_path(client, path):
    res = await client.options(path)
    assert res.status_code == 200
    assert res.content == b""
    _assert_cors(res)


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/unknown"),
        ("POST", "/api/health"),
        ("GET", "/api/signup"),
        ("GET", "/api/login"),
        ("POST", "/api/user/1"),
        ("GET", "/api/edit-profile/1"),
        ("PUT", "/api/change-password/1"),
        ("GET", "/api/health/"),
    ],
)
async def test_unmatched_routes_are_404(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {"error": "Endpoint not found"}
    _assert_cors(res)


async def test_malformed_json_is_internal_error(client):
    res = await client.post(
        "/api/signup",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}
    _assert_cors(res)


async def test_missing_body_is_internal_error(client):
    res = await client.post("/api/login")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal server error"}


async def test_validation_errors_carry_cors_headers(client):
    res = await client.post("/api/signup", json={"name": "A"})
    assert res.status_code == 400
    _assert_cors(res)


async def test_wrongly_typed_fields_keep_rule_order_and_messages(client):
    res = await client.post("/api/signup", json={
        "name": "A", "email": "a@b.com", "mobileno": [1], "password": "secret1",
    })
    assert res.status_code == 400
    assert res.json() == {"error": "Name must be at least 2 characters long"}

    res = await client.post("/api/signup", json={
        "name": "Al", "email": {"a": 1}, "mobileno": [1], "password": True,
    })
    assert res.status_code == 400
    assert res.json() == {"error": "Please provide a valid email address"}


async def test_boolean_login_email_fails_email_rule(client):
    res = await client.post(
        "/api/login", json={"email": True, "password": "secret1"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Please provide a valid email address"}


async def test_list_login_email_fails_email_rule(client):
    res = await client.post(
        "/api/login", json={"email": ["a@b.com"], "password": "secret1"},
    )
    assert res.status_code == 400
    assert res.json() == {"error": "Please provide a valid email address"}


async def test_non_string_profilepic_is_400(client):
    res = await client.post("/api/signup", json={
        "name": "Al", "email": "a@b.com", "mobileno": "1234567890",
        "password": "secret1", "profilepic": ["x"],
    })
    assert res.status_code == 400
    assert res.json() == {"error": "Invalid request data"}
