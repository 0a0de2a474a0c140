"""Authorization Gate — every participant route rejects anonymous callers."""

import pytest

from tests.factories import ADMIN_KEY, make_participant

EMAIL = "jane.doe@example.com"

ROUTES = [
    ("POST", "/add"),
    ("GET", "/details/deleted"),
    ("GET", f"/details/{EMAIL}"),
    ("GET", f"/work/{EMAIL}"),
    ("GET", f"/home/{EMAIL}"),
    ("GET", "/"),
    ("DELETE", f"/participants/{EMAIL}"),
    ("PUT", f"/participants/{EMAIL}"),
]


@pytest.mark.parametrize(("method", "path"), ROUTES)
async def test_routes_reject_missing_credentials(anonymous_client, method, path):
    res = await anonymous_client.request(method, path, json=make_participant())
    assert res.status_code == 401
    assert res.json() == {"error": "Authentication required"}


async def test_wrong_api_key_is_rejected(anonymous_client):
    res = await anonymous_client.get("/", headers={"X-API-Key": "guess"})
    assert res.status_code == 401


async def test_gate_runs_before_body_is_written(anonymous_client, collection):
    await anonymous_client.post("/add", json=make_participant())
    assert await collection.scan() == []


async def test_bearer_token_is_accepted(anonymous_client):
    res = await anonymous_client.get(
        "/", headers={"Authorization": f"Bearer {ADMIN_KEY}"},
    )
    assert res.status_code == 200


async def test_api_key_header_is_accepted(anonymous_client):
    res = await anonymous_client.get("/", headers={"X-API-Key": ADMIN_KEY})
    assert res.status_code == 200


async def test_health_is_not_gated(anonymous_client):
    res = await anonymous_client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
