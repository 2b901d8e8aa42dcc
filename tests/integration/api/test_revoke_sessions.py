import pytest
from httpx import AsyncClient


async def _login(client: AsyncClient, test_data, email: str) -> dict:
    response = await client.post("/auth/login", json=test_data.credentials(email))
    assert response.status_code == 200
    return response.json()


def _bearer(tokens: dict) -> dict:
    return {"Authorization": f"Bearer {tokens['access_token']}"}


@pytest.mark.asyncio
async def test_revoke_own_sessions(client: AsyncClient, test_data, stored_sessions):
    """Logout everywhere deletes every session and kills their refresh tokens"""
    first = await _login(client, test_data, "user@lunavps.com")
    second = await _login(client, test_data, "user@lunavps.com")

    response = await client.post("/sessions/revoke-all", json={}, headers=_bearer(first))

    assert response.status_code == 200
    data = response.json()
    assert data["revoked_count"] == 2
    assert data["message"] == "Successfully revoked 2 session(s)"
    assert await stored_sessions() == []

    for tokens in (first, second):
        refresh = await client.post("/auth/refresh", json={"refresh_token": tokens["refresh_token"]})
        assert refresh.status_code == 401
        assert refresh.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_admin_revokes_other_user_sessions(client: AsyncClient, test_data, users, stored_sessions):
    await _login(client, test_data, "user@lunavps.com")
    admin_tokens = await _login(client, test_data, "admin@lunavps.com")

    response = await client.post(
        "/sessions/revoke-all",
        json={"user_id": str(users["user@lunavps.com"].id)},
        headers=_bearer(admin_tokens),
    )

    assert response.status_code == 200
    assert response.json()["revoked_count"] == 1
    remaining = await stored_sessions()
    assert [s.user_id for s in remaining] == [users["admin@lunavps.com"].id]


@pytest.mark.asyncio
async def test_user_cannot_revoke_other_user_sessions(client: AsyncClient, test_data, users):
    user_tokens = await _login(client, test_data, "user@lunavps.com")

    response = await client.post(
        "/sessions/revoke-all",
        json={"user_id": str(users["admin@lunavps.com"].id)},
        headers=_bearer(user_tokens),
    )

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


@pytest.mark.asyncio
async def test_admin_revokes_unknown_user(client: AsyncClient, test_data):
    admin_tokens = await _login(client, test_data, "admin@lunavps.com")

    response = await client.post(
        "/sessions/revoke-all",
        json={"user_id": "00000000-0000-0000-0000-000000000000"},
        headers=_bearer(admin_tokens),
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"


@pytest.mark.asyncio
async def test_revoke_with_refresh_token_as_bearer(client: AsyncClient, test_data):
    tokens = await _login(client, test_data, "user@lunavps.com")

    response = await client.post(
        "/sessions/revoke-all",
        json={},
        headers={"Authorization": f"Bearer {tokens['refresh_token']}"},
    )

    assert response.status_code == 401
