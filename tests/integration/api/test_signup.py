import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_successful_signup(client: AsyncClient, test_data):
    """New account gets role USER; no tokens or cookies are issued"""
    payload = test_data.get_copy("alice")
    payload["email"] = "Alice@X.com"

    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 201
    data = response.json()
    assert set(data) == {"id", "name", "email", "role"}
    assert data["name"] == "Alice"
    assert data["email"] == "alice@x.com"
    assert data["role"] == "USER"
    assert "set-cookie" not in response.headers


@pytest.mark.asyncio
async def test_signup_duplicate_email(client: AsyncClient, test_data):
    payload = test_data.get_copy("alice")
    first = await client.post("/auth/signup", json=payload)
    assert first.status_code == 201

    payload["email"] = "ALICE@x.com"
    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 409
    assert response.json() == {
        "error": {
            "code": "CONFLICT",
            "message": "User with this email already exists",
        }
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "override",
    [
        {"email": "not-an-email"},
        {"password": "short"},
        {"name": ""},
    ],
)
async def test_signup_invalid_input(client: AsyncClient, test_data, override):
    payload = {**test_data.get_copy("alice"), **override}

    response = await client.post("/auth/signup", json=payload)

    assert response.status_code == 422
