import uuid

import pytest

from app.config import settings


@pytest.mark.asyncio
async def test_login_seeded_admin(client):
    response = await client.post(
        "/api/auth/login",
        json={"username": settings.admin_username, "password": settings.admin_password},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "success"
    assert body["data"]["username"] == settings.admin_username
    assert body["data"]["role"] == "admin"
    assert body["data"]["last_login"] is not None
    assert "password_hash" not in body["data"]


@pytest.mark.asyncio
async def test_login_invalid_password(client):
    response = await client.post(
        "/api/auth/login",
        json={"username": settings.admin_username, "password": "senha-errada"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["status"] == "error"
    assert body["message"] == "Credenciais inválidas"


@pytest.mark.asyncio
async def test_login_nonexistent_user(client):
    response = await client.post(
        "/api/auth/login",
        json={"username": "inexistente", "password": "qualquer"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Credenciais inválidas"


@pytest.mark.asyncio
async def test_user_crud_hashes_password_and_blocks_inactive_login(client):
    username = f"Operador{uuid.uuid4().hex[:6]}"
    created = await client.post(
        "/api/users",
        json={"username": username, "password": "segredo1", "role": "operador"},
    )
    assert created.status_code == 201
    user = created.json()["data"]
    assert user["username"] == username.lower()
    assert "password" not in user and "password_hash" not in user

    duplicate = await client.post("/api/users", json={"username": username, "password": "segredo1"})
    assert duplicate.status_code == 400

    login = await client.post("/api/auth/login", json={"username": username, "password": "segredo1"})
    assert login.status_code == 200

    await client.patch(f"/api/users/{user['id']}", json={"password": "segredo2"})
    old = await client.post("/api/auth/login", json={"username": username, "password": "segredo1"})
    new = await client.post("/api/auth/login", json={"username": username, "password": "segredo2"})
    assert old.status_code == 400
    assert new.status_code == 200

    await client.patch(f"/api/users/{user['id']}", json={"is_active": False})
    inactive = await client.post("/api/auth/login", json={"username": username, "password": "segredo2"})
    assert inactive.status_code == 400

    deleted = await client.delete(f"/api/users/{user['id']}")
    assert deleted.status_code == 204
    missing = await client.get(f"/api/users/{user['id']}")
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_user_password_too_short_is_rejected(client):
    response = await client.post("/api/users", json={"username": "curto", "password": "123"})

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert "password" in response.json()["message"]
