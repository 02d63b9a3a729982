import pytest
from unittest.mock import patch
from httpx import AsyncClient, ASGITransport
from app.main import app


@pytest.mark.asyncio
async def test_health_open_with_key_configured():
    """Health stays reachable when an API key is configured."""
    with patch("app.dependencies.settings") as mock_settings:
        mock_settings.api_key = "chave-secreta"
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/health")
        assert response.status_code == 200


@pytest.mark.asyncio
async def test_api_open_without_configured_key():
    with patch("app.dependencies.settings") as mock_settings:
        mock_settings.api_key = ""
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/dashboard/stats")
        assert response.status_code == 200


@pytest.mark.asyncio
@pytest.mark.parametrize("headers", [{}, {"X-API-Key": "errada"}])
async def test_api_rejects_missing_or_wrong_key(headers):
    with patch("app.dependencies.settings") as mock_settings:
        mock_settings.api_key = "chave-secreta"
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/api/transports", headers=headers)
        assert response.status_code == 403
        assert "API" in response.json()["detail"]


@pytest.mark.asyncio
async def test_api_accepts_correct_key():
    with patch("app.dependencies.settings") as mock_settings:
        mock_settings.api_key = "chave-secreta"
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get(
                "/api/vehicles",
                headers={"X-API-Key": "chave-secreta"},
            )
        assert response.status_code == 200
