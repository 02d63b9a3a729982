import os
import uuid

os.makedirs("data", exist_ok=True)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./data/test.sqlite3")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

TEST_DB_PATH = os.path.join("data", "test.sqlite3")


@pytest.fixture(autouse=True, scope="session")
def setup_test_db():
    import asyncio

    # Disable API key auth for tests
    from app.config import settings
    settings.api_key = ""

    if settings.database_url.endswith("/data/test.sqlite3") and os.path.exists(TEST_DB_PATH):
        os.remove(TEST_DB_PATH)

    from app.database import create_tables, async_session
    from app.seed import seed_data

    async def _setup():
        await create_tables()
        async with async_session() as session:
            await seed_data(session)

    asyncio.run(_setup())


@pytest_asyncio.fixture
async def client():
    from app.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
def chassi():
    return uuid.uuid4().hex[:17].upper()


@pytest_asyncio.fixture
async def refs(client):
    """Manufacturer, yard, client, delivery location and driver ids."""
    suffix = uuid.uuid4().hex[:6]

    manufacturer = await client.post("/api/manufacturers", json={"name": f"Montadora {suffix}"})
    yard = await client.post("/api/yards", json={"name": f"Pátio {suffix}", "city": "Betim", "state": "MG"})
    customer = await client.post("/api/clients", json={"name": f"Concessionária {suffix}"})
    customer_id = customer.json()["data"]["id"]
    location = await client.post(
        f"/api/clients/{customer_id}/locations",
        json={
            "name": f"Loja {suffix}",
            "cep": "30110000",
            "address": "Avenida Afonso Pena",
            "address_number": "1500",
            "neighborhood": "Centro",
            "city": "Belo Horizonte",
            "state": "MG",
            "responsible_name": "Maria Souza",
            "emails": [f"loja{suffix}@example.com"],
        },
    )
    driver = await client.post(
        "/api/drivers",
        json={
            "name": f"Motorista {suffix}",
            "cpf": str(uuid.uuid4().int)[:11],
            "phone": "31999990000",
            "modality": "pj",
            "cnh_type": "E",
        },
    )

    return {
        "manufacturer_id": manufacturer.json()["data"]["id"],
        "yard_id": yard.json()["data"]["id"],
        "client_id": customer_id,
        "delivery_location_id": location.json()["data"]["id"],
        "driver_id": driver.json()["data"]["id"],
    }
