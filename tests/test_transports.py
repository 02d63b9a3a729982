import pytest

from app.config import settings

CHECKPOINT = {
    "latitude": "-19.9167",
    "longitude": "-43.9345",
    "frontal_photo": "frontal.jpg",
    "selfie_photo": "selfie.jpg",
    "damage_photos": ["risco.jpg"],
    "notes": "ok",
}


async def _stocked_transport(client, refs, chassi, vehicle_status="em_estoque"):
    await client.post(
        "/api/vehicles",
        json={"chassi": chassi, "status": vehicle_status, "yard_id": refs["yard_id"], "client_id": refs["client_id"]},
    )
    response = await client.post(
        "/api/transports",
        json={
            "vehicle_chassi": chassi,
            "client_id": refs["client_id"],
            "origin_yard_id": refs["yard_id"],
            "delivery_location_id": refs["delivery_location_id"],
            "driver_id": refs["driver_id"],
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


async def _vehicle(client, chassi):
    return (await client.get(f"/api/vehicles/{chassi}")).json()["data"]


@pytest.mark.asyncio
async def test_create_transport_allocates_request_number(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)

    assert transport["status"] == "pendente"
    assert transport["request_number"].startswith(settings.request_number_prefix)
    assert len(transport["request_number"]) == len(settings.request_number_prefix) + settings.request_number_width
    assert transport["driver_assigned_at"] is not None


@pytest.mark.asyncio
async def test_create_transport_unknown_vehicle(client, refs, chassi):
    response = await client.post(
        "/api/transports",
        json={
            "vehicle_chassi": chassi,
            "client_id": refs["client_id"],
            "origin_yard_id": refs["yard_id"],
            "delivery_location_id": refs["delivery_location_id"],
        },
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_first_driver_assignment_is_stamped(client, refs, chassi):
    await client.post("/api/vehicles", json={"chassi": chassi, "status": "em_estoque"})
    created = await client.post(
        "/api/transports",
        json={
            "vehicle_chassi": chassi,
            "client_id": refs["client_id"],
            "origin_yard_id": refs["yard_id"],
            "delivery_location_id": refs["delivery_location_id"],
        },
    )
    transport = created.json()["data"]
    assert transport["driver_assigned_at"] is None

    updated = await client.patch(f"/api/transports/{transport['id']}", json={"driver_id": refs["driver_id"]})

    assert updated.json()["data"]["driver_assigned_at"] is not None
    assert updated.json()["data"]["status"] == "pendente"


@pytest.mark.asyncio
async def test_authorize_exit(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)

    response = await client.post(f"/api/portaria/authorize-exit/{transport['id']}")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "em_transito"
    assert data["transit_started_at"] is not None
    vehicle = await _vehicle(client, chassi)
    assert vehicle["status"] == "despachado"
    assert vehicle["dispatch_date_time"] is not None


@pytest.mark.asyncio
async def test_authorize_exit_requires_vehicle_in_stock(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi, vehicle_status="pre_estoque")

    response = await client.post(f"/api/portaria/authorize-exit/{transport['id']}")

    assert response.status_code == 400
    assert (await _vehicle(client, chassi))["status"] == "pre_estoque"
    current = (await client.get(f"/api/transports/{transport['id']}")).json()["data"]
    assert current["status"] == "pendente"
    assert current["transit_started_at"] is None


@pytest.mark.asyncio
async def test_authorize_exit_requires_pending_transport(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)
    await client.post(f"/api/portaria/authorize-exit/{transport['id']}")
    await client.patch(f"/api/vehicles/{chassi}", json={"status": "em_estoque"})

    response = await client.post(f"/api/portaria/authorize-exit/{transport['id']}")

    assert response.status_code == 400
    assert (await _vehicle(client, chassi))["status"] == "em_estoque"


@pytest.mark.asyncio
async def test_checkin_then_checkout(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)

    checkin = await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)
    assert checkin.status_code == 200
    data = checkin.json()["data"]
    assert data["status"] == "aguardando_saida"
    assert data["checkin_date_time"] is not None
    assert data["checkin_frontal_photo"] == "frontal.jpg"
    assert data["checkin_damage_photos"] == ["risco.jpg"]
    assert (await _vehicle(client, chassi))["status"] == "despachado"

    checkout = await client.patch(f"/api/transports/{transport['id']}/checkout", json=CHECKPOINT)
    assert checkout.status_code == 200
    assert checkout.json()["data"]["status"] == "entregue"
    vehicle = await _vehicle(client, chassi)
    assert vehicle["status"] == "entregue"
    assert vehicle["delivery_date_time"] == checkout.json()["data"]["checkout_date_time"]


@pytest.mark.asyncio
async def test_checkout_without_checkin(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)

    response = await client.patch(f"/api/transports/{transport['id']}/checkout", json=CHECKPOINT)

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    assert (await _vehicle(client, chassi))["status"] == "em_estoque"


@pytest.mark.asyncio
async def test_clear_checkin_blocked_by_checkout(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)
    await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)
    await client.patch(f"/api/transports/{transport['id']}/checkout", json=CHECKPOINT)

    response = await client.delete(f"/api/transports/{transport['id']}/checkin")

    assert response.status_code == 400
    current = (await client.get(f"/api/transports/{transport['id']}")).json()["data"]
    assert current["checkin_date_time"] is not None
    assert current["status"] == "entregue"


@pytest.mark.asyncio
async def test_clear_checkin(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)
    await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)

    response = await client.delete(f"/api/transports/{transport['id']}/checkin")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == settings.clear_checkin_transport_status
    assert data["checkin_date_time"] is None
    assert data["checkin_frontal_photo"] is None
    assert data["checkin_damage_photos"] is None
    assert (await _vehicle(client, chassi))["status"] == "em_estoque"


@pytest.mark.asyncio
async def test_clear_checkout_uses_configured_vehicle_status(client, refs, chassi, monkeypatch):
    monkeypatch.setattr(settings, "clear_checkout_vehicle_status", "em_estoque")
    transport = await _stocked_transport(client, refs, chassi)
    await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)
    await client.patch(f"/api/transports/{transport['id']}/checkout", json=CHECKPOINT)

    response = await client.delete(f"/api/transports/{transport['id']}/checkout")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "em_transito"
    assert data["checkout_date_time"] is None
    assert data["checkin_date_time"] is not None
    vehicle = await _vehicle(client, chassi)
    assert vehicle["status"] == "em_estoque"
    assert vehicle["delivery_date_time"] is None


@pytest.mark.asyncio
async def test_transport_listing_embeds_relations(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)

    detail = (await client.get(f"/api/transports/{transport['id']}")).json()["data"]

    assert detail["client"]["id"] == refs["client_id"]
    assert detail["delivery_location"]["id"] == refs["delivery_location_id"]
    assert detail["driver"]["id"] == refs["driver_id"]

    listed = (await client.get("/api/transports", params={"status": "pendente"})).json()["data"]
    assert transport["id"] in {t["id"] for t in listed}


@pytest.mark.asyncio
async def test_patch_cannot_change_status(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)

    response = await client.patch(f"/api/transports/{transport['id']}", json={"status": "entregue", "notes": "x"})

    assert response.status_code == 200
    assert response.json()["data"]["status"] == "pendente"
    assert response.json()["data"]["notes"] == "x"


@pytest.mark.asyncio
async def test_clear_checkin_back_to_pending_resets_transit_start(client, refs, chassi):
    transport = await _stocked_transport(client, refs, chassi)
    await client.post(f"/api/portaria/authorize-exit/{transport['id']}")
    await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)

    response = await client.delete(f"/api/transports/{transport['id']}/checkin")

    data = response.json()["data"]
    assert data["status"] == "pendente"
    assert data["transit_started_at"] is None


@pytest.mark.asyncio
async def test_clear_checkin_to_in_transit_keeps_transit_start(client, refs, chassi, monkeypatch):
    monkeypatch.setattr(settings, "clear_checkin_transport_status", "em_transito")
    transport = await _stocked_transport(client, refs, chassi)
    await client.post(f"/api/portaria/authorize-exit/{transport['id']}")
    await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)

    response = await client.delete(f"/api/transports/{transport['id']}/checkin")

    data = response.json()["data"]
    assert data["status"] == "em_transito"
    assert data["transit_started_at"] is not None
