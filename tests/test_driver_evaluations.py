import pytest

CHECKPOINT = {"latitude": "-23.55", "longitude": "-46.63"}


async def _delivered_transport(client, refs, chassi):
    await client.post("/api/vehicles", json={"chassi": chassi, "status": "em_estoque"})
    transport = (await client.post(
        "/api/transports",
        json={
            "vehicle_chassi": chassi,
            "client_id": refs["client_id"],
            "origin_yard_id": refs["yard_id"],
            "delivery_location_id": refs["delivery_location_id"],
            "driver_id": refs["driver_id"],
        },
    )).json()["data"]
    await client.patch(f"/api/transports/{transport['id']}/checkin", json=CHECKPOINT)
    await client.patch(f"/api/transports/{transport['id']}/checkout", json=CHECKPOINT)
    return transport


def _evaluation(transport_id, level="bom", **extra):
    return {
        "transport_id": transport_id,
        "evaluator_name": "Supervisor",
        "postura_profissional": level,
        "pontualidade": level,
        "apresentacao_pessoal": level,
        "cordialidade": level,
        "cumpriu_processo": level,
        **extra,
    }


@pytest.mark.asyncio
async def test_evaluate_delivered_transport(client, refs, chassi):
    transport = await _delivered_transport(client, refs, chassi)

    pending = (await client.get("/api/driver-evaluations/pending-transports")).json()["data"]
    assert transport["id"] in {t["id"] for t in pending}

    response = await client.post("/api/driver-evaluations", json=_evaluation(transport["id"]))

    assert response.status_code == 201
    data = response.json()["data"]
    assert data["average_score"] == 4.0
    assert data["driver_id"] == refs["driver_id"]

    pending = (await client.get("/api/driver-evaluations/pending-transports")).json()["data"]
    assert transport["id"] not in {t["id"] for t in pending}

    again = await client.post("/api/driver-evaluations", json=_evaluation(transport["id"]))
    assert again.status_code == 400


@pytest.mark.asyncio
async def test_incident_evaluation(client, refs, chassi):
    transport = await _delivered_transport(client, refs, chassi)

    rejected = await client.post(
        "/api/driver-evaluations",
        json=_evaluation(transport["id"], "excelente", had_incident=True, manual_score=6.0, incident_description="Batida"),
    )
    assert rejected.status_code == 400

    response = await client.post(
        "/api/driver-evaluations",
        json=_evaluation(transport["id"], "excelente", had_incident=True, manual_score=2.0, incident_description="Batida"),
    )
    assert response.status_code == 201
    assert response.json()["data"]["average_score"] == 2.0
    assert response.json()["data"]["had_incident"] is True


@pytest.mark.asyncio
async def test_invalid_rating_level(client, refs, chassi):
    transport = await _delivered_transport(client, refs, chassi)

    response = await client.post("/api/driver-evaluations", json=_evaluation(transport["id"], "otimo"))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_ranking_lists_evaluated_driver(client, refs, chassi):
    transport = await _delivered_transport(client, refs, chassi)
    await client.post("/api/driver-evaluations", json=_evaluation(transport["id"], "excelente"))

    ranking = (await client.get("/api/driver-evaluations/ranking")).json()["data"]

    entry = next(r for r in ranking if r["driver_id"] == refs["driver_id"])
    assert entry["average_score"] == 5.0
    assert entry["evaluations"] == 1
    scores = [r["average_score"] for r in ranking]
    assert scores == sorted(scores, reverse=True)

    listed = (await client.get("/api/driver-evaluations", params={"driver_id": refs["driver_id"]})).json()["data"]
    assert len(listed) == 1


@pytest.mark.asyncio
async def test_undelivered_transport_cannot_be_evaluated(client, refs, chassi):
    await client.post("/api/vehicles", json={"chassi": chassi, "status": "em_estoque"})
    transport = (await client.post(
        "/api/transports",
        json={
            "vehicle_chassi": chassi,
            "client_id": refs["client_id"],
            "origin_yard_id": refs["yard_id"],
            "delivery_location_id": refs["delivery_location_id"],
            "driver_id": refs["driver_id"],
        },
    )).json()["data"]

    response = await client.post("/api/driver-evaluations", json=_evaluation(transport["id"]))

    assert response.status_code == 400
    assert response.json()["status"] == "error"
    listed = (await client.get("/api/driver-evaluations", params={"driver_id": refs["driver_id"]})).json()["data"]
    assert listed == []


@pytest.mark.asyncio
async def test_listings_embed_transport_driver_and_location(client, refs, chassi):
    transport = await _delivered_transport(client, refs, chassi)

    pending = (await client.get("/api/driver-evaluations/pending-transports")).json()["data"]
    offered = next(t for t in pending if t["id"] == transport["id"])
    assert offered["driver"]["id"] == refs["driver_id"]
    assert offered["delivery_location"]["id"] == refs["delivery_location_id"]

    await client.post("/api/driver-evaluations", json=_evaluation(transport["id"]))

    listed = (await client.get("/api/driver-evaluations", params={"driver_id": refs["driver_id"]})).json()["data"]
    assert listed[0]["transport"]["request_number"] == transport["request_number"]
    assert listed[0]["driver"]["id"] == refs["driver_id"]
    assert listed[0]["delivery_location"]["id"] == refs["delivery_location_id"]
