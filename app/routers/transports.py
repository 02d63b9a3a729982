from fastapi import APIRouter, Response
from sqlalchemy import select

from app.database import async_session
from app.models.client import Client, DeliveryLocation
from app.models.driver import Driver
from app.models.transport import Transport
from app.schemas.checkpoint import CheckpointPayload
from app.schemas.transport import TransportCreate, TransportResponse, TransportUpdate
from app.services import transport_service
from app.services.entity_store import delete_row, names_by_id
from app.utils.response import success_response

router = APIRouter(prefix="/transports", tags=["transports"])

RECENT_LIMIT = 5


async def _with_relations(session, transports) -> list[dict]:
    clients = await names_by_id(session, Client, {t.client_id for t in transports})
    locations = await names_by_id(session, DeliveryLocation, {t.delivery_location_id for t in transports})
    drivers = await names_by_id(session, Driver, {t.driver_id for t in transports})

    data = []
    for t in transports:
        item = TransportResponse.model_validate(t).model_dump()
        item["client"] = clients.get(t.client_id)
        item["delivery_location"] = locations.get(t.delivery_location_id)
        item["driver"] = drivers.get(t.driver_id)
        data.append(item)
    return data


def _dump(transport: Transport) -> dict:
    return TransportResponse.model_validate(transport).model_dump()


@router.get("")
async def list_transports(status: str | None = None):
    async with async_session() as session:
        stmt = select(Transport).order_by(Transport.created_at.desc())
        if status:
            stmt = stmt.where(Transport.status == status)
        result = await session.execute(stmt)
        data = await _with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/recent")
async def recent_transports():
    async with async_session() as session:
        result = await session.execute(
            select(Transport).order_by(Transport.created_at.desc()).limit(RECENT_LIMIT)
        )
        data = await _with_relations(session, result.scalars().all())
    return success_response(data=data)


@router.get("/{transport_id}")
async def get_transport(transport_id: str):
    async with async_session() as session:
        transport = await transport_service.get_transport(session, transport_id)
        data = (await _with_relations(session, [transport]))[0]
    return success_response(data=data)


@router.post("", status_code=201)
async def create_transport(payload: TransportCreate):
    async with async_session() as session:
        transport = await transport_service.create_transport(session, payload)
        data = _dump(transport)
    return success_response(data=data)


@router.patch("/{transport_id}")
async def update_transport(transport_id: str, payload: TransportUpdate):
    async with async_session() as session:
        transport = await transport_service.update_transport(session, transport_id, payload)
        data = _dump(transport)
    return success_response(data=data)


@router.delete("/{transport_id}", status_code=204)
async def delete_transport(transport_id: str):
    async with async_session() as session:
        transport = await transport_service.get_transport(session, transport_id)
        await delete_row(session, transport)
    return Response(status_code=204)


@router.patch("/{transport_id}/checkin")
async def checkin(transport_id: str, payload: CheckpointPayload):
    async with async_session() as session:
        transport = await transport_service.checkin(session, transport_id, payload)
        data = _dump(transport)
    return success_response(data=data)


@router.patch("/{transport_id}/checkout")
async def checkout(transport_id: str, payload: CheckpointPayload):
    async with async_session() as session:
        transport = await transport_service.checkout(session, transport_id, payload)
        data = _dump(transport)
    return success_response(data=data)


@router.delete("/{transport_id}/checkin")
async def clear_checkin(transport_id: str):
    async with async_session() as session:
        transport = await transport_service.clear_checkin(session, transport_id)
        data = _dump(transport)
    return success_response(data=data)


@router.delete("/{transport_id}/checkout")
async def clear_checkout(transport_id: str):
    async with async_session() as session:
        transport = await transport_service.clear_checkout(session, transport_id)
        data = _dump(transport)
    return success_response(data=data)
