from fastapi import APIRouter

from app.database import async_session
from app.models.client import Client, DeliveryLocation
from app.routers.crud import build_crud_router
from app.schemas.client import (
    ClientCreate,
    ClientResponse,
    ClientUpdate,
    DeliveryLocationCreate,
    DeliveryLocationResponse,
    DeliveryLocationUpdate,
)
from app.services.entity_store import create_row, get_or_404, list_rows
from app.utils.response import success_response

router = build_crud_router(
    prefix="/clients",
    tag="clients",
    model=Client,
    create_schema=ClientCreate,
    update_schema=ClientUpdate,
    response_schema=ClientResponse,
    not_found="Cliente não encontrado",
)

locations_router = build_crud_router(
    prefix="/delivery-locations",
    tag="delivery-locations",
    model=DeliveryLocation,
    create_schema=DeliveryLocationCreate,
    update_schema=DeliveryLocationUpdate,
    response_schema=DeliveryLocationResponse,
    not_found="Local de entrega não encontrado",
    with_create=False,
)

client_locations_router = APIRouter(prefix="/clients/{client_id}/locations", tags=["delivery-locations"])


@client_locations_router.get("")
async def list_client_locations(client_id: str):
    async with async_session() as session:
        await get_or_404(session, Client, client_id, "Cliente não encontrado")
        rows = await list_rows(session, DeliveryLocation, DeliveryLocation.client_id == client_id)
        data = [DeliveryLocationResponse.model_validate(r).model_dump() for r in rows]
    return success_response(data=data)


@client_locations_router.post("", status_code=201)
async def create_client_location(client_id: str, payload: DeliveryLocationCreate):
    async with async_session() as session:
        await get_or_404(session, Client, client_id, "Cliente não encontrado")
        row = await create_row(session, DeliveryLocation, {"client_id": client_id, **payload.model_dump()})
        data = DeliveryLocationResponse.model_validate(row).model_dump()
    return success_response(data=data)
