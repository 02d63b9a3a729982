from fastapi import APIRouter, Response
from sqlalchemy import select

from app.database import async_session
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate, VehicleResponse, VehicleUpdate
from app.services import vehicle_service
from app.utils.response import success_response

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("")
async def get_vehicles(status: str | None = None):
    async with async_session() as session:
        stmt = select(Vehicle).order_by(Vehicle.created_at.desc())
        if status:
            stmt = stmt.where(Vehicle.status == status)
        result = await session.execute(stmt)
        vehicles = result.scalars().all()
        data = [VehicleResponse.model_validate(v).model_dump() for v in vehicles]
    return success_response(data=data)


@router.get("/{chassi}")
async def get_vehicle(chassi: str):
    async with async_session() as session:
        vehicle = await vehicle_service.get_vehicle(session, chassi)
        data = VehicleResponse.model_validate(vehicle).model_dump()
    return success_response(data=data)


@router.post("", status_code=201)
async def create_vehicle(payload: VehicleCreate):
    async with async_session() as session:
        vehicle = await vehicle_service.create_vehicle(session, payload)
        data = VehicleResponse.model_validate(vehicle).model_dump()
    return success_response(data=data)


@router.patch("/{chassi}")
async def update_vehicle(chassi: str, payload: VehicleUpdate):
    async with async_session() as session:
        vehicle = await vehicle_service.update_vehicle(session, chassi, payload)
        data = VehicleResponse.model_validate(vehicle).model_dump()
    return success_response(data=data)


@router.delete("/{chassi}", status_code=204)
async def delete_vehicle(chassi: str):
    async with async_session() as session:
        await vehicle_service.delete_vehicle(session, chassi)
    return Response(status_code=204)
