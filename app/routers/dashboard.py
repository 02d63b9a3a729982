from fastapi import APIRouter
from sqlalchemy import func, select

from app.database import async_session
from app.models.collect import Collect
from app.models.driver import Driver
from app.models.status import CollectStatus, VehicleStatus
from app.models.transport import Transport
from app.models.vehicle import Vehicle
from app.utils.response import success_response

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats")
async def dashboard_stats():
    async with async_session() as session:
        total_transports = await session.scalar(select(func.count()).select_from(Transport))
        collects_in_transit = await session.scalar(
            select(func.count()).select_from(Collect).where(Collect.status == CollectStatus.EM_TRANSITO.value)
        )
        vehicles_in_stock = await session.scalar(
            select(func.count()).select_from(Vehicle).where(Vehicle.status == VehicleStatus.EM_ESTOQUE.value)
        )
        active_drivers = await session.scalar(
            select(func.count()).select_from(Driver).where(Driver.is_active.is_(True))
        )
    return success_response(data={
        "total_transports": total_transports,
        "collects_in_transit": collects_in_transit,
        "vehicles_in_stock": vehicles_in_stock,
        "active_drivers": active_drivers,
    })
