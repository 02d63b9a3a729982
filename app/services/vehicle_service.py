"""Vehicle record edits and their collect side effects."""
import logging

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.collect import Collect
from app.models.status import CollectStatus, VehicleStatus
from app.models.transport import Transport
from app.models.vehicle import Vehicle
from app.schemas.vehicle import VehicleCreate, VehicleUpdate
from app.services.entity_store import get_or_404
from app.services.workflow import apply_transition
from app.utils.exceptions import AppException
from app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)


async def get_vehicle(session: AsyncSession, chassi: str) -> Vehicle:
    return await get_or_404(session, Vehicle, chassi, "Veículo não encontrado")


async def create_vehicle(session: AsyncSession, payload: VehicleCreate) -> Vehicle:
    if await session.get(Vehicle, payload.chassi) is not None:
        raise AppException("Já existe um veículo com este chassi")

    data = payload.model_dump()
    data["status"] = payload.status.value
    vehicle = Vehicle(created_at=now_iso(), **data)
    session.add(vehicle)
    await session.commit()
    await session.refresh(vehicle)
    return vehicle


async def update_vehicle(session: AsyncSession, chassi: str, payload: VehicleUpdate) -> Vehicle:
    """Manual edit from the back office.

    Entering stock from ``pre_estoque`` stamps the yard entry and finalizes
    the chassis' in-transit collects; any move to ``despachado`` stamps the
    dispatch time.
    """
    vehicle = await get_vehicle(session, chassi)
    data = payload.model_dump(exclude_unset=True)
    new_status = data.pop("status", None)

    for key, value in data.items():
        setattr(vehicle, key, value)

    if new_status is not None and new_status.value != vehicle.status:
        previous = vehicle.status
        vehicle.status = new_status.value
        now = now_iso()

        if previous == VehicleStatus.PRE_ESTOQUE.value and new_status == VehicleStatus.EM_ESTOQUE:
            vehicle.yard_entry_date_time = now
            result = await session.execute(
                select(Collect).where(
                    Collect.vehicle_chassi == chassi,
                    Collect.status == CollectStatus.EM_TRANSITO.value,
                )
            )
            for collect in result.scalars().all():
                apply_transition("collect", "yard_entry", collect)

        if new_status == VehicleStatus.DESPACHADO:
            vehicle.dispatch_date_time = now

        logger.info("Vehicle %s manually moved %s -> %s", chassi, previous, vehicle.status)

    await session.commit()
    await session.refresh(vehicle)
    return vehicle


async def delete_vehicle(session: AsyncSession, chassi: str) -> None:
    """Delete a vehicle and its collects. Refused while transports reference it."""
    vehicle = await get_vehicle(session, chassi)

    transports = await session.scalar(
        select(func.count()).select_from(Transport).where(Transport.vehicle_chassi == chassi)
    )
    if transports:
        raise AppException("Veículo possui transportes vinculados e não pode ser excluído")

    await session.execute(delete(Collect).where(Collect.vehicle_chassi == chassi))
    await session.delete(vehicle)
    await session.commit()
    logger.info("Vehicle %s deleted with its collects", chassi)
