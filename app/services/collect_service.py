"""Collect (pickup) operations that also move the vehicle."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.collect import Collect
from app.models.status import VehicleStatus
from app.models.vehicle import Vehicle
from app.schemas.collect import CollectCreate, CollectUpdate
from app.services.entity_store import get_or_404, new_row
from app.services.workflow import apply_transition
from app.utils.timestamps import now_iso, to_iso

logger = logging.getLogger(__name__)

_DATETIME_FIELDS = ("collect_date", "checkin_date_time", "checkout_date_time")


def _stored_values(data: dict) -> dict:
    for field in _DATETIME_FIELDS:
        if field in data:
            data[field] = to_iso(data[field])
    return data


async def get_collect(session: AsyncSession, collect_id: str) -> Collect:
    return await get_or_404(session, Collect, collect_id, "Coleta não encontrada")


async def create_collect(session: AsyncSession, payload: CollectCreate) -> Collect:
    data = _stored_values(payload.model_dump(exclude_unset=True))

    vehicle = await session.get(Vehicle, payload.vehicle_chassi)
    if vehicle is None:
        vehicle = Vehicle(
            chassi=payload.vehicle_chassi,
            manufacturer_id=payload.manufacturer_id,
            status=VehicleStatus.PRE_ESTOQUE.value,
            collect_date_time=data.get("collect_date"),
            created_at=now_iso(),
        )
        session.add(vehicle)
        logger.info("Vehicle %s registered as pre_estoque by a new collect", vehicle.chassi)

    collect = new_row(Collect, data)
    apply_transition("collect", "create", collect)
    session.add(collect)
    await session.commit()
    await session.refresh(collect)
    return collect


async def update_collect(session: AsyncSession, collect_id: str, payload: CollectUpdate) -> Collect:
    """Partial update. Setting the first checkout time completes the collect."""
    collect = await get_collect(session, collect_id)
    data = _stored_values(payload.model_dump(exclude_unset=True))
    completes_checkout = bool(data.get("checkout_date_time")) and collect.checkout_date_time is None

    for key, value in data.items():
        setattr(collect, key, value)

    if completes_checkout:
        vehicle = await session.get(Vehicle, collect.vehicle_chassi)
        apply_transition("collect", "checkout", collect, vehicle)
        if vehicle is not None:
            vehicle.yard_id = collect.yard_id
            vehicle.yard_entry_date_time = collect.checkout_date_time

    await session.commit()
    await session.refresh(collect)
    return collect


async def authorize_entry(session: AsyncSession, collect_id: str) -> Collect:
    """Gate entry of a collected vehicle into its destination yard."""
    collect = await get_collect(session, collect_id)
    vehicle = await get_or_404(session, Vehicle, collect.vehicle_chassi, "Veículo não encontrado")

    apply_transition("collect", "authorize_entry", collect, vehicle)
    vehicle.yard_id = collect.yard_id
    vehicle.yard_entry_date_time = now_iso()

    await session.commit()
    await session.refresh(collect)
    return collect
