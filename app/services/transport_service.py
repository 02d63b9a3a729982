"""Transport (dispatch) operations and their vehicle side effects."""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.checkpoint import leg_columns
from app.models.status import TransportStatus
from app.models.transport import Transport
from app.models.vehicle import Vehicle
from app.schemas.checkpoint import CheckpointPayload
from app.schemas.transport import TransportCreate, TransportUpdate
from app.services.entity_store import get_or_404, new_row
from app.services.request_numbers import format_request_number, next_request_number
from app.services.workflow import apply_transition
from app.utils.exceptions import AppException
from app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)


async def get_transport(session: AsyncSession, transport_id: str) -> Transport:
    return await get_or_404(session, Transport, transport_id, "Transporte não encontrado")


async def _get_vehicle(session: AsyncSession, transport: Transport) -> Vehicle:
    return await get_or_404(session, Vehicle, transport.vehicle_chassi, "Veículo não encontrado")


async def create_transport(session: AsyncSession, payload: TransportCreate) -> Transport:
    await get_or_404(session, Vehicle, payload.vehicle_chassi, "Veículo não encontrado")

    data = payload.model_dump()
    data["status"] = payload.status.value
    if payload.driver_id:
        data["driver_assigned_at"] = now_iso()

    number = await next_request_number(session)
    transport = new_row(Transport, {"request_number": format_request_number(number), **data})
    session.add(transport)
    await session.commit()
    await session.refresh(transport)
    logger.info("Transport %s created for vehicle %s", transport.request_number, transport.vehicle_chassi)
    return transport


async def update_transport(session: AsyncSession, transport_id: str, payload: TransportUpdate) -> Transport:
    transport = await get_transport(session, transport_id)
    data = payload.model_dump(exclude_unset=True)

    if data.get("driver_id") and not transport.driver_id:
        data["driver_assigned_at"] = now_iso()

    for key, value in data.items():
        setattr(transport, key, value)

    await session.commit()
    await session.refresh(transport)
    return transport


async def authorize_exit(session: AsyncSession, transport_id: str) -> Transport:
    """Gate exit of a stocked vehicle leaving on a pending transport."""
    transport = await get_transport(session, transport_id)
    vehicle = await _get_vehicle(session, transport)

    apply_transition("transport", "authorize_exit", transport, vehicle)
    now = now_iso()
    vehicle.dispatch_date_time = now
    transport.transit_started_at = now

    await session.commit()
    await session.refresh(transport)
    return transport


def _stamp_leg(transport: Transport, leg: str, payload: CheckpointPayload) -> None:
    setattr(transport, f"{leg}_date_time", now_iso())
    for key, value in payload.as_leg(leg).items():
        setattr(transport, key, value)


def _clear_leg(transport: Transport, leg: str) -> None:
    for column in leg_columns(leg):
        setattr(transport, column, None)


async def checkin(session: AsyncSession, transport_id: str, payload: CheckpointPayload) -> Transport:
    """Driver picks the vehicle up at the origin yard."""
    transport = await get_transport(session, transport_id)
    vehicle = await _get_vehicle(session, transport)

    apply_transition("transport", "checkin", transport, vehicle)
    _stamp_leg(transport, "checkin", payload)

    await session.commit()
    await session.refresh(transport)
    return transport


async def checkout(session: AsyncSession, transport_id: str, payload: CheckpointPayload) -> Transport:
    """Driver hands the vehicle over at the delivery location."""
    transport = await get_transport(session, transport_id)
    if transport.checkin_date_time is None:
        raise AppException("O check-in deve ser realizado antes do check-out")
    vehicle = await _get_vehicle(session, transport)

    apply_transition("transport", "checkout", transport, vehicle)
    _stamp_leg(transport, "checkout", payload)
    vehicle.delivery_date_time = transport.checkout_date_time

    await session.commit()
    await session.refresh(transport)
    return transport


async def clear_checkin(session: AsyncSession, transport_id: str) -> Transport:
    transport = await get_transport(session, transport_id)
    if transport.checkout_date_time is not None:
        raise AppException("Remova o check-out antes de remover o check-in")
    vehicle = await _get_vehicle(session, transport)

    apply_transition("transport", "clear_checkin", transport, vehicle)
    _clear_leg(transport, "checkin")
    if transport.status == TransportStatus.PENDENTE.value:
        transport.transit_started_at = None

    await session.commit()
    await session.refresh(transport)
    return transport


async def clear_checkout(session: AsyncSession, transport_id: str) -> Transport:
    transport = await get_transport(session, transport_id)
    vehicle = await _get_vehicle(session, transport)

    apply_transition("transport", "clear_checkout", transport, vehicle)
    _clear_leg(transport, "checkout")
    vehicle.delivery_date_time = None

    await session.commit()
    await session.refresh(transport)
    return transport
