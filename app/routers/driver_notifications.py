import logging

from fastapi import APIRouter
from sqlalchemy import select

from app.database import async_session
from app.models.client import DeliveryLocation
from app.models.driver import Driver
from app.models.driver_notification import DriverNotification
from app.models.status import NotificationStatus
from app.models.yard import Yard
from app.schemas.driver_notification import DriverNotificationResponse, NotifyDriversRequest
from app.services.entity_store import get_or_404, new_row
from app.utils.exceptions import AppException
from app.utils.response import success_response
from app.utils.timestamps import now_iso

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/driver-notifications", tags=["driver-notifications"])


@router.get("")
async def list_notifications(
    yard_id: str | None = None,
    delivery_location_id: str | None = None,
    departure_date: str | None = None,
):
    if not (yard_id and delivery_location_id and departure_date):
        raise AppException("yard_id, delivery_location_id e departure_date são obrigatórios")

    async with async_session() as session:
        result = await session.execute(
            select(DriverNotification, Driver)
            .join(Driver, Driver.id == DriverNotification.driver_id)
            .where(
                DriverNotification.yard_id == yard_id,
                DriverNotification.delivery_location_id == delivery_location_id,
                DriverNotification.departure_date == departure_date,
            )
            .order_by(Driver.name)
        )
        data = []
        for notification, driver in result.all():
            item = DriverNotificationResponse.model_validate(notification).model_dump()
            item["driver"] = {"id": driver.id, "name": driver.name, "phone": driver.phone}
            data.append(item)
    return success_response(data=data)


@router.post("/notify", status_code=201)
async def notify_drivers(payload: NotifyDriversRequest):
    """Offer a departure to every active driver."""
    async with async_session() as session:
        await get_or_404(session, Yard, payload.yard_id, "Pátio não encontrado")
        await get_or_404(session, DeliveryLocation, payload.delivery_location_id, "Local de entrega não encontrado")

        result = await session.execute(select(Driver).where(Driver.is_active.is_(True)))
        notifications = [
            new_row(DriverNotification, {
                **payload.model_dump(),
                "driver_id": driver.id,
                "status": NotificationStatus.PENDENTE.value,
            })
            for driver in result.scalars().all()
        ]
        session.add_all(notifications)
        await session.commit()
        data = [DriverNotificationResponse.model_validate(n).model_dump() for n in notifications]

    logger.info("Notified %d drivers of departure %s from yard %s", len(data), payload.departure_date, payload.yard_id)
    return success_response(data=data, message=f"{len(data)} motoristas notificados")


async def _respond(notification_id: str, status: NotificationStatus) -> dict:
    async with async_session() as session:
        notification = await get_or_404(session, DriverNotification, notification_id, "Notificação não encontrada")
        notification.status = status.value
        notification.responded_at = now_iso()
        await session.commit()
        await session.refresh(notification)
        return DriverNotificationResponse.model_validate(notification).model_dump()


@router.post("/{notification_id}/accept")
async def accept_notification(notification_id: str):
    return success_response(data=await _respond(notification_id, NotificationStatus.ACEITO))


@router.post("/{notification_id}/decline")
async def decline_notification(notification_id: str):
    return success_response(data=await _respond(notification_id, NotificationStatus.RECUSADO))
