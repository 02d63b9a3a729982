from pydantic import BaseModel, Field

from app.models.status import TransportStatus
from app.schemas.checkpoint import CheckinFields, CheckoutFields


class TransportCreate(BaseModel):
    vehicle_chassi: str = Field(min_length=17, max_length=50)
    client_id: str = Field(min_length=1)
    origin_yard_id: str = Field(min_length=1)
    delivery_location_id: str = Field(min_length=1)
    driver_id: str | None = None
    status: TransportStatus = TransportStatus.PENDENTE
    delivery_date: str | None = None
    notes: str | None = None
    documents: list[str] | None = None


class TransportUpdate(BaseModel):
    """Editable transport data. Status and checkpoint legs change only through the workflow routes."""

    client_id: str | None = None
    origin_yard_id: str | None = None
    delivery_location_id: str | None = None
    driver_id: str | None = None
    delivery_date: str | None = None
    notes: str | None = None
    documents: list[str] | None = None


class TransportResponse(CheckinFields, CheckoutFields):
    id: str
    request_number: str
    vehicle_chassi: str
    client_id: str
    origin_yard_id: str
    delivery_location_id: str
    driver_id: str | None = None
    status: str
    delivery_date: str | None = None
    notes: str | None = None
    documents: list[str] | None = None
    driver_assigned_at: str | None = None
    transit_started_at: str | None = None
    checkin_date_time: str | None = None
    checkout_date_time: str | None = None
    created_at: str

    model_config = {"from_attributes": True}
