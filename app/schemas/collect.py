from datetime import datetime

from pydantic import Field

from app.schemas.checkpoint import CheckinFields, CheckoutFields


class CollectCreate(CheckinFields):
    """New pickup. Any caller-supplied status is ignored."""

    vehicle_chassi: str = Field(min_length=17, max_length=50)
    manufacturer_id: str = Field(min_length=1)
    yard_id: str = Field(min_length=1)
    driver_id: str | None = None
    collect_date: datetime | None = None
    notes: str | None = None
    checkin_date_time: datetime | None = None


class CollectUpdate(CheckinFields, CheckoutFields):
    manufacturer_id: str | None = None
    yard_id: str | None = None
    driver_id: str | None = None
    collect_date: datetime | None = None
    notes: str | None = None
    checkin_date_time: datetime | None = None
    checkout_date_time: datetime | None = None
    checkout_approved_by_id: str | None = None


class CollectResponse(CheckinFields, CheckoutFields):
    id: str
    vehicle_chassi: str
    manufacturer_id: str
    yard_id: str
    driver_id: str | None = None
    status: str
    collect_date: str | None = None
    notes: str | None = None
    checkin_date_time: str | None = None
    checkout_date_time: str | None = None
    checkout_approved_by_id: str | None = None
    created_at: str

    model_config = {"from_attributes": True}
