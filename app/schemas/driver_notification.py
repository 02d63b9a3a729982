from pydantic import BaseModel, Field


class NotifyDriversRequest(BaseModel):
    yard_id: str = Field(min_length=1)
    delivery_location_id: str = Field(min_length=1)
    departure_date: str = Field(min_length=1)


class DriverNotificationResponse(BaseModel):
    id: str
    yard_id: str
    delivery_location_id: str
    departure_date: str
    driver_id: str
    status: str
    responded_at: str | None = None
    created_at: str

    model_config = {"from_attributes": True}
