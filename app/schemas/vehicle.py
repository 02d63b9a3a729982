from pydantic import BaseModel, Field, field_validator

from app.models.status import VehicleStatus


class VehicleCreate(BaseModel):
    chassi: str = Field(min_length=17, max_length=50)
    client_id: str | None = None
    yard_id: str | None = None
    manufacturer_id: str | None = None
    color: str | None = None
    status: VehicleStatus = VehicleStatus.PRE_ESTOQUE
    notes: str | None = None


class VehicleUpdate(BaseModel):
    client_id: str | None = None
    yard_id: str | None = None
    manufacturer_id: str | None = None
    color: str | None = None
    status: VehicleStatus | None = None
    notes: str | None = None

    @field_validator("client_id", "yard_id", "manufacturer_id", mode="before")
    @classmethod
    def blank_reference_is_null(cls, value):
        if value == "":
            return None
        return value


class VehicleResponse(BaseModel):
    chassi: str
    client_id: str | None = None
    yard_id: str | None = None
    manufacturer_id: str | None = None
    color: str | None = None
    status: str
    collect_date_time: str | None = None
    yard_entry_date_time: str | None = None
    dispatch_date_time: str | None = None
    delivery_date_time: str | None = None
    notes: str | None = None
    created_at: str

    model_config = {"from_attributes": True}
