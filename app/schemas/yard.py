from pydantic import BaseModel, Field

from app.schemas.address import AddressFields, BrazilianState


class YardCreate(AddressFields):
    name: str = Field(min_length=2)
    latitude: str | None = None
    longitude: str | None = None
    phone: str | None = None
    max_vehicles: int | None = Field(default=None, ge=0)
    is_active: bool = True


class YardUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    cep: str | None = None
    address: str | None = None
    address_number: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    state: BrazilianState | None = None
    latitude: str | None = None
    longitude: str | None = None
    phone: str | None = None
    max_vehicles: int | None = Field(default=None, ge=0)
    is_active: bool | None = None


class YardResponse(AddressFields):
    id: str
    name: str
    latitude: str | None = None
    longitude: str | None = None
    phone: str | None = None
    max_vehicles: int | None = None
    is_active: bool
    created_at: str
    state: str | None = None

    model_config = {"from_attributes": True}
