from pydantic import BaseModel, EmailStr, Field

from app.schemas.address import AddressFields, BrazilianState


class ManufacturerCreate(AddressFields):
    name: str = Field(min_length=2)
    phone: str | None = None
    email: EmailStr | None = None
    contact_name: str | None = None
    is_active: bool = True


class ManufacturerUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    cep: str | None = None
    address: str | None = None
    address_number: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    state: BrazilianState | None = None
    phone: str | None = None
    email: EmailStr | None = None
    contact_name: str | None = None
    is_active: bool | None = None


class ManufacturerResponse(AddressFields):
    id: str
    name: str
    phone: str | None = None
    email: str | None = None
    contact_name: str | None = None
    is_active: bool
    created_at: str
    state: str | None = None

    model_config = {"from_attributes": True}
