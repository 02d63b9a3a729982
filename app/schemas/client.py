from pydantic import BaseModel, EmailStr, Field

from app.schemas.address import AddressFields, BrazilianState


class ClientCreate(AddressFields):
    name: str = Field(min_length=2)
    cnpj: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    phone: str | None = None
    email: EmailStr | None = None
    contact_name: str | None = None
    daily_cost: str | None = None
    is_active: bool = True


class ClientUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    cnpj: str | None = None
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
    email: EmailStr | None = None
    contact_name: str | None = None
    daily_cost: str | None = None
    is_active: bool | None = None


class ClientResponse(AddressFields):
    id: str
    name: str
    cnpj: str | None = None
    latitude: str | None = None
    longitude: str | None = None
    phone: str | None = None
    email: str | None = None
    contact_name: str | None = None
    daily_cost: str | None = None
    is_active: bool
    created_at: str
    state: str | None = None

    model_config = {"from_attributes": True}


class DeliveryLocationCreate(BaseModel):
    name: str = Field(min_length=2)
    cnpj: str | None = None
    cep: str = Field(min_length=8)
    address: str = Field(min_length=5)
    address_number: str = Field(min_length=1)
    complement: str | None = None
    neighborhood: str = Field(min_length=2)
    city: str = Field(min_length=2)
    state: BrazilianState
    responsible_name: str = Field(min_length=2)
    responsible_phone: str | None = None
    emails: list[EmailStr] = Field(min_length=1)
    is_active: bool = True


class DeliveryLocationUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    cnpj: str | None = None
    cep: str | None = Field(default=None, min_length=8)
    address: str | None = Field(default=None, min_length=5)
    address_number: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    state: BrazilianState | None = None
    responsible_name: str | None = None
    responsible_phone: str | None = None
    emails: list[EmailStr] | None = Field(default=None, min_length=1)
    is_active: bool | None = None


class DeliveryLocationResponse(AddressFields):
    id: str
    client_id: str
    name: str
    cnpj: str | None = None
    responsible_name: str | None = None
    responsible_phone: str | None = None
    emails: list[str] = []
    is_active: bool
    created_at: str
    state: str | None = None

    model_config = {"from_attributes": True}
