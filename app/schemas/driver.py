from typing import Literal

from pydantic import BaseModel, EmailStr, Field

from app.schemas.address import AddressFields, BrazilianState

Modality = Literal["pj", "clt", "agregado"]
CnhType = Literal["A", "B", "C", "D", "E", "AB", "AC", "AD", "AE"]


class DriverCreate(AddressFields):
    name: str = Field(min_length=2)
    cpf: str = Field(min_length=11, max_length=14)
    phone: str = Field(min_length=10)
    email: EmailStr | None = None
    birth_date: str | None = None
    modality: Modality
    cnh_type: CnhType
    cnh_front_photo: str | None = None
    cnh_back_photo: str | None = None
    is_apto: bool = False
    is_active: bool = True


class DriverUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=2)
    cpf: str | None = Field(default=None, min_length=11, max_length=14)
    phone: str | None = Field(default=None, min_length=10)
    email: EmailStr | None = None
    birth_date: str | None = None
    cep: str | None = None
    address: str | None = None
    address_number: str | None = None
    complement: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    state: BrazilianState | None = None
    modality: Modality | None = None
    cnh_type: CnhType | None = None
    cnh_front_photo: str | None = None
    cnh_back_photo: str | None = None
    is_apto: bool | None = None
    is_active: bool | None = None


class DriverResponse(AddressFields):
    id: str
    name: str
    cpf: str
    phone: str
    email: str | None = None
    birth_date: str | None = None
    modality: str
    cnh_type: str
    cnh_front_photo: str | None = None
    cnh_back_photo: str | None = None
    is_apto: bool
    is_active: bool
    created_at: str
    state: str | None = None

    model_config = {"from_attributes": True}
