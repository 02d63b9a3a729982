from typing import Literal

from pydantic import BaseModel, EmailStr, Field

UserRole = Literal["admin", "operador", "visualizador", "motorista", "portaria"]


class UserCreate(BaseModel):
    username: str = Field(min_length=3, max_length=100)
    password: str = Field(min_length=6)
    email: EmailStr | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole = "visualizador"
    is_active: bool = True


class UserUpdate(BaseModel):
    password: str | None = Field(default=None, min_length=6)
    email: EmailStr | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: UserRole | None = None
    is_active: bool | None = None


class UserResponse(BaseModel):
    id: str
    username: str
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: str
    is_active: bool
    last_login: str | None = None
    created_at: str

    model_config = {"from_attributes": True}
