from typing import Literal, get_args

from pydantic import BaseModel

from app.schemas.user import UserRole

FeatureKey = Literal[
    "dashboard", "transportes", "coletas", "motoristas", "montadoras",
    "api-docs", "patios", "clientes", "locais", "veiculos", "usuarios",
    "localizar-motorista", "trafego-agora", "portaria",
]

FEATURE_KEYS: tuple[str, ...] = get_args(FeatureKey)
ROLES: tuple[str, ...] = get_args(UserRole)


class RolePermissionsUpdate(BaseModel):
    """Full feature set of a role. Unknown keys are dropped, not rejected."""

    features: list[str]


class RolePermissionResponse(BaseModel):
    id: str
    role: str
    feature: str
    created_at: str

    model_config = {"from_attributes": True}
