import logging

from fastapi import APIRouter
from sqlalchemy import delete, select

from app.database import async_session
from app.models.role_permission import RolePermission
from app.schemas.role_permission import (
    FEATURE_KEYS,
    ROLES,
    RolePermissionResponse,
    RolePermissionsUpdate,
)
from app.services.entity_store import new_row
from app.utils.exceptions import AppException
from app.utils.response import success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/role-permissions", tags=["role-permissions"])

# admins must never lose access to user management
ADMIN_REQUIRED_FEATURE = "usuarios"


def _check_role(role: str) -> None:
    if role not in ROLES:
        raise AppException(f"Perfil inválido: {role}")


def allowed_features(role: str, requested: list[str]) -> list[str]:
    features = []
    for feature in requested:
        if feature in FEATURE_KEYS and feature not in features:
            features.append(feature)
    if role == "admin" and ADMIN_REQUIRED_FEATURE not in features:
        features.append(ADMIN_REQUIRED_FEATURE)
    return features


@router.get("")
async def list_role_permissions():
    async with async_session() as session:
        result = await session.execute(
            select(RolePermission).order_by(RolePermission.role, RolePermission.feature)
        )
        data = [RolePermissionResponse.model_validate(p).model_dump() for p in result.scalars().all()]
    return success_response(data=data)


@router.get("/{role}")
async def get_role_permissions(role: str):
    _check_role(role)
    async with async_session() as session:
        result = await session.execute(
            select(RolePermission).where(RolePermission.role == role).order_by(RolePermission.feature)
        )
        data = [RolePermissionResponse.model_validate(p).model_dump() for p in result.scalars().all()]
    return success_response(data=data)


@router.post("/{role}")
async def set_role_permissions(role: str, payload: RolePermissionsUpdate):
    """Replace the feature set of a role in one commit."""
    _check_role(role)
    features = allowed_features(role, payload.features)

    async with async_session() as session:
        await session.execute(delete(RolePermission).where(RolePermission.role == role))
        session.add_all(new_row(RolePermission, {"role": role, "feature": f}) for f in features)
        await session.commit()

    logger.info("Role %s permissions set to %s", role, features)
    return success_response(data={"role": role, "features": features})
